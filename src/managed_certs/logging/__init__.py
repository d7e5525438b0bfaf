"""Logging configuration for managed_certs."""

from managed_certs.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
