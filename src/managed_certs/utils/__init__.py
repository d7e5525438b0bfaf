"""Utility functions for managed_certs."""

from managed_certs.utils.random import NameGenerationError, random_name

__all__ = ["NameGenerationError", "random_name"]
