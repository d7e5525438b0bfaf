"""Configuration management with Pydantic validation."""

from managed_certs.core.config.models import (
    CONFIG_FILE,
    SystemConfig,
    load_config,
    resolve_config,
)

__all__ = [
    "CONFIG_FILE",
    "SystemConfig",
    "load_config",
    "resolve_config",
]
