"""Version information for managed_certs."""

__version__ = "0.1.0"
