"""Core functionality for managed_certs."""
