"""Command-line interface for managed_certs."""
