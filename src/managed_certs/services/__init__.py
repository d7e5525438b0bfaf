"""Service layer for managed_certs."""
