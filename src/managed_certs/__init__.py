"""Reconciliation of Compute SSL certificates with ManagedCertificate resources."""

from managed_certs.__version__ import __version__

__all__ = ["__version__"]
