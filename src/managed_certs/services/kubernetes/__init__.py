"""Kubernetes service module."""

from managed_certs.services.kubernetes.managed_certificate_manager import (
    ManagedCertificateManager,
    parse_reference,
)

__all__ = ["ManagedCertificateManager", "parse_reference"]
