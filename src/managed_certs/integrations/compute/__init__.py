"""Compute SslCertificates integration."""

from managed_certs.integrations.compute.client import SslCertificatesClient
from managed_certs.integrations.compute.config import ComputeConfig
from managed_certs.integrations.compute.exceptions import (
    ComputeAPIError,
    ComputeConfigError,
    ComputeConnectionError,
    ComputeError,
    ComputeNotFoundError,
    ErrorItem,
)
from managed_certs.integrations.compute.models import ManagedSslCertificate, SslCertificate

__all__ = [
    "ComputeAPIError",
    "ComputeConfig",
    "ComputeConfigError",
    "ComputeConnectionError",
    "ComputeError",
    "ComputeNotFoundError",
    "ErrorItem",
    "ManagedSslCertificate",
    "SslCertificate",
    "SslCertificatesClient",
]
