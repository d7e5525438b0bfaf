"""Kubernetes custom resource models."""

from managed_certs.integrations.kubernetes.models.base import K8sEntityBase
from managed_certs.integrations.kubernetes.models.managed_certificate import (
    MANAGED_CERTIFICATE_GROUP,
    MANAGED_CERTIFICATE_KIND,
    MANAGED_CERTIFICATE_PLURAL,
    MANAGED_CERTIFICATE_VERSION,
    ManagedCertificate,
)

__all__ = [
    "MANAGED_CERTIFICATE_GROUP",
    "MANAGED_CERTIFICATE_KIND",
    "MANAGED_CERTIFICATE_PLURAL",
    "MANAGED_CERTIFICATE_VERSION",
    "K8sEntityBase",
    "ManagedCertificate",
]
