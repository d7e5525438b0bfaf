"""Kubernetes integration."""

from managed_certs.integrations.kubernetes.client import KubernetesClient
from managed_certs.integrations.kubernetes.config import KubernetesConfig
from managed_certs.integrations.kubernetes.exceptions import (
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
)

__all__ = [
    "KubernetesClient",
    "KubernetesConfig",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
]
