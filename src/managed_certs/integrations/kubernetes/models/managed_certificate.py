"""ManagedCertificate custom resource model.

ManagedCertificates are read through ``CustomObjectsApi`` which returns raw
``dict`` objects, so ``from_k8s_object`` uses ``dict.get()``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from managed_certs.integrations.kubernetes.models.base import K8sEntityBase, _metadata_fields

MANAGED_CERTIFICATE_GROUP = "networking.gke.io"
MANAGED_CERTIFICATE_VERSION = "v1"
MANAGED_CERTIFICATE_PLURAL = "managedcertificates"
MANAGED_CERTIFICATE_KIND = "ManagedCertificate"


class ManagedCertificate(K8sEntityBase):
    """A user-declared desired certificate."""

    domains: list[str] = Field(default_factory=list, description="Domains to cover")
    certificate_name: str | None = Field(
        default=None, description="Name of the backing SslCertificate"
    )
    certificate_status: str | None = Field(
        default=None, description="Provisioning status of the backing SslCertificate"
    )

    @property
    def api_version(self) -> str:
        """apiVersion of the custom resource."""
        return f"{MANAGED_CERTIFICATE_GROUP}/{MANAGED_CERTIFICATE_VERSION}"

    @property
    def kind(self) -> str:
        """Kind of the custom resource."""
        return MANAGED_CERTIFICATE_KIND

    @property
    def qualified_name(self) -> str:
        """``namespace/name`` reference."""
        return f"{self.namespace or 'default'}/{self.name}"

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> ManagedCertificate:
        """Create from a ManagedCertificate custom object dict."""
        spec: dict[str, Any] = obj.get("spec", {})
        status: dict[str, Any] = obj.get("status", {})
        return cls(
            **_metadata_fields(obj),
            domains=list(spec.get("domains", [])),
            certificate_name=status.get("certificateName"),
            certificate_status=status.get("certificateStatus"),
        )
