"""Compute SslCertificate models.

The Compute API returns camelCase JSON; models accept it through aliases
and keep snake_case attributes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CERTIFICATE_TYPE_MANAGED = "MANAGED"


class ManagedSslCertificate(BaseModel):
    """The ``managed`` section of a MANAGED SslCertificate."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    domains: list[str] = Field(default_factory=list, description="Domains covered")
    status: str | None = Field(default=None, description="Provisioning status, e.g. ACTIVE")
    domain_status: dict[str, str] = Field(
        default_factory=dict,
        alias="domainStatus",
        description="Per-domain provisioning status",
    )


class SslCertificate(BaseModel):
    """A Compute global SslCertificate resource."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(description="Resource name")
    id: str | None = Field(default=None, description="Server-assigned identifier")
    type: str = Field(default=CERTIFICATE_TYPE_MANAGED, description="SELF_MANAGED or MANAGED")
    managed: ManagedSslCertificate = Field(default_factory=ManagedSslCertificate)
    self_link: str | None = Field(default=None, alias="selfLink")
    creation_timestamp: str | None = Field(default=None, alias="creationTimestamp")
    expire_time: str | None = Field(default=None, alias="expireTime")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SslCertificate:
        """Create from a Compute API JSON object."""
        return cls.model_validate(data)

    @property
    def status(self) -> str:
        """Provisioning status, or ``UNKNOWN`` when the backend reports none."""
        return self.managed.status or "UNKNOWN"

    def to_create_body(self) -> dict[str, Any]:
        """Build the JSON body for an insert request."""
        return {
            "name": self.name,
            "type": self.type,
            "managed": {"domains": list(self.managed.domains)},
        }
