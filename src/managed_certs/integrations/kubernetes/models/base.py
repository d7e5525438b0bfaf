"""Base models for Kubernetes custom resources."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class K8sEntityBase(BaseModel):
    """Base class for Kubernetes resource models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    resource_version: str | None = Field(default=None, description="Resource version")
    creation_timestamp: str | None = Field(default=None, description="Creation time")
    labels: dict[str, str] | None = Field(default=None, description="Resource labels")


def _metadata_fields(obj: dict[str, Any]) -> dict[str, Any]:
    """Extract the common metadata fields of a custom object dict."""
    metadata: dict[str, Any] = obj.get("metadata", {})
    labels = metadata.get("labels")
    return {
        "name": metadata.get("name", ""),
        "namespace": metadata.get("namespace"),
        "uid": metadata.get("uid"),
        "resource_version": metadata.get("resourceVersion"),
        "creation_timestamp": metadata.get("creationTimestamp"),
        "labels": dict(labels) if labels else None,
    }
