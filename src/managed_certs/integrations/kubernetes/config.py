"""Kubernetes integration configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_COMPONENT = "managed-certificate-controller"


class KubernetesConfig(BaseModel):
    """Cluster access and event attribution settings."""

    model_config = ConfigDict(extra="forbid")

    kubeconfig: str | None = None
    context: str | None = None
    namespace: str = "default"
    component: str = DEFAULT_COMPONENT

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser()) if v else None

    @field_validator("component")
    @classmethod
    def validate_component(cls, v: str) -> str:
        """Validate the event source component is set."""
        if not v.strip():
            raise ValueError("component must not be empty")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubernetesConfig:
        """Create configuration with environment variable overrides.

        Supported environment variables:
            MCRT_K8S_KUBECONFIG: Path to kubeconfig
            MCRT_K8S_CONTEXT: kubeconfig context
            MCRT_K8S_NAMESPACE: Default namespace for ManagedCertificates
        """
        config_dict = base_config.copy() if base_config else {}

        if kubeconfig := os.environ.get("MCRT_K8S_KUBECONFIG"):
            config_dict["kubeconfig"] = kubeconfig
        if context := os.environ.get("MCRT_K8S_CONTEXT"):
            config_dict["context"] = context
        if namespace := os.environ.get("MCRT_K8S_NAMESPACE"):
            config_dict["namespace"] = namespace

        return cls(**config_dict)
