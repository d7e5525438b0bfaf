"""Compute integration configuration models."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_API_URL = "https://compute.googleapis.com/compute/beta"


class ComputeConfig(BaseModel):
    """Connection settings for the Compute SslCertificates API."""

    model_config = ConfigDict(extra="forbid")

    project: str = Field(default="", description="Cloud project that owns the certificates")
    token: SecretStr | None = Field(default=None, description="OAuth2 bearer token")
    api_url: str = Field(default=DEFAULT_API_URL, description="Compute API base URL")
    timeout: float = Field(default=30.0, description="Per-request timeout in seconds")
    retry_attempts: int = Field(default=3, description="Attempts on connection failures")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Validate at least one attempt is made."""
        if v < 1:
            raise ValueError("retry_attempts must be at least 1")
        return v

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL."""
        return v.rstrip("/")

    @property
    def certificates_path(self) -> str:
        """Collection path of global SslCertificates for the project."""
        return f"/projects/{self.project}/global/sslCertificates"

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> ComputeConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            MCRT_COMPUTE_PROJECT: Cloud project
            MCRT_COMPUTE_TOKEN: OAuth2 bearer token
            MCRT_COMPUTE_API_URL: API base URL
            MCRT_COMPUTE_TIMEOUT: Request timeout in seconds
            MCRT_COMPUTE_RETRY_ATTEMPTS: Attempts on connection failures
        """
        config_dict = base_config.copy() if base_config else {}

        if project := os.environ.get("MCRT_COMPUTE_PROJECT"):
            config_dict["project"] = project
        if token := os.environ.get("MCRT_COMPUTE_TOKEN"):
            config_dict["token"] = token
        if api_url := os.environ.get("MCRT_COMPUTE_API_URL"):
            config_dict["api_url"] = api_url
        if timeout := os.environ.get("MCRT_COMPUTE_TIMEOUT"):
            config_dict["timeout"] = float(timeout)
        if attempts := os.environ.get("MCRT_COMPUTE_RETRY_ATTEMPTS"):
            config_dict["retry_attempts"] = int(attempts)

        return cls(**config_dict)
