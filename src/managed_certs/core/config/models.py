"""Configuration models and YAML loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from managed_certs.integrations.compute.config import ComputeConfig
from managed_certs.integrations.kubernetes.config import KubernetesConfig

CONFIG_DIR = Path.home() / ".config" / "mcrt"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

_VALID_ENVIRONMENTS = ("development", "staging", "production")
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_YAML_HEADER = """\
# Managed Certificates Controller Configuration
# Environment variables (MCRT_COMPUTE_*, MCRT_K8S_*) override these values.

"""


class SystemConfig(BaseModel):
    """Top-level configuration for the controller and CLI."""

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    environment: str = "development"
    log_level: str = "WARNING"
    json_logs: bool = False
    compute: ComputeConfig = Field(default_factory=ComputeConfig)
    kubernetes: KubernetesConfig = Field(default_factory=KubernetesConfig)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate the deployment environment name."""
        if v not in _VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{v}', must be one of: {', '.join(_VALID_ENVIRONMENTS)}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level."""
        level = v.upper()
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{v}', must be one of: {', '.join(_VALID_LOG_LEVELS)}")
        return level

    def with_env_overrides(self) -> SystemConfig:
        """Return a copy with MCRT_* environment variables applied."""
        return self.model_copy(
            update={
                "compute": ComputeConfig.from_env(self.compute.model_dump()),
                "kubernetes": KubernetesConfig.from_env(self.kubernetes.model_dump()),
            }
        )

    def to_yaml(self) -> str:
        """Render as YAML with a comment header. The compute token is never written."""
        data = self.model_dump(mode="json", exclude={"compute": {"token"}})
        return _YAML_HEADER + yaml.safe_dump(data, sort_keys=False)


def load_config(path: Path | None = None) -> SystemConfig | None:
    """Load and validate the config file.

    Args:
        path: Config file path; defaults to ``~/.config/mcrt/config.yaml``.

    Returns:
        The parsed configuration, or None if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML or fails validation.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return None
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    if data is None:
        return SystemConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config in {config_path}: expected a mapping")
    return SystemConfig(**data)


def resolve_config(path: Path | None = None) -> SystemConfig:
    """Load the config file (or defaults) and apply environment overrides."""
    config = load_config(path) or SystemConfig()
    return config.with_env_overrides()
