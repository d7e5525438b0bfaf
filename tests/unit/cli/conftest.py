"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, nullcontext
from unittest.mock import MagicMock, patch

import pytest

from managed_certs.core.config.models import SystemConfig
from managed_certs.integrations.kubernetes.models.managed_certificate import (
    ManagedCertificate,
)


@pytest.fixture(autouse=True)
def _no_logging_setup() -> Iterator[MagicMock]:
    """Keep the root callback from attaching handlers and log files."""
    with patch("managed_certs.cli.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def system_config() -> SystemConfig:
    """Configuration returned by the root callback."""
    return SystemConfig(compute={"project": "my-project"})


@pytest.fixture
def mock_resolve_config(system_config: SystemConfig) -> Iterator[MagicMock]:
    """Skip reading ~/.config/mcrt/config.yaml."""
    with patch("managed_certs.cli.main.resolve_config", return_value=system_config) as mock:
        yield mock


@pytest.fixture
def mock_ssl_manager() -> MagicMock:
    """Create a mock SslCertificateManager."""
    manager = MagicMock()
    manager.exists.return_value = True
    manager.get.return_value = None
    return manager


@pytest.fixture
def owner() -> ManagedCertificate:
    """The ManagedCertificate resolved from --for."""
    return ManagedCertificate(
        name="my-cert",
        namespace="default",
        uid="uid-mcrt-123",
        domains=["example.com"],
    )


@pytest.fixture
def mock_build_services(
    mock_resolve_config: MagicMock,
    mock_ssl_manager: MagicMock,
    owner: ManagedCertificate,
) -> Iterator[MagicMock]:
    """Patch service construction used by the certs commands."""

    def _build(
        config: SystemConfig, reference: str | None
    ) -> AbstractContextManager[tuple[MagicMock, ManagedCertificate | None]]:
        return nullcontext((mock_ssl_manager, owner if reference is not None else None))

    with patch(
        "managed_certs.cli.commands.certificates.build_services", side_effect=_build
    ) as mock:
        yield mock
