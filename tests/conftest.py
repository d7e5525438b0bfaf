"""Shared pytest fixtures for managed_certs tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from typer.testing import CliRunner

from managed_certs.integrations.compute.exceptions import (
    ComputeAPIError,
    ComputeNotFoundError,
    ErrorItem,
)
from managed_certs.integrations.compute.models import SslCertificate
from managed_certs.integrations.kubernetes.models.managed_certificate import (
    ManagedCertificate,
)


@dataclass
class FakeBackend:
    """Certificate backend returning canned results.

    Every operation raises ``err`` when set; otherwise ``exists`` returns
    ``exists_value`` and ``get`` returns ``certificate``.
    """

    err: Exception | None = None
    exists_value: bool = False
    certificate: SslCertificate | None = None
    calls: list[tuple[str, tuple[object, ...]]] = field(default_factory=list)

    def _call(self, operation: str, *args: object) -> None:
        self.calls.append((operation, args))
        if self.err is not None:
            raise self.err

    def create(self, name: str, domains: list[str]) -> None:
        self._call("create", name, domains)

    def delete(self, name: str) -> None:
        self._call("delete", name)

    def exists(self, name: str) -> bool:
        self._call("exists", name)
        return self.exists_value

    def get(self, name: str) -> SslCertificate | None:
        self._call("get", name)
        return self.certificate


@dataclass
class FakeEvents:
    """Event sink counting each kind of event."""

    backend_error_cnt: int = 0
    create_cnt: int = 0
    delete_cnt: int = 0
    too_many_cnt: int = 0
    recorded: list[tuple[str, ManagedCertificate, object]] = field(default_factory=list)

    def backend_error(self, mcrt: ManagedCertificate, err: BaseException) -> None:
        self.backend_error_cnt += 1
        self.recorded.append(("BackendError", mcrt, err))

    def create(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None:
        self.create_cnt += 1
        self.recorded.append(("Create", mcrt, ssl_certificate_name))

    def delete(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None:
        self.delete_cnt += 1
        self.recorded.append(("Delete", mcrt, ssl_certificate_name))

    def too_many_certificates(self, mcrt: ManagedCertificate, err: BaseException) -> None:
        self.too_many_cnt += 1
        self.recorded.append(("TooManyCertificates", mcrt, err))

    @property
    def total(self) -> int:
        return len(self.recorded)


@pytest.fixture
def make_backend() -> Callable[..., FakeBackend]:
    """Factory for fake certificate backends."""
    return FakeBackend


@pytest.fixture
def fake_events() -> FakeEvents:
    """A fresh counting event sink."""
    return FakeEvents()


@pytest.fixture
def normal_error() -> Exception:
    """An error with no status code."""
    return RuntimeError("normal error")


@pytest.fixture
def quota_exceeded_error() -> ComputeAPIError:
    """A 403 with a quotaExceeded detail item."""
    return ComputeAPIError(
        "Quota 'SSL_CERTIFICATES' exceeded. Limit: 15.0 globally.",
        status_code=403,
        errors=[ErrorItem(reason="quotaExceeded", domain="usageLimits")],
    )


@pytest.fixture
def not_found_error() -> ComputeNotFoundError:
    """A 404 from the backend."""
    return ComputeNotFoundError("The resource was not found", status_code=404)


@pytest.fixture
def managed_certificate() -> ManagedCertificate:
    """A desired certificate owning the SslCertificate."""
    return ManagedCertificate(
        name="my-cert",
        namespace="default",
        uid="uid-mcrt-123",
        resource_version="42",
        domains=["example.com", "www.example.com"],
    )


@pytest.fixture
def ssl_certificate() -> SslCertificate:
    """A provisioned SslCertificate."""
    return SslCertificate.from_api(
        {
            "name": "mcrt-1234",
            "id": "1234567890",
            "type": "MANAGED",
            "managed": {
                "domains": ["example.com"],
                "status": "ACTIVE",
                "domainStatus": {"example.com": "ACTIVE"},
            },
            "creationTimestamp": "2026-01-01T00:00:00.000-08:00",
            "expireTime": "2026-04-01T00:00:00.000-07:00",
        }
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear MCRT_ prefixed environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("MCRT_"):
            monkeypatch.delenv(key, raising=False)
