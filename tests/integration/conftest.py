"""Integration fixtures: an in-memory Compute SslCertificates API.

The real ``SslCertificatesClient`` talks HTTP to ``FakeComputeAPI`` through
``httpx.MockTransport``, so requests, error bodies and classification run
end to end without network access.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock, patch

import httpx
import pytest

from managed_certs.integrations.compute.client import SslCertificatesClient
from managed_certs.integrations.compute.config import ComputeConfig
from managed_certs.integrations.kubernetes.models.managed_certificate import (
    ManagedCertificate,
)
from managed_certs.services.ssl.events import KubernetesEventRecorder

PROJECT = "test-project"
_COLLECTION = re.compile(rf"^/compute/beta/projects/{PROJECT}/global/sslCertificates/?$")
_ITEM = re.compile(rf"^/compute/beta/projects/{PROJECT}/global/sslCertificates/([^/]+)$")


def _error(status_code: int, message: str, reason: str) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={
            "error": {
                "code": status_code,
                "message": message,
                "errors": [{"message": message, "domain": "global", "reason": reason}],
            }
        },
    )


@dataclass
class FakeComputeAPI:
    """Minimal global SslCertificates collection with a certificate quota."""

    quota: int = 15
    certificates: dict[str, dict[str, Any]] = field(default_factory=dict)
    requests: list[tuple[str, str]] = field(default_factory=list)
    fail_with: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        if self.fail_with is not None:
            return _error(self.fail_with, "Internal error", "backendError")

        path = request.url.path
        if _COLLECTION.match(path):
            if request.method == "POST":
                return self._insert(request)
            return httpx.Response(200, json={"items": list(self.certificates.values())})

        match = _ITEM.match(path)
        if match is None:
            return _error(400, f"Invalid path {path}", "invalid")
        name = match.group(1)
        if name not in self.certificates:
            return _error(404, f"The resource '{name}' was not found", "notFound")
        if request.method == "DELETE":
            del self.certificates[name]
            return httpx.Response(200, json={"kind": "compute#operation", "status": "DONE"})
        return httpx.Response(200, json=self.certificates[name])

    def _insert(self, request: httpx.Request) -> httpx.Response:
        if len(self.certificates) >= self.quota:
            return _error(
                403,
                f"Quota 'SSL_CERTIFICATES' exceeded. Limit: {self.quota}.0 globally.",
                "quotaExceeded",
            )
        cert = json.loads(request.content)
        if cert["name"] in self.certificates:
            return _error(409, f"The resource '{cert['name']}' already exists", "alreadyExists")
        cert["managed"]["status"] = "PROVISIONING"
        self.certificates[cert["name"]] = cert
        return httpx.Response(200, json={"kind": "compute#operation", "status": "RUNNING"})


@pytest.fixture
def compute_api() -> FakeComputeAPI:
    """In-memory Compute API."""
    return FakeComputeAPI()


@pytest.fixture
def ssl_client(compute_api: FakeComputeAPI) -> Iterator[SslCertificatesClient]:
    """A real SslCertificatesClient wired to the in-memory API."""
    real_client = httpx.Client
    transport = httpx.MockTransport(compute_api)

    def _client(**kwargs: Any) -> httpx.Client:
        return real_client(transport=transport, **kwargs)

    with patch("managed_certs.integrations.compute.client.httpx.Client", side_effect=_client):
        client = SslCertificatesClient(ComputeConfig(project=PROJECT, retry_attempts=1))
    yield client
    client.close()


@pytest.fixture
def k8s_client() -> MagicMock:
    """Kubernetes client whose CoreV1Api records created events."""
    client = MagicMock()
    client.default_namespace = "default"
    client.component = "managed-certificate-controller"
    return client


@pytest.fixture
def recorder(k8s_client: MagicMock) -> KubernetesEventRecorder:
    """Event recorder writing to the mocked cluster."""
    return KubernetesEventRecorder(k8s_client)


@pytest.fixture
def owner() -> ManagedCertificate:
    """The ManagedCertificate certificates are provisioned for."""
    return ManagedCertificate(
        name="shop",
        namespace="web",
        uid="uid-shop",
        resource_version="7",
        domains=["shop.example.com"],
    )
