"""Capabilities the certificate lifecycle manager depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from managed_certs.integrations.compute.models import SslCertificate
    from managed_certs.integrations.kubernetes.models.managed_certificate import (
        ManagedCertificate,
    )


@runtime_checkable
class CertificateBackend(Protocol):
    """Create, delete and query SslCertificates by name.

    Errors are raised and must expose a status code and ``errors[].reason``
    items for classification. Implementations must be safe for concurrent use.
    """

    def create(self, name: str, domains: list[str]) -> None: ...

    def delete(self, name: str) -> None: ...

    def exists(self, name: str) -> bool: ...

    def get(self, name: str) -> SslCertificate | None: ...


@runtime_checkable
class EventSink(Protocol):
    """Receives lifecycle outcomes attributed to a ManagedCertificate.

    Calls are fire-and-forget: implementations must not raise and must not
    block meaningfully.
    """

    def backend_error(self, mcrt: ManagedCertificate, err: BaseException) -> None: ...

    def create(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None: ...

    def delete(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None: ...

    def too_many_certificates(self, mcrt: ManagedCertificate, err: BaseException) -> None: ...
