"""SslCertificate lifecycle manager.

Wraps the certificate backend with error classification and event
emission. The manager is stateless apart from its two collaborators, never
retries, and re-raises backend errors unchanged; the emitted event kind is
the only summary of how an error was classified.

Event rules:

* ``create`` always has an owning ManagedCertificate and always emits
  exactly one event (Create, TooManyCertificates or BackendError).
* ``delete``, ``exists`` and ``get`` may run during orphan cleanup with no
  owner. Without one they emit nothing.
* ``delete`` of an absent certificate succeeds silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from managed_certs.logging.config import get_logger
from managed_certs.services.ssl.errors import ErrorKind, classify

if TYPE_CHECKING:
    from managed_certs.integrations.compute.models import SslCertificate
    from managed_certs.integrations.kubernetes.models.managed_certificate import (
        ManagedCertificate,
    )
    from managed_certs.services.ssl.backend import CertificateBackend, EventSink


class SslCertificateManager:
    """Creates, deletes and inspects SslCertificates on behalf of ManagedCertificates.

    Example:
        >>> manager = SslCertificateManager(ssl_client, event_recorder)
        >>> manager.create(random_name(), mcrt)
    """

    def __init__(self, backend: CertificateBackend, events: EventSink) -> None:
        """Initialize the manager.

        Args:
            backend: Certificate backend, e.g. ``SslCertificatesClient``.
            events: Sink receiving lifecycle events.
        """
        self._backend = backend
        self._events = events
        self._log = get_logger(__name__, entity="sslcertificate")

    def create(self, name: str, mcrt: ManagedCertificate) -> None:
        """Create an SslCertificate for the domains of a ManagedCertificate.

        Args:
            name: SslCertificate name.
            mcrt: Owning ManagedCertificate.

        Raises:
            Exception: The backend error, unchanged. A quota failure is
                reported as TooManyCertificates so the caller can back off.
        """
        self._log.debug("creating_ssl_certificate", name=name, managed_certificate=mcrt.name)
        try:
            self._backend.create(name, mcrt.domains)
        except Exception as e:
            kind = classify(e)
            self._log.warning(
                "create_ssl_certificate_failed",
                name=name,
                kind=str(kind),
                error=str(e),
            )
            if kind is ErrorKind.QUOTA_EXCEEDED:
                self._events.too_many_certificates(mcrt, e)
            else:
                self._events.backend_error(mcrt, e)
            raise

        self._events.create(mcrt, name)
        self._log.info("created_ssl_certificate", name=name, managed_certificate=mcrt.name)

    def delete(self, name: str, mcrt: ManagedCertificate | None = None) -> None:
        """Delete an SslCertificate. Deleting an absent certificate succeeds.

        Args:
            name: SslCertificate name.
            mcrt: Owning ManagedCertificate, or None during orphan cleanup.

        Raises:
            Exception: The backend error, unchanged, unless it is not-found.
        """
        self._log.debug("deleting_ssl_certificate", name=name)
        try:
            self._backend.delete(name)
        except Exception as e:
            kind = classify(e)
            if kind is ErrorKind.NOT_FOUND:
                self._log.debug("ssl_certificate_already_deleted", name=name)
                return
            self._log.warning(
                "delete_ssl_certificate_failed",
                name=name,
                kind=str(kind),
                error=str(e),
            )
            if mcrt is not None:
                self._events.backend_error(mcrt, e)
            raise

        if mcrt is not None:
            self._events.delete(mcrt, name)
        self._log.info("deleted_ssl_certificate", name=name)

    def exists(self, name: str, mcrt: ManagedCertificate | None = None) -> bool:
        """Check whether an SslCertificate exists.

        Args:
            name: SslCertificate name.
            mcrt: Owning ManagedCertificate, or None during orphan cleanup.

        Returns:
            The existence reported by the backend.

        Raises:
            Exception: The backend error, unchanged.
        """
        try:
            return self._backend.exists(name)
        except Exception as e:
            self._report_backend_error("exists", name, mcrt, e)
            raise

    def get(self, name: str, mcrt: ManagedCertificate | None = None) -> SslCertificate | None:
        """Fetch an SslCertificate.

        Args:
            name: SslCertificate name.
            mcrt: Owning ManagedCertificate, or None during orphan cleanup.

        Returns:
            Whatever the backend returned, which may be None.

        Raises:
            Exception: The backend error, unchanged.
        """
        try:
            return self._backend.get(name)
        except Exception as e:
            self._report_backend_error("get", name, mcrt, e)
            raise

    def _report_backend_error(
        self,
        operation: str,
        name: str,
        mcrt: ManagedCertificate | None,
        err: Exception,
    ) -> None:
        self._log.warning(
            f"{operation}_ssl_certificate_failed",
            name=name,
            kind=str(classify(err)),
            error=str(err),
        )
        if mcrt is not None:
            self._events.backend_error(mcrt, err)
