"""Kubernetes event recording for certificate lifecycle outcomes.

Events are attached to the ManagedCertificate they concern so they show
up in ``kubectl describe managedcertificate``.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from managed_certs.integrations.kubernetes.client import KubernetesClient
    from managed_certs.integrations.kubernetes.models.managed_certificate import (
        ManagedCertificate,
    )

logger = structlog.get_logger()

EVENT_TYPE_NORMAL = "Normal"
EVENT_TYPE_WARNING = "Warning"


class EventReason(StrEnum):
    """Reasons recorded on ManagedCertificate events."""

    BACKEND_ERROR = "BackendError"
    CREATE = "Create"
    DELETE = "Delete"
    TOO_MANY_CERTIFICATES = "TooManyCertificates"


class NoopEventRecorder:
    """Event sink for operations without an owning ManagedCertificate.

    The manager only emits events for an owner, so orphan cleanup never
    reaches these methods and needs no cluster access.
    """

    def backend_error(self, mcrt: ManagedCertificate, err: BaseException) -> None:
        pass

    def create(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None:
        pass

    def delete(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None:
        pass

    def too_many_certificates(self, mcrt: ManagedCertificate, err: BaseException) -> None:
        pass


class KubernetesEventRecorder:
    """Event sink that records core/v1 Events via the Kubernetes API.

    Recording never raises: a failed API call is logged and dropped.
    """

    def __init__(self, client: KubernetesClient, component: str | None = None) -> None:
        """Initialize the recorder.

        Args:
            client: Kubernetes API client.
            component: Event source component; defaults to the client's.
        """
        self._client = client
        self._component = component or client.component
        self._log = logger.bind(entity="event")

    def backend_error(self, mcrt: ManagedCertificate, err: BaseException) -> None:
        """Record a generic backend failure."""
        self._record(mcrt, EVENT_TYPE_WARNING, EventReason.BACKEND_ERROR, str(err))

    def create(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None:
        """Record creation of an SslCertificate."""
        self._record(
            mcrt,
            EVENT_TYPE_NORMAL,
            EventReason.CREATE,
            f"Create SslCertificate {ssl_certificate_name}",
        )

    def delete(self, mcrt: ManagedCertificate, ssl_certificate_name: str) -> None:
        """Record deletion of an SslCertificate."""
        self._record(
            mcrt,
            EVENT_TYPE_NORMAL,
            EventReason.DELETE,
            f"Delete SslCertificate {ssl_certificate_name}",
        )

    def too_many_certificates(self, mcrt: ManagedCertificate, err: BaseException) -> None:
        """Record an SslCertificate quota failure."""
        self._record(
            mcrt,
            EVENT_TYPE_WARNING,
            EventReason.TOO_MANY_CERTIFICATES,
            f"Too many certificates: {err}",
        )

    def _build_event(
        self,
        mcrt: ManagedCertificate,
        event_type: str,
        reason: EventReason,
        message: str,
    ) -> dict[str, Any]:
        now = datetime.now(UTC).isoformat()
        namespace = mcrt.namespace or self._client.default_namespace
        return {
            "apiVersion": "v1",
            "kind": "Event",
            "metadata": {
                "name": f"{mcrt.name}.{time.time_ns():x}",
                "namespace": namespace,
            },
            "involvedObject": {
                "apiVersion": mcrt.api_version,
                "kind": mcrt.kind,
                "name": mcrt.name,
                "namespace": namespace,
                "uid": mcrt.uid,
                "resourceVersion": mcrt.resource_version,
            },
            "type": event_type,
            "reason": str(reason),
            "message": message,
            "source": {"component": self._component},
            "reportingComponent": self._component,
            "firstTimestamp": now,
            "lastTimestamp": now,
            "count": 1,
        }

    def _record(
        self,
        mcrt: ManagedCertificate,
        event_type: str,
        reason: EventReason,
        message: str,
    ) -> None:
        body = self._build_event(mcrt, event_type, reason, message)
        namespace = body["metadata"]["namespace"]
        try:
            self._client.core_v1.create_namespaced_event(namespace, body)
        except Exception as e:
            self._log.warning(
                "event_recording_failed",
                reason=str(reason),
                managed_certificate=mcrt.name,
                namespace=namespace,
                error=str(e),
            )
            return
        self._log.debug(
            "recorded_event",
            type=event_type,
            reason=str(reason),
            managed_certificate=mcrt.name,
            namespace=namespace,
        )
