"""SslCertificate lifecycle management."""

from managed_certs.services.ssl.backend import CertificateBackend, EventSink
from managed_certs.services.ssl.errors import (
    ErrorKind,
    classify,
    is_not_found,
    is_quota_exceeded,
)
from managed_certs.services.ssl.events import (
    EventReason,
    KubernetesEventRecorder,
    NoopEventRecorder,
)
from managed_certs.services.ssl.manager import SslCertificateManager

__all__ = [
    "CertificateBackend",
    "ErrorKind",
    "EventReason",
    "EventSink",
    "KubernetesEventRecorder",
    "NoopEventRecorder",
    "SslCertificateManager",
    "classify",
    "is_not_found",
    "is_quota_exceeded",
]
