"""ManagedCertificate resource manager.

Reads ManagedCertificate custom resources through ``CustomObjectsApi``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from managed_certs.integrations.kubernetes.models.managed_certificate import (
    MANAGED_CERTIFICATE_GROUP,
    MANAGED_CERTIFICATE_KIND,
    MANAGED_CERTIFICATE_PLURAL,
    MANAGED_CERTIFICATE_VERSION,
    ManagedCertificate,
)

if TYPE_CHECKING:
    from managed_certs.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


def parse_reference(reference: str, default_namespace: str | None = None) -> tuple[str | None, str]:
    """Split a ``namespace/name`` reference.

    Args:
        reference: ``namespace/name`` or bare ``name``.
        default_namespace: Namespace used for a bare name.

    Returns:
        Tuple of (namespace, name).

    Raises:
        ValueError: If the reference has an empty part or too many slashes.
    """
    parts = reference.split("/")
    if len(parts) == 1 and parts[0]:
        return default_namespace, parts[0]
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]
    raise ValueError(f"Invalid ManagedCertificate reference '{reference}', expected namespace/name")


class ManagedCertificateManager:
    """Resolves the ManagedCertificates that own SslCertificates.

    A bare name is looked up in the client's default namespace. API failures
    surface as the ``KubernetesError`` subclass chosen by
    ``KubernetesClient.translate_api_exception``.
    """

    def __init__(self, client: KubernetesClient) -> None:
        self._client = client
        self._log = logger.bind(entity="managedcertificate")

    def get(self, name: str, namespace: str | None = None) -> ManagedCertificate:
        """Get a single ManagedCertificate by name.

        Args:
            name: ManagedCertificate name.
            namespace: Target namespace.

        Returns:
            The ManagedCertificate.

        Raises:
            KubernetesNotFoundError: If it does not exist.
            KubernetesError: On other API failures.
        """
        ns = namespace or self._client.default_namespace
        self._log.debug("getting_managed_certificate", name=name, namespace=ns)
        try:
            result = self._client.custom_objects.get_namespaced_custom_object(
                MANAGED_CERTIFICATE_GROUP,
                MANAGED_CERTIFICATE_VERSION,
                ns,
                MANAGED_CERTIFICATE_PLURAL,
                name,
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e,
                resource_type=MANAGED_CERTIFICATE_KIND,
                resource_name=name,
                namespace=ns,
            ) from e
        mcrt = ManagedCertificate.from_k8s_object(result)
        self._log.debug(
            "resolved_managed_certificate",
            managed_certificate=mcrt.qualified_name,
            domains=mcrt.domains,
        )
        return mcrt

    def get_by_reference(self, reference: str) -> ManagedCertificate:
        """Get a ManagedCertificate from a ``namespace/name`` reference."""
        namespace, name = parse_reference(reference)
        return self.get(name, namespace)
