"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with kubeconfig or in-cluster
loading, lazy API group initialization, and consistent error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from managed_certs.integrations.kubernetes.exceptions import (
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
)

if TYPE_CHECKING:
    from kubernetes.client import CoreV1Api, CustomObjectsApi

    from managed_certs.integrations.kubernetes.config import KubernetesConfig

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client.

    Example:
        ```python
        from managed_certs.integrations.kubernetes import KubernetesClient, KubernetesConfig

        client = KubernetesClient(KubernetesConfig.from_env())
        client.core_v1.list_namespaced_event("default")
        ```
    """

    def __init__(self, config: KubernetesConfig) -> None:
        """Initialize the client and load cluster credentials.

        Args:
            config: Kubernetes configuration.

        Raises:
            KubernetesConnectionError: If neither kubeconfig nor in-cluster
                configuration can be loaded.
        """
        self._config = config
        self._current_context: str | None = None
        self._core_v1: CoreV1Api | None = None
        self._custom_objects: CustomObjectsApi | None = None

        self._load_config()

        logger.info(
            "Kubernetes client initialized",
            context=self._current_context,
            default_namespace=config.namespace,
        )

    @property
    def default_namespace(self) -> str:
        """Namespace used when none is given explicitly."""
        return self._config.namespace

    @property
    def component(self) -> str:
        """Event source component name."""
        return self._config.component

    def _load_config(self) -> None:
        """Load Kubernetes configuration from kubeconfig or in-cluster."""
        from kubernetes import config
        from kubernetes.config import ConfigException

        try:
            config.load_kube_config(
                config_file=self._config.kubeconfig,
                context=self._config.context,
            )
            self._current_context = self._config.context or "current-context"
            logger.debug(
                "loaded_kubeconfig",
                context=self._config.context,
                kubeconfig=self._config.kubeconfig,
            )
        except ConfigException:
            try:
                config.load_incluster_config()
                self._current_context = "in-cluster"
                logger.debug("loaded_incluster_config")
            except ConfigException as e:
                raise KubernetesConnectionError(
                    message="Cannot load Kubernetes configuration. "
                    "Ensure kubeconfig exists or running inside a cluster.",
                    original_error=e,
                ) from e

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (events, namespaces)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api()
        return self._core_v1

    @property
    def custom_objects(self) -> CustomObjectsApi:
        """Get CustomObjectsApi instance (ManagedCertificates)."""
        if self._custom_objects is None:
            from kubernetes.client import CustomObjectsApi

            self._custom_objects = CustomObjectsApi()
        return self._custom_objects

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes ApiException to a custom exception.

        Args:
            e: The original exception.
            resource_type: Kind of resource being operated on.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.

        Returns:
            KubernetesNotFoundError for 404 responses, KubernetesError otherwise.
        """
        from kubernetes.client import ApiException

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if e.status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {e.status}",
            status_code=e.status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )
