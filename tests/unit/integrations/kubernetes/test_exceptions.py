"""Unit tests for Kubernetes exceptions."""

from __future__ import annotations

import pytest

from managed_certs.integrations.kubernetes.exceptions import (
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesError:
    """Test KubernetesError base exception."""

    def test_init_minimal(self) -> None:
        """Test initialization with minimal arguments."""
        error = KubernetesError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.status_code is None
        assert error.resource_type is None
        assert error.resource_name is None
        assert error.namespace is None

    def test_str_message_only(self) -> None:
        assert str(KubernetesError("Test error")) == "Test error"

    def test_str_with_status_code(self) -> None:
        assert str(KubernetesError("Test error", status_code=500)) == "Test error (status: 500)"

    def test_str_with_resource_info(self) -> None:
        error = KubernetesError(
            "Test error",
            resource_type="ManagedCertificate",
            resource_name="my-cert",
        )
        assert str(error) == "Test error [ManagedCertificate/my-cert]"

    def test_str_with_namespace(self) -> None:
        error = KubernetesError(
            "Test error",
            resource_type="ManagedCertificate",
            resource_name="my-cert",
            namespace="production",
        )
        assert str(error) == "Test error [ManagedCertificate/my-cert in production]"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesSubclasses:
    """Test KubernetesError subclasses."""

    def test_connection_error_defaults(self) -> None:
        error = KubernetesConnectionError()

        assert isinstance(error, KubernetesError)
        assert error.message == "Failed to connect to Kubernetes cluster"
        assert error.original_error is None

    def test_connection_error_keeps_original(self) -> None:
        original = OSError("no route to host")
        error = KubernetesConnectionError("unreachable", original_error=original)

        assert error.original_error is original

    def test_not_found_default_message(self) -> None:
        error = KubernetesNotFoundError()

        assert error.message == "Kubernetes resource not found"
        assert error.status_code == 404

    def test_not_found_with_resource(self) -> None:
        error = KubernetesNotFoundError(
            resource_type="ManagedCertificate",
            resource_name="my-cert",
        )

        assert error.message == "ManagedCertificate 'my-cert' not found"
