"""Shared fixtures for Kubernetes service tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock Kubernetes client with a default namespace."""
    mock_client = MagicMock()
    mock_client.default_namespace = "default"
    return mock_client
