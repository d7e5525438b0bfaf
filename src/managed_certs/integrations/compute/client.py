"""Compute SslCertificates API client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from managed_certs.integrations.compute.exceptions import (
    ComputeAPIError,
    ComputeConfigError,
    ComputeConnectionError,
    ComputeNotFoundError,
)
from managed_certs.integrations.compute.models import (
    ManagedSslCertificate,
    SslCertificate,
)

if TYPE_CHECKING:
    from managed_certs.integrations.compute.config import ComputeConfig

logger = structlog.get_logger()


class SslCertificatesClient:
    """HTTP client for global Compute SslCertificates.

    Implements the certificate backend used by ``SslCertificateManager``.
    API error responses are raised as ``ComputeAPIError`` carrying the
    status code and the ``errors[].reason`` items so callers can classify
    them. Connection failures and timeouts are retried with exponential
    backoff; API errors are never retried here.

    Example:
        ```python
        from managed_certs.integrations.compute import ComputeConfig, SslCertificatesClient

        config = ComputeConfig.from_env()
        with SslCertificatesClient(config) as client:
            if not client.exists("mcrt-1234"):
                client.create("mcrt-1234", ["example.com"])
        ```
    """

    def __init__(self, config: ComputeConfig) -> None:
        """Initialize the client.

        Args:
            config: Compute configuration with project and credentials.

        Raises:
            ComputeConfigError: If no project is configured.
        """
        if not config.project:
            raise ComputeConfigError(
                "Compute project not configured",
                details="Set MCRT_COMPUTE_PROJECT or compute.project in the config file",
            )
        self.config = config

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if config.token is not None:
            headers["Authorization"] = f"Bearer {config.token.get_secret_value()}"

        self._client = httpx.Client(
            base_url=config.api_url,
            timeout=httpx.Timeout(config.timeout),
            headers=headers,
        )
        self._retry = retry(
            retry=retry_if_exception_type(ComputeConnectionError),
            stop=stop_after_attempt(config.retry_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )
        logger.info(
            "Compute client initialized",
            project=config.project,
            api_url=config.api_url,
        )

    def __enter__(self) -> SslCertificatesClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _send(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        """Perform a single HTTP request and decode the response.

        Raises:
            ComputeConnectionError: On connection failure or timeout.
            ComputeNotFoundError: On 404 response.
            ComputeAPIError: On other error responses.
        """
        try:
            response = self._client.request(method, endpoint, **kwargs)
        except httpx.ConnectError as e:
            logger.error("Compute connection error", endpoint=endpoint, error=str(e))
            raise ComputeConnectionError(
                f"Failed to connect to Compute API: {e}",
                details=str(e),
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Compute timeout", endpoint=endpoint, error=str(e))
            raise ComputeConnectionError(
                "Request to Compute API timed out",
                details=str(e),
            ) from e
        except httpx.TransportError as e:
            logger.error("Compute transport error", endpoint=endpoint, error=str(e))
            raise ComputeConnectionError(
                f"Compute API transport failure: {e}",
                details=str(e),
            ) from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            error = ComputeAPIError.from_response_body(response.status_code, body)
            error.details = response.text
            raise error

        if response.status_code == 204 or not response.content:
            return {}
        return response.json()  # type: ignore[no-any-return]

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        """Make an HTTP request, retrying transient connection failures."""
        return self._retry(self._send)(method, endpoint, **kwargs)  # type: ignore[no-any-return]

    def _certificate_path(self, name: str) -> str:
        return f"{self.config.certificates_path}/{name}"

    # =========================================================================
    # Certificate backend operations
    # =========================================================================

    def create(self, name: str, domains: list[str]) -> None:
        """Insert a MANAGED SslCertificate covering the given domains.

        Args:
            name: Certificate name.
            domains: Domains the certificate should cover.
        """
        cert = SslCertificate(name=name, managed=ManagedSslCertificate(domains=domains))
        logger.debug("creating_ssl_certificate", name=name, domains=domains)
        self._request("POST", self.config.certificates_path, json=cert.to_create_body())

    def delete(self, name: str) -> None:
        """Delete an SslCertificate.

        Args:
            name: Certificate name.
        """
        logger.debug("deleting_ssl_certificate", name=name)
        self._request("DELETE", self._certificate_path(name))

    def exists(self, name: str) -> bool:
        """Check whether an SslCertificate exists.

        Args:
            name: Certificate name.

        Returns:
            True if the certificate exists, False on 404.
        """
        try:
            self.get(name)
        except ComputeNotFoundError:
            return False
        return True

    def get(self, name: str) -> SslCertificate:
        """Fetch an SslCertificate.

        Args:
            name: Certificate name.

        Returns:
            The certificate.
        """
        logger.debug("getting_ssl_certificate", name=name)
        data = self._request("GET", self._certificate_path(name))
        return SslCertificate.from_api(data)

    def list_certificates(self) -> list[SslCertificate]:
        """List all global SslCertificates in the project."""
        certs: list[SslCertificate] = []
        params: dict[str, str] = {}
        while True:
            data = self._request("GET", self.config.certificates_path, params=params)
            certs.extend(SslCertificate.from_api(item) for item in data.get("items", []))
            next_page = data.get("nextPageToken")
            if not next_page:
                return certs
            params = {"pageToken": next_page}
