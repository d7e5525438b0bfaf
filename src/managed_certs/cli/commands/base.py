"""Base utilities for CLI commands.

Provides common Typer options, service construction from the loaded
configuration, and user-friendly error output.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated, NoReturn

import typer
from rich.console import Console

from managed_certs.core.config.models import SystemConfig, resolve_config
from managed_certs.integrations.compute.client import SslCertificatesClient
from managed_certs.integrations.compute.exceptions import (
    ComputeAPIError,
    ComputeConfigError,
    ComputeConnectionError,
    ComputeError,
)
from managed_certs.integrations.kubernetes.client import KubernetesClient
from managed_certs.integrations.kubernetes.exceptions import (
    KubernetesConnectionError,
    KubernetesError,
)
from managed_certs.services.kubernetes.managed_certificate_manager import (
    ManagedCertificateManager,
)
from managed_certs.services.ssl.errors import is_quota_exceeded
from managed_certs.services.ssl.events import KubernetesEventRecorder, NoopEventRecorder
from managed_certs.services.ssl.manager import SslCertificateManager
from managed_certs.utils.random import NameGenerationError

if TYPE_CHECKING:
    from managed_certs.integrations.kubernetes.models.managed_certificate import (
        ManagedCertificate,
    )

console = Console()


class OutputFormat(StrEnum):
    """Supported output formats for CLI commands."""

    TABLE = "table"
    JSON = "json"


OutputOption = Annotated[
    OutputFormat,
    typer.Option(
        "--output",
        "-o",
        help="Output format: table or json",
        case_sensitive=False,
    ),
]

OwnerOption = Annotated[
    str | None,
    typer.Option(
        "--for",
        help="Owning ManagedCertificate as namespace/name; omit for orphan cleanup",
    ),
]


def get_config(ctx: typer.Context) -> SystemConfig:
    """Return the configuration loaded by the root callback."""
    if isinstance(ctx.obj, SystemConfig):
        return ctx.obj
    return resolve_config()


def get_ssl_client(config: SystemConfig) -> SslCertificatesClient:
    """Create the Compute SslCertificates client."""
    return SslCertificatesClient(config.compute)


def get_kubernetes_client(config: SystemConfig) -> KubernetesClient:
    """Create the Kubernetes client."""
    return KubernetesClient(config.kubernetes)


@contextmanager
def build_services(
    config: SystemConfig,
    owner: str | None,
) -> Iterator[tuple[SslCertificateManager, ManagedCertificate | None]]:
    """Build the lifecycle manager and resolve the owning ManagedCertificate.

    Without an owner no cluster access is needed and no events are recorded.
    The Compute client is closed when the block exits.

    Args:
        config: Loaded configuration.
        owner: ``namespace/name`` of the owning ManagedCertificate, or None.

    Yields:
        Tuple of (manager, owning ManagedCertificate or None).
    """
    with get_ssl_client(config) as ssl_client:
        if owner is None:
            yield SslCertificateManager(ssl_client, NoopEventRecorder()), None
            return

        k8s_client = get_kubernetes_client(config)
        mcrt = ManagedCertificateManager(k8s_client).get_by_reference(owner)
        yield SslCertificateManager(ssl_client, KubernetesEventRecorder(k8s_client)), mcrt


def handle_error(error: Exception) -> NoReturn:
    """Print an error with user-friendly output and exit.

    Args:
        error: The error to report.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    if is_quota_exceeded(error):
        console.print("[red]Error:[/red] SslCertificate quota exceeded")
        console.print(f"  {error}")
        console.print(
            "\n[dim]Hint: Delete unused SslCertificates or request a higher "
            "SSL_CERTIFICATES quota for the project.[/dim]"
        )
    elif isinstance(error, ComputeConfigError):
        console.print("[red]Error:[/red] Compute is not configured")
        console.print(f"  {error.message}")
        if error.details:
            console.print(f"\n[dim]Hint: {error.details}[/dim]")
    elif isinstance(error, ComputeConnectionError):
        console.print("[red]Error:[/red] Cannot reach the Compute API")
        console.print(f"  {error.message}")
    elif isinstance(error, ComputeAPIError):
        console.print("[red]Error:[/red] Compute API request failed")
        console.print(f"  {error}")
    elif isinstance(error, KubernetesConnectionError):
        console.print("[red]Error:[/red] Cannot connect to Kubernetes cluster")
        console.print(f"  {error.message}")
        if error.original_error:
            console.print(f"  Cause: {error.original_error}")
        console.print(
            "\n[dim]Hint: Check that your kubeconfig is valid and the cluster is reachable.[/dim]"
        )
    elif isinstance(error, (ComputeError, KubernetesError)):
        console.print(f"[red]Error:[/red] {error}")
    elif isinstance(error, NameGenerationError):
        console.print("[red]Error:[/red] Could not generate a certificate name")
        console.print(f"  {error}")
    else:
        console.print(f"[red]Error:[/red] {error}")

    raise typer.Exit(1)
