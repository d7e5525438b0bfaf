"""CLI commands for SslCertificates.

All lifecycle operations go through ``SslCertificateManager`` so the CLI
records the same events as the controller.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, cast

import typer
from rich.table import Table

from managed_certs.cli.commands.base import (
    OutputFormat,
    OutputOption,
    OwnerOption,
    build_services,
    console,
    get_config,
    get_ssl_client,
    handle_error,
)
from managed_certs.integrations.compute.exceptions import ComputeError
from managed_certs.integrations.kubernetes.exceptions import KubernetesError
from managed_certs.utils.random import NameGenerationError, random_name

if TYPE_CHECKING:
    from managed_certs.integrations.compute.models import SslCertificate
    from managed_certs.integrations.kubernetes.models.managed_certificate import (
        ManagedCertificate,
    )

app = typer.Typer(help="Manage Compute SslCertificates for ManagedCertificates.")

_HANDLED_ERRORS = (ComputeError, KubernetesError, NameGenerationError, ValueError)


def _certificates_table(certs: list[SslCertificate], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Domains", overflow="fold")
    table.add_column("Expires")
    for cert in certs:
        table.add_row(
            cert.name,
            cert.type,
            cert.status,
            ", ".join(cert.managed.domains),
            cert.expire_time or "-",
        )
    return table


def _print_certificates(certs: list[SslCertificate], output: OutputFormat, title: str) -> None:
    if output == OutputFormat.JSON:
        payload = [cert.model_dump(mode="json", by_alias=True) for cert in certs]
        console.print_json(json.dumps(payload))
        return
    console.print(_certificates_table(certs, title))


@app.command("create")
def create(
    ctx: typer.Context,
    managed_certificate: str = typer.Argument(help="Owning ManagedCertificate as namespace/name"),
    name: str | None = typer.Option(
        None, "--name", help="SslCertificate name (random if omitted)"
    ),
) -> None:
    """Create an SslCertificate for a ManagedCertificate's domains.

    Examples:
        mcrt certs create default/my-cert
        mcrt certs create default/my-cert --name mcrt-static
    """
    try:
        ssl_certificate_name = name or random_name()
        with build_services(get_config(ctx), managed_certificate) as (manager, owner):
            manager.create(ssl_certificate_name, cast("ManagedCertificate", owner))
    except _HANDLED_ERRORS as e:
        handle_error(e)

    console.print(f"[green]Created SslCertificate[/green] {ssl_certificate_name}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    name: str = typer.Argument(help="SslCertificate name"),
    owner: OwnerOption = None,
) -> None:
    """Delete an SslCertificate. Deleting an absent certificate succeeds.

    Examples:
        mcrt certs delete mcrt-1234 --for default/my-cert
        mcrt certs delete mcrt-orphan
    """
    try:
        with build_services(get_config(ctx), owner) as (manager, mcrt):
            manager.delete(name, mcrt)
    except _HANDLED_ERRORS as e:
        handle_error(e)

    console.print(f"[green]Deleted SslCertificate[/green] {name}")


@app.command("exists")
def exists(
    ctx: typer.Context,
    name: str = typer.Argument(help="SslCertificate name"),
    owner: OwnerOption = None,
) -> None:
    """Check whether an SslCertificate exists. Exits 1 when it does not."""
    try:
        with build_services(get_config(ctx), owner) as (manager, mcrt):
            found = manager.exists(name, mcrt)
    except _HANDLED_ERRORS as e:
        handle_error(e)

    if found:
        console.print(f"SslCertificate {name} exists")
        return
    console.print(f"SslCertificate {name} does not exist")
    raise typer.Exit(1)


@app.command("get")
def get(
    ctx: typer.Context,
    name: str = typer.Argument(help="SslCertificate name"),
    owner: OwnerOption = None,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """Show an SslCertificate.

    Examples:
        mcrt certs get mcrt-1234
        mcrt certs get mcrt-1234 --for default/my-cert -o json
    """
    try:
        with build_services(get_config(ctx), owner) as (manager, mcrt):
            cert = manager.get(name, mcrt)
    except _HANDLED_ERRORS as e:
        handle_error(e)

    if cert is None:
        console.print(f"SslCertificate {name} not found")
        raise typer.Exit(1)
    _print_certificates([cert], output, title=f"SslCertificate: {name}")


@app.command("list")
def list_certificates(
    ctx: typer.Context,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """List all SslCertificates in the project."""
    try:
        with get_ssl_client(get_config(ctx)) as client:
            certs = client.list_certificates()
    except _HANDLED_ERRORS as e:
        handle_error(e)

    _print_certificates(certs, output, title="SslCertificates")
