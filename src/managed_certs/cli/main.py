"""Main CLI entry point using Typer."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from managed_certs import __version__
from managed_certs.cli.commands import certificates
from managed_certs.core.config.models import resolve_config
from managed_certs.logging.config import configure_logging
from managed_certs.utils.random import NameGenerationError, random_name

app = typer.Typer(
    name="mcrt",
    help="Managed certificates CLI for Compute SslCertificates.",
    add_completion=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"mcrt version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.config/mcrt/config.yaml).",
    ),
) -> None:
    """Managed certificates CLI - provision SslCertificates for ManagedCertificates."""
    try:
        system_config = resolve_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        raise typer.Exit(1) from e

    configure_logging(
        verbose=verbose or system_config.log_level == "INFO",
        debug=debug or system_config.log_level == "DEBUG",
        json_output=system_config.json_logs,
        component=system_config.kubernetes.component,
    )
    ctx.obj = system_config


@app.command("random-name")
def random_name_command() -> None:
    """Print a fresh random SslCertificate name."""
    try:
        name = random_name()
    except NameGenerationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    console.print(name)


app.add_typer(certificates.app, name="certs")


if __name__ == "__main__":
    app()
