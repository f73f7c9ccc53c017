"""Fingerprint database CLI command."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from zoneaudit.errors import FingerprintError

from .deps import cli_module
from .shared import app, console


@app.command("fingerprints")
def fingerprints(
    path: Optional[Path] = typer.Option(
        None, "--fingerprints", "-f", help="Fingerprint database (JSON)"
    ),
) -> None:
    """List the services the fingerprint database can detect."""
    cli = cli_module()

    try:
        signatures = cli.load_fingerprints(path or cli.get_fingerprints_path())
    except FingerprintError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    table = Table(title=f"{len(signatures)} fingerprint(s)")
    table.add_column("Service", style="cyan")
    table.add_column("CNAME patterns")
    table.add_column("Check", style="dim")
    for signature in signatures:
        check = "nxdomain" if signature.nxdomain else f"{len(signature.fingerprint)} marker(s)"
        table.add_row(signature.service, ", ".join(signature.cname), check)
    console.print(table)
