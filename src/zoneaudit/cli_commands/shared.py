"""Shared CLI app objects."""

import typer
from rich.console import Console

app = typer.Typer(
    name="zoneaudit",
    help="Audit Route 53 hosted zones for subdomain takeover exposure",
    no_args_is_help=True,
)
console = Console()
