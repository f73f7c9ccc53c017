"""Configuration CLI command."""

import typer

from .deps import cli_module
from .shared import app, console


@app.command("config")
def config(
    action: str = typer.Argument("show", help="Action: show or path"),
) -> None:
    """Show the effective zoneaudit configuration."""
    cli = cli_module()

    if action == "path":
        console.print(str(cli.get_global_config_path()))
        return

    if action == "show":
        console.print("[bold]Effective configuration:[/bold]")
        for key in cli.CONFIG_KEYS:
            value = cli.get_config(key)
            shown = value if value not in (None, "") else "[dim](default)[/dim]"
            console.print(f"  {key}={shown}")
        return

    console.print(f"[red]Unknown action: {action}. Use 'show' or 'path'.[/red]")
    raise typer.Exit(1)
