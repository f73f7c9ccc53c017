"""Takeover scan CLI command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from zoneaudit.errors import EnumerationError, FingerprintError
from zoneaudit.modules.scanner import ScanConfig, count_vulnerable

from .deps import cli_module
from .shared import app, console


@app.command("scan")
def scan(
    profiles: Optional[str] = typer.Option(
        None,
        "--profiles",
        "-p",
        help="An AWS CLI profile name, or comma-separated list for multiple",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Report all record sets including non vulnerable"
    ),
    fingerprints: Optional[Path] = typer.Option(
        None, "--fingerprints", "-f", help="Fingerprint database (JSON)"
    ),
    max_lookups: Optional[int] = typer.Option(
        None, "--max-lookups", min=0, help="Maximum concurrent takeover checks (0 = unlimited)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="DNS/HTTP timeout per request in seconds"
    ),
    https: bool = typer.Option(False, "--https", help="Probe services over HTTPS"),
) -> None:
    """Scan the public hosted zones of one or more AWS profiles."""
    cli = cli_module()

    verbose = verbose or cli.get_bool("ZONEAUDIT_VERBOSE")
    cli.configure_logging(verbose)

    config = ScanConfig(
        verbose=verbose,
        max_lookups=max_lookups if max_lookups is not None else cli.get_max_lookups(),
        timeout=timeout if timeout is not None else cli.get_timeout(),
        use_https=https or cli.get_bool("ZONEAUDIT_HTTPS"),
        fingerprints_path=fingerprints or cli.get_fingerprints_path(),
    )
    profile_list = cli.split_profiles(profiles) if profiles else cli.get_profiles()
    if not profile_list:
        console.print("[red]No AWS profile given.[/red]")
        raise typer.Exit(1)

    failed: list[str] = []
    for profile in profile_list:
        console.rule(f"[bold]Scanning account {escape(profile)}[/bold]")
        try:
            findings = cli.safe_async_run(cli.scan_profile(profile, config))
        except (EnumerationError, FingerprintError) as exc:
            console.print(f"[red]Profile {escape(profile)} aborted: {escape(str(exc))}[/red]")
            failed.append(profile)
            continue

        vulnerable = count_vulnerable(findings)
        if vulnerable:
            console.print(
                f"[yellow]![/] {profile}: [bold yellow]{vulnerable}[/] vulnerable of "
                f"{len(findings)} checked record(s)"
            )
        else:
            console.print(f"[green]✓[/] {profile}: {len(findings)} record(s) checked, none vulnerable")

    if failed:
        console.print(f"[red]Scan incomplete for: {', '.join(failed)}[/red]")
        raise typer.Exit(1)
