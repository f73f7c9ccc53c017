"""zoneaudit CLI - Route 53 subdomain takeover auditing."""

from zoneaudit.cli_commands import config_command, fingerprints_command, scan_command  # noqa: F401
from zoneaudit.cli_commands.shared import app, console
from zoneaudit.config import (
    CONFIG_KEYS,
    get_bool,
    get_config,
    get_fingerprints_path,
    get_global_config_path,
    get_max_lookups,
    get_profiles,
    get_timeout,
    split_profiles,
)
from zoneaudit.logging_setup import configure_logging
from zoneaudit.modules.scanner import scan_profile
from zoneaudit.modules.takeover import load_fingerprints
from zoneaudit.utils.async_utils import safe_async_run

__all__ = [
    "CONFIG_KEYS",
    "app",
    "configure_logging",
    "console",
    "get_bool",
    "get_config",
    "get_fingerprints_path",
    "get_global_config_path",
    "get_max_lookups",
    "get_profiles",
    "get_timeout",
    "load_fingerprints",
    "main",
    "safe_async_run",
    "scan_profile",
    "split_profiles",
]


@app.command()
def version() -> None:
    """Show the installed zoneaudit version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("zoneaudit")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"zoneaudit {current_version}")


def main():
    """Entry point for the CLI."""
    app()
