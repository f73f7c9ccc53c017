"""Configuration getter functions."""

import logging
import os
from pathlib import Path
from typing import Any

from zoneaudit.modules.scanner.models import DEFAULT_MAX_LOOKUPS, DEFAULT_TIMEOUT

from .env_loader import load_global_config, load_local_config

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, directory: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. .env file in the working directory
    3. Global config file (~/.zoneaudit/config.yml)
    4. Default value

    Args:
        key: Configuration key
        directory: Directory holding the .env file (defaults to cwd)
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    local_config = load_local_config(directory)
    if key in local_config:
        return local_config[key]

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def _get_number(key: str, cast: type, default: Any, directory: Path | None) -> Any:
    value = get_config(key, directory, default)
    try:
        return cast(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r, using %s", key, value, default)
        return default


def get_bool(key: str, directory: Path | None = None, default: bool = False) -> bool:
    value = get_config(key, directory)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


def get_profiles(directory: Path | None = None) -> list[str]:
    """Get AWS profiles to scan (default: ``default``)."""
    raw = get_config("ZONEAUDIT_PROFILES", directory, default="default")
    if isinstance(raw, list):
        return [str(item).strip() for item in raw if str(item).strip()]
    return split_profiles(str(raw))


def split_profiles(value: str) -> list[str]:
    """Split a comma-separated profile list, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


def get_max_lookups(directory: Path | None = None) -> int:
    """Get the ceiling on concurrent oracle lookups (0 = unbounded)."""
    value = _get_number("ZONEAUDIT_MAX_LOOKUPS", int, DEFAULT_MAX_LOOKUPS, directory)
    return max(0, value)


def get_timeout(directory: Path | None = None) -> float:
    """Get the per-request DNS/HTTP timeout in seconds."""
    return _get_number("ZONEAUDIT_TIMEOUT", float, DEFAULT_TIMEOUT, directory)


def get_fingerprints_path(directory: Path | None = None) -> Path | None:
    """Get the fingerprint database path, or ``None`` for the bundled one."""
    value = get_config("ZONEAUDIT_FINGERPRINTS", directory)
    return Path(value).expanduser() if value else None
