"""Environment file and global configuration loading."""

from pathlib import Path
from typing import Any

import yaml

GLOBAL_CONFIG_DIR = ".zoneaudit"
GLOBAL_CONFIG_FILE = "config.yml"


def get_global_config_path() -> Path:
    """Return the path of ~/.zoneaudit/config.yml."""
    return Path.home() / GLOBAL_CONFIG_DIR / GLOBAL_CONFIG_FILE


def load_env_file(env_path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines from a .env file; missing files yield an empty dict."""
    env_vars: dict[str, str] = {}
    if not env_path.exists():
        return env_vars
    with open(env_path) as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            env_vars[key.strip()] = value.strip().strip("\"'")
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load ~/.zoneaudit/config.yml as a flat mapping."""
    config_path = get_global_config_path()
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        return {}
    return data


def load_local_config(directory: Path | None = None) -> dict[str, str]:
    """Load the .env file of *directory* (the working directory by default)."""
    base = directory if directory is not None else Path.cwd()
    return load_env_file(base / ".env")
