"""
Configuration management for zoneaudit.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. .env file in the working directory
3. Global config file (~/.zoneaudit/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_path,
    load_env_file,
    load_global_config,
    load_local_config,
)
from .getters import (
    get_bool,
    get_config,
    get_fingerprints_path,
    get_max_lookups,
    get_profiles,
    get_timeout,
    split_profiles,
)

CONFIG_KEYS = [
    "ZONEAUDIT_PROFILES",
    "ZONEAUDIT_FINGERPRINTS",
    "ZONEAUDIT_MAX_LOOKUPS",
    "ZONEAUDIT_TIMEOUT",
    "ZONEAUDIT_VERBOSE",
    "ZONEAUDIT_HTTPS",
]

__all__ = [
    "CONFIG_KEYS",
    # env_loader
    "get_global_config_path",
    "load_env_file",
    "load_global_config",
    "load_local_config",
    # getters
    "get_bool",
    "get_config",
    "get_fingerprints_path",
    "get_max_lookups",
    "get_profiles",
    "get_timeout",
    "split_profiles",
]
