"""Data models for scan configuration."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_LOOKUPS = 50
DEFAULT_TIMEOUT = 10.0


@dataclass
class ScanConfig:
    """Configuration for a profile scan."""

    verbose: bool = False
    max_lookups: int = DEFAULT_MAX_LOOKUPS
    timeout: float = DEFAULT_TIMEOUT
    use_https: bool = False
    fingerprints_path: Path | None = None
