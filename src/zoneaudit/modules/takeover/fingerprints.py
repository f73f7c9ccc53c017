"""Loading of the takeover fingerprint database."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from zoneaudit.errors import FingerprintError

from .models import FingerprintSignature

logger = logging.getLogger(__name__)

DEFAULT_FINGERPRINTS = "fingerprints.json"


def _as_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(item) for item in value if item)
    raise ValueError(f"expected a string or list, got {type(value).__name__}")


def parse_fingerprints(entries: Any) -> list[FingerprintSignature]:
    """Convert decoded JSON entries into signatures."""
    if not isinstance(entries, list):
        raise FingerprintError("Fingerprint database must be a JSON list")

    signatures: list[FingerprintSignature] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("service"):
            raise FingerprintError(f"Fingerprint entry #{index} has no service name")
        try:
            signature = FingerprintSignature(
                service=str(entry["service"]),
                cname=_as_tuple(entry.get("cname")),
                fingerprint=_as_tuple(entry.get("fingerprint")),
                nxdomain=bool(entry.get("nxdomain", False)),
            )
        except ValueError as exc:
            raise FingerprintError(f"Fingerprint entry #{index} is malformed: {exc}") from exc
        if not signature.cname:
            raise FingerprintError(f"Fingerprint entry #{index} ({signature.service}) has no cname pattern")
        signatures.append(signature)
    return signatures


def load_fingerprints(path: Path | str | None = None) -> list[FingerprintSignature]:
    """Load signatures from *path*, or the bundled database when *path* is ``None``."""
    try:
        if path is None:
            raw = resources.files("zoneaudit.data").joinpath(DEFAULT_FINGERPRINTS).read_text(
                encoding="utf-8"
            )
            source = f"bundled {DEFAULT_FINGERPRINTS}"
        else:
            raw = Path(path).read_text(encoding="utf-8")
            source = str(path)
        entries = json.loads(raw)
    except (OSError, json.JSONDecodeError) as exc:
        raise FingerprintError(f"Cannot read fingerprint database: {exc}") from exc

    signatures = parse_fingerprints(entries)
    logger.debug("Loaded %d fingerprint(s) from %s", len(signatures), source)
    return signatures
