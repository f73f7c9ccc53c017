"""Subdomain takeover fingerprints and oracle."""

from .fingerprints import load_fingerprints, parse_fingerprints
from .models import FingerprintSignature, ScanFinding
from .oracle import FingerprintOracle

__all__ = [
    "FingerprintOracle",
    "FingerprintSignature",
    "ScanFinding",
    "load_fingerprints",
    "parse_fingerprints",
]
