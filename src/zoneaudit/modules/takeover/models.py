"""Data models for takeover fingerprints and scan findings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FingerprintSignature:
    """A known vulnerable third-party service.

    ``cname`` holds the host patterns that identify the service; ``fingerprint``
    holds the body markers the service serves for an unclaimed endpoint.
    """

    service: str
    cname: tuple[str, ...] = field(default_factory=tuple)
    fingerprint: tuple[str, ...] = field(default_factory=tuple)
    nxdomain: bool = False

    def matches_cname(self, target: str) -> bool:
        host = target.rstrip(".").lower()
        return any(pattern and pattern.lower() in host for pattern in self.cname)

    def matches_body(self, body: str) -> bool:
        return any(marker and marker in body for marker in self.fingerprint)


@dataclass(frozen=True)
class ScanFinding:
    """Outcome of one record's takeover check."""

    subdomain: str
    vulnerable: bool
    service: str | None = None
    zone: str | None = None
