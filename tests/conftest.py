"""Test configuration and fixtures for zoneaudit."""

import asyncio
import logging
import tempfile
from collections.abc import Generator
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import dns.resolver
import pytest
from botocore.exceptions import ClientError

from zoneaudit.errors import OracleError
from zoneaudit.modules.takeover import FingerprintSignature

HEROKU = FingerprintSignature(
    service="Heroku",
    cname=("herokudns.com", "herokuapp.com"),
    fingerprint=("No such app",),
)
AZURE = FingerprintSignature(service="Azure", cname=("azurewebsites.net",), nxdomain=True)


def zone_payload(zone_id: str, name: str, private: bool = False) -> dict[str, Any]:
    return {
        "Id": f"/hostedzone/{zone_id}",
        "Name": name,
        "CallerReference": f"ref-{zone_id}",
        "Config": {"PrivateZone": private},
        "ResourceRecordSetCount": 3,
    }


def record_payload(
    name: str,
    record_type: str = "CNAME",
    value: str | None = None,
    set_identifier: str | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"Name": name, "Type": record_type, "TTL": 300}
    if value is not None:
        payload["ResourceRecords"] = [{"Value": value}]
    if set_identifier is not None:
        payload["SetIdentifier"] = set_identifier
        payload["Weight"] = 10
    return payload


class FakePaginator:
    def __init__(self, pages: list[dict[str, Any]], error: Exception | None = None):
        self._pages = pages
        self._error = error

    def paginate(self, **kwargs):
        if self._error is not None:
            raise self._error
        yield from self._pages


class FakeRoute53Client:
    """In-memory stand-in for a Route 53 client, safe to call from many threads."""

    def __init__(
        self,
        zones: list[dict[str, Any]],
        records: dict[str, list[dict[str, Any]]] | None = None,
        failing_zones: set[str] | None = None,
        zones_error: Exception | None = None,
        zone_errors: dict[str, Exception] | None = None,
        raw_pages: dict[str, dict[str, Any]] | None = None,
    ):
        self.zones = zones
        self.records = records or {}
        self.failing_zones = failing_zones or set()
        self.zones_error = zones_error
        self.zone_errors = zone_errors or {}
        self.raw_pages = raw_pages or {}
        self.listed_zones: list[str] = []

    def get_paginator(self, name: str) -> FakePaginator:
        assert name == "list_hosted_zones"
        return FakePaginator([{"HostedZones": self.zones}], error=self.zones_error)

    def list_resource_record_sets(self, HostedZoneId: str, **kwargs: Any) -> dict[str, Any]:
        self.listed_zones.append(HostedZoneId)
        if HostedZoneId in self.failing_zones:
            raise ClientError(
                {"Error": {"Code": "Throttling", "Message": "Rate exceeded"}},
                "ListResourceRecordSets",
            )
        if HostedZoneId in self.zone_errors:
            raise self.zone_errors[HostedZoneId]
        if HostedZoneId in self.raw_pages:
            return self.raw_pages[HostedZoneId]
        return {
            "ResourceRecordSets": self.records.get(HostedZoneId, []),
            "IsTruncated": False,
            "MaxItems": "300",
        }


class FakeOracle:
    """Oracle that decides on the record's CNAME value alone, without network access."""

    instances: list["FakeOracle"] = []

    def __init__(
        self,
        fingerprints,
        timeout: float = 10.0,
        use_https: bool = False,
        failing: set[str] | None = None,
        delay: float = 0.0,
    ):
        self.fingerprints = tuple(fingerprints)
        self.timeout = timeout
        self.use_https = use_https
        self.failing = failing or set()
        self.delay = delay
        self.calls: list[tuple[str, str | None]] = []
        self.in_flight = 0
        self.peak = 0
        FakeOracle.instances.append(self)

    async def __aenter__(self) -> "FakeOracle":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None

    async def identify(self, hostname: str, cname: str | None = None) -> str | None:
        self.calls.append((hostname, cname))
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if hostname in self.failing:
                raise OracleError("connection reset", hostname)
            for signature in self.fingerprints:
                if cname and signature.matches_cname(cname):
                    return signature.service
            return None
        finally:
            self.in_flight -= 1


class FakeResolver:
    """Async resolver answering from a fixed table.

    Values are a target string, an exception instance to raise, or ``None``
    for NoAnswer. Unknown names raise NXDOMAIN.
    """

    def __init__(self, answers: dict[tuple[str, str], Any] | None = None):
        self.answers = answers or {}
        self.queries: list[tuple[str, str]] = []

    async def resolve(self, name: str, rdtype: str):
        self.queries.append((name, rdtype))
        key = (name, rdtype)
        if key not in self.answers:
            raise dns.resolver.NXDOMAIN()
        value = self.answers[key]
        if isinstance(value, Exception):
            raise value
        if value is None:
            raise dns.resolver.NoAnswer()
        return [SimpleNamespace(target=value, address=value)]


@pytest.fixture(autouse=True)
def reset_zoneaudit_logging() -> Generator[None, None, None]:
    """Undo handler changes made by the CLI so caplog keeps working."""
    yield
    root = logging.getLogger("zoneaudit")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the developer's environment and config files."""
    for key in (
        "ZONEAUDIT_PROFILES",
        "ZONEAUDIT_FINGERPRINTS",
        "ZONEAUDIT_MAX_LOOKUPS",
        "ZONEAUDIT_TIMEOUT",
        "ZONEAUDIT_VERBOSE",
        "ZONEAUDIT_HTTPS",
    ):
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_fake_oracles() -> None:
    FakeOracle.instances.clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fingerprints() -> list[FingerprintSignature]:
    return [HEROKU, AZURE]


@pytest.fixture
def example_client() -> FakeRoute53Client:
    """One public zone with a vulnerable and a clean CNAME, plus a private zone."""
    return FakeRoute53Client(
        zones=[
            zone_payload("ZPUBLIC", "example.com."),
            zone_payload("ZPRIVATE", "corp.internal.", private=True),
        ],
        records={
            "/hostedzone/ZPUBLIC": [
                record_payload("example.com.", "NS", "ns-1.awsdns-01.org."),
                record_payload("app.example.com.", value="x.herokudns.com"),
                record_payload("www.example.com.", value="lb.internal.example.net"),
                record_payload("mail.example.com.", "MX", "10 mx.example.com"),
            ],
            "/hostedzone/ZPRIVATE": [
                record_payload("app.corp.internal.", value="y.herokudns.com"),
            ],
        },
    )
