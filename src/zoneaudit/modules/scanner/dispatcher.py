"""Concurrent fan-out of zone and record takeover checks."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Sequence
from typing import Any

from zoneaudit.errors import OracleError, PaginationError
from zoneaudit.modules.route53.models import HostedZone, RecordSet
from zoneaudit.modules.route53.records import list_cname_records
from zoneaudit.modules.takeover.models import FingerprintSignature, ScanFinding
from zoneaudit.modules.takeover.oracle import FingerprintOracle

from .models import DEFAULT_MAX_LOOKUPS, DEFAULT_TIMEOUT
from .reporting import report, report_record_failure, report_zone_failure

logger = logging.getLogger(__name__)

Reporter = Callable[[ScanFinding, bool], None]


class ScanDispatcher:
    """Scan hosted zones concurrently, then the records of each zone concurrently.

    Each zone runs as a task in an outer :class:`asyncio.TaskGroup`; each
    zone task joins its own inner group of record tasks before it returns, so
    :meth:`scan` finishes only after every record of every zone is done.
    Oracle lookups share one semaphore of ``max_lookups`` slots; ``0`` lifts
    the bound.
    """

    def __init__(
        self,
        client: Any,
        *,
        verbose: bool = False,
        max_lookups: int = DEFAULT_MAX_LOOKUPS,
        timeout: float = DEFAULT_TIMEOUT,
        use_https: bool = False,
        reporter: Reporter = report,
        oracle_factory: Callable[..., Any] = FingerprintOracle,
    ):
        if max_lookups < 0:
            raise ValueError("max_lookups must be >= 0")
        self.client = client
        self.verbose = verbose
        self.max_lookups = max_lookups
        self.timeout = timeout
        self.use_https = use_https
        self._reporter = reporter
        self._oracle_factory = oracle_factory

    async def scan(
        self,
        zones: Sequence[HostedZone],
        fingerprints: Sequence[FingerprintSignature],
    ) -> list[ScanFinding]:
        """Check every CNAME of every public zone and return all findings."""
        semaphore = asyncio.Semaphore(self.max_lookups) if self.max_lookups else None
        oracle = self._oracle_factory(
            fingerprints, timeout=self.timeout, use_https=self.use_https
        )

        async with oracle:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._scan_zone(zone, oracle, semaphore), name=zone.name)
                    for zone in zones
                    if not zone.is_private
                ]

        return [finding for task in tasks for finding in task.result()]

    async def _scan_zone(
        self,
        zone: HostedZone,
        oracle: Any,
        semaphore: asyncio.Semaphore | None,
    ) -> list[ScanFinding]:
        try:
            records = await asyncio.to_thread(list_cname_records, self.client, zone.id)
        except PaginationError as exc:
            report_zone_failure(zone, exc)
            return []
        except Exception:
            logger.exception("[could not scan] zone %s (%s): unexpected error", zone.name, zone.id)
            return []

        logger.debug("Zone %s: checking %d CNAME record(s)", zone.name, len(records))
        findings: list[ScanFinding] = []
        async with asyncio.TaskGroup() as group:
            for record in records:
                group.create_task(self._check_record(zone, record, oracle, semaphore, findings))
        return findings

    async def _check_record(
        self,
        zone: HostedZone,
        record: RecordSet,
        oracle: Any,
        semaphore: asyncio.Semaphore | None,
        findings: list[ScanFinding],
    ) -> None:
        subdomain = record.name.rstrip(".")
        cname = record.targets[0] if record.targets else None
        try:
            async with semaphore or contextlib.nullcontext():
                service = await oracle.identify(subdomain, cname)
        except OracleError as exc:
            report_record_failure(subdomain, exc)
            return
        except Exception:
            logger.exception("[could not check] %s: unexpected error", subdomain)
            return

        finding = ScanFinding(
            subdomain=subdomain,
            vulnerable=service is not None,
            service=service,
            zone=zone.name.rstrip("."),
        )
        findings.append(finding)
        self._reporter(finding, self.verbose)
