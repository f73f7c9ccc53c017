"""Finding classification and log output."""

from __future__ import annotations

import logging

from zoneaudit.modules.route53.models import HostedZone
from zoneaudit.modules.takeover.models import ScanFinding

findings_logger = logging.getLogger("zoneaudit.findings")


def report(finding: ScanFinding, verbose: bool, logger: logging.Logger | None = None) -> None:
    """Emit *finding* to the findings log.

    Vulnerable findings are always emitted at WARNING. Clean findings are
    emitted at DEBUG, and only when *verbose* is set.
    """
    log = logger or findings_logger
    if finding.vulnerable:
        log.warning(
            "%s is pointing to a vulnerable %s service",
            finding.subdomain,
            finding.service,
            extra={"zone": finding.zone, "service": finding.service},
        )
    elif verbose:
        log.debug("%s is ok", finding.subdomain, extra={"zone": finding.zone})


def report_zone_failure(
    zone: HostedZone, error: Exception, logger: logging.Logger | None = None
) -> None:
    """Log a zone whose records could not be listed."""
    log = logger or findings_logger
    log.error("[could not scan] zone %s (%s): %s", zone.name, zone.id, error)


def report_record_failure(
    subdomain: str, error: Exception, logger: logging.Logger | None = None
) -> None:
    """Log a record whose takeover check could not be completed."""
    log = logger or findings_logger
    log.error("[could not check] %s: %s", subdomain, error)


def count_vulnerable(findings: list[ScanFinding]) -> int:
    return sum(1 for finding in findings if finding.vulnerable)
