"""Scan one AWS profile end to end."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from zoneaudit.errors import EnumerationError
from zoneaudit.modules.route53 import create_route53_client, list_public_zones
from zoneaudit.modules.takeover import ScanFinding, load_fingerprints

from .dispatcher import ScanDispatcher
from .models import ScanConfig

logger = logging.getLogger(__name__)


async def scan_profile(
    profile: str,
    config: ScanConfig,
    client_factory: Callable[[str], Any] = create_route53_client,
    dispatcher_cls: type[ScanDispatcher] = ScanDispatcher,
) -> list[ScanFinding]:
    """Enumerate the public zones of *profile* and check all their CNAMEs.

    Raises:
        EnumerationError: The profile could not be opened or its zones listed.
        FingerprintError: The fingerprint database could not be loaded.
    """
    client = await asyncio.to_thread(client_factory, profile)
    try:
        zones = await asyncio.to_thread(list_public_zones, client)
    except EnumerationError as exc:
        exc.profile = profile
        raise

    logger.info("Profile %s: %d public hosted zone(s)", profile, len(zones))
    if not zones:
        return []

    fingerprints = await asyncio.to_thread(load_fingerprints, config.fingerprints_path)
    dispatcher = dispatcher_cls(
        client,
        verbose=config.verbose,
        max_lookups=config.max_lookups,
        timeout=config.timeout,
        use_https=config.use_https,
    )
    return await dispatcher.scan(zones, fingerprints)
