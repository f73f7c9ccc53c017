"""Hosted zone enumeration."""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from zoneaudit.errors import EnumerationError

from .models import HostedZone

logger = logging.getLogger(__name__)


def list_public_zones(client: Any) -> list[HostedZone]:
    """Return every public hosted zone in the account.

    The zone listing is paginated upstream, so all pages are drained before
    private zones are filtered out.

    Raises:
        EnumerationError: The listing call failed. Without the zone list no
            partial result is meaningful.
    """
    zones: list[HostedZone] = []
    try:
        paginator = client.get_paginator("list_hosted_zones")
        for page in paginator.paginate():
            zones.extend(HostedZone.from_api(item) for item in page.get("HostedZones", []))
    except (BotoCoreError, ClientError) as exc:
        raise EnumerationError(f"Failed to list hosted zones: {exc}") from exc

    public = [zone for zone in zones if not zone.is_private]
    skipped = len(zones) - len(public)
    if skipped:
        logger.debug("Skipping %d private hosted zone(s)", skipped)
    return public
