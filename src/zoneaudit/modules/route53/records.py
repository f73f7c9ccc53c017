"""Record set pagination for a single hosted zone."""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from zoneaudit.errors import PaginationError

from .models import PaginationCursor, RecordSet

logger = logging.getLogger(__name__)

CNAME = "CNAME"


def iter_record_pages(client: Any, zone_id: str):
    """Yield raw ``list_resource_record_sets`` pages until the listing is complete."""
    cursor: PaginationCursor | None = None
    while True:
        params: dict[str, Any] = {"HostedZoneId": zone_id}
        if cursor is not None:
            params.update(cursor.to_request())
        try:
            page = client.list_resource_record_sets(**params)
        except (BotoCoreError, ClientError) as exc:
            raise PaginationError(
                f"Failed to list record sets for zone {zone_id}: {exc}", zone_id
            ) from exc

        yield page

        next_cursor = PaginationCursor.from_response(page, zone_id)
        if next_cursor is None:
            return
        if next_cursor == cursor:
            raise PaginationError(
                f"Record listing for zone {zone_id} did not advance past {next_cursor.next_name}",
                zone_id,
            )
        cursor = next_cursor


def list_cname_records(client: Any, zone_id: str) -> list[RecordSet]:
    """Return every CNAME record set of *zone_id*, following all pages."""
    seen: set[tuple[str, str, str | None]] = set()
    records: list[RecordSet] = []
    pages = 0

    for page in iter_record_pages(client, zone_id):
        pages += 1
        for item in page.get("ResourceRecordSets", []):
            if item.get("Type") != CNAME:
                continue
            record = RecordSet.from_api(item)
            if record.key in seen:
                continue
            seen.add(record.key)
            records.append(record)

    logger.debug("Zone %s: %d CNAME record(s) across %d page(s)", zone_id, len(records), pages)
    return records
