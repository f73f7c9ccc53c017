"""Data models for Route 53 hosted zones and record sets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from zoneaudit.errors import PaginationError

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def decode_name(name: str) -> str:
    """Undo the \\ooo escapes Route 53 uses for characters such as ``*``."""
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), name)


@dataclass(frozen=True)
class HostedZone:
    """Snapshot of a hosted zone taken at enumeration time."""

    id: str
    name: str
    is_private: bool = False

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> HostedZone:
        config = payload.get("Config") or {}
        return cls(
            id=payload["Id"],
            name=decode_name(payload["Name"]),
            is_private=bool(config.get("PrivateZone", False)),
        )


@dataclass(frozen=True)
class RecordSet:
    """A single resource record set inside a zone."""

    name: str
    record_type: str
    targets: tuple[str, ...] = field(default_factory=tuple)
    set_identifier: str | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> RecordSet:
        values = tuple(
            entry["Value"] for entry in payload.get("ResourceRecords", []) if entry.get("Value")
        )
        return cls(
            name=decode_name(payload["Name"]),
            record_type=payload["Type"],
            targets=values,
            set_identifier=payload.get("SetIdentifier"),
        )

    @property
    def key(self) -> tuple[str, str, str | None]:
        return (self.name, self.record_type, self.set_identifier)


@dataclass(frozen=True)
class PaginationCursor:
    """Continuation token of a truncated ``list_resource_record_sets`` page.

    Route 53 orders record sets by name, then type, then set identifier, so
    resuming from the name alone re-reads or skips entries that share a name.
    Every field the page returned is forwarded.
    """

    next_name: str
    next_type: str | None = None
    next_identifier: str | None = None

    @classmethod
    def from_response(cls, page: dict[str, Any], zone_id: str = "") -> PaginationCursor | None:
        """Return the cursor for the next page, or ``None`` when the listing is done.

        Raises:
            PaginationError: The page is truncated but names no next record.
        """
        if not page.get("IsTruncated"):
            return None
        next_name = page.get("NextRecordName")
        if not next_name:
            raise PaginationError(
                f"Truncated record listing for zone {zone_id} has no NextRecordName", zone_id
            )
        return cls(
            next_name=next_name,
            next_type=page.get("NextRecordType"),
            next_identifier=page.get("NextRecordIdentifier"),
        )

    def to_request(self) -> dict[str, str]:
        params = {"StartRecordName": self.next_name}
        if self.next_type:
            params["StartRecordType"] = self.next_type
        if self.next_identifier:
            params["StartRecordIdentifier"] = self.next_identifier
        return params
