"""Error taxonomy for zone auditing.

Only :class:`EnumerationError` is allowed to end a profile's scan. The other
errors are contained at the zone or record they belong to and logged.
"""


class ZoneAuditError(Exception):
    """Base class for all zoneaudit errors."""


class EnumerationError(ZoneAuditError):
    """Listing the account's hosted zones failed."""

    def __init__(self, message: str, profile: str | None = None):
        super().__init__(message)
        self.profile = profile


class PaginationError(ZoneAuditError):
    """Listing the record sets of one hosted zone failed."""

    def __init__(self, message: str, zone_id: str):
        super().__init__(message)
        self.zone_id = zone_id


class OracleError(ZoneAuditError):
    """The takeover check for a single hostname could not be completed."""

    def __init__(self, message: str, hostname: str):
        super().__init__(message)
        self.hostname = hostname


class FingerprintError(ZoneAuditError):
    """The fingerprint database could not be read or parsed."""
