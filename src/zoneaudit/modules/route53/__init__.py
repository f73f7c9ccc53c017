"""Route 53 zone enumeration and record pagination."""

from .models import HostedZone, PaginationCursor, RecordSet
from .records import iter_record_pages, list_cname_records
from .session import create_route53_client
from .zones import list_public_zones

__all__ = [
    "HostedZone",
    "PaginationCursor",
    "RecordSet",
    "create_route53_client",
    "iter_record_pages",
    "list_cname_records",
    "list_public_zones",
]
