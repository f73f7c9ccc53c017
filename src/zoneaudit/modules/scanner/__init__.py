"""Scanner module for zoneaudit - concurrent takeover checks over hosted zones."""

from .dispatcher import ScanDispatcher
from .models import ScanConfig
from .reporting import count_vulnerable, report
from .runner import scan_profile

__all__ = [
    "ScanConfig",
    "ScanDispatcher",
    "count_vulnerable",
    "report",
    "scan_profile",
]
