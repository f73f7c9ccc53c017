"""Tools package for zoneaudit."""

from zoneaudit.tools.http import HTTPClient, HTTPResponse

__all__ = ["HTTPClient", "HTTPResponse"]
