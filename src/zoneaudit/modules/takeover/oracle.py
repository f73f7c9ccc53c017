"""Takeover oracle: decide whether a hostname points at an unclaimed service."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Sequence

import dns.asyncresolver
import dns.exception
import dns.resolver
import httpx

from zoneaudit.errors import OracleError
from zoneaudit.tools.http import HTTPClient

from .models import FingerprintSignature

logger = logging.getLogger(__name__)


def concrete_host(hostname: str) -> str:
    """Replace a leading wildcard label with a random one that the wildcard covers."""
    if hostname.startswith("*."):
        return f"{secrets.token_hex(6)}{hostname[1:]}"
    return hostname


class FingerprintOracle:
    """Match hostnames against a fingerprint database.

    Use as an async context manager so that every probe shares one HTTP
    connection pool::

        async with FingerprintOracle(signatures) as oracle:
            service = await oracle.identify("app.example.com")
    """

    def __init__(
        self,
        fingerprints: Sequence[FingerprintSignature],
        *,
        timeout: float = 10.0,
        use_https: bool = False,
        resolver: dns.asyncresolver.Resolver | None = None,
        http_client: HTTPClient | None = None,
    ):
        self.fingerprints = tuple(fingerprints)
        self.timeout = timeout
        self.use_https = use_https
        self._resolver = resolver
        self._http = http_client
        self._owns_http = http_client is None

    async def __aenter__(self) -> FingerprintOracle:
        if self._resolver is None:
            self._resolver = dns.asyncresolver.Resolver()
            self._resolver.timeout = self.timeout
            self._resolver.lifetime = self.timeout
        if self._http is None:
            self._http = HTTPClient(timeout=self.timeout)
        if self._owns_http:
            await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_http and self._http is not None:
            await self._http.__aexit__(exc_type, exc_val, exc_tb)

    def match(self, target: str) -> FingerprintSignature | None:
        """Return the first signature whose cname pattern appears in *target*."""
        for signature in self.fingerprints:
            if signature.matches_cname(target):
                return signature
        return None

    async def identify(self, hostname: str, cname: str | None = None) -> str | None:
        """Return the vulnerable service *hostname* points at, or ``None``.

        *cname* is the alias target when the caller already knows it (e.g. the
        value stored in the record set); otherwise it is resolved.

        Raises:
            OracleError: DNS or HTTP failed in a way that leaves the answer unknown.
        """
        probe_host = concrete_host(hostname)
        target = cname or await self._resolve_cname(probe_host)
        if not target:
            return None

        signature = self.match(target)
        if signature is None:
            return None

        if signature.nxdomain:
            if await self._is_nxdomain(target):
                return signature.service
            return None

        if not signature.fingerprint:
            return None

        body = await self._fetch(probe_host)
        if signature.matches_body(body):
            return signature.service
        return None

    async def _resolve_cname(self, hostname: str) -> str | None:
        try:
            answer = await self._get_resolver().resolve(hostname, "CNAME")
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return None
        except (dns.resolver.NoNameservers, dns.exception.Timeout) as exc:
            raise OracleError(f"CNAME lookup failed: {exc}", hostname) from exc
        return str(answer[0].target).rstrip(".")

    async def _is_nxdomain(self, target: str) -> bool:
        try:
            await self._get_resolver().resolve(target, "A")
        except dns.resolver.NXDOMAIN:
            return True
        except dns.resolver.NoAnswer:
            return False
        except (dns.resolver.NoNameservers, dns.exception.Timeout) as exc:
            raise OracleError(f"Lookup of {target} failed: {exc}", target) from exc
        return False

    async def _fetch(self, hostname: str) -> str:
        if self._http is None or self._http.client is None:
            raise RuntimeError("Oracle not initialized. Use async context manager.")
        scheme = "https" if self.use_https else "http"
        try:
            response = await self._http.get(f"{scheme}://{hostname}")
        except httpx.HTTPError as exc:
            raise OracleError(f"HTTP probe failed: {exc}", hostname) from exc
        logger.debug(
            "%s answered %s in %.2fs (server %r)",
            response.url,
            response.status_code,
            response.response_time,
            response.server,
        )
        return response.body

    def _get_resolver(self) -> dns.asyncresolver.Resolver:
        if self._resolver is None:
            raise RuntimeError("Oracle not initialized. Use async context manager.")
        return self._resolver
