"""HTTP helpers for zoneaudit."""

import time
from dataclasses import dataclass

import httpx

USER_AGENT = "zoneaudit/0.1 (+subdomain takeover audit)"


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    body: str
    response_time: float
    server: str = ""


class HTTPClient:
    """Async HTTP client shared by concurrent takeover probes."""

    def __init__(
        self,
        timeout: float = 10.0,
        follow_redirects: bool = True,
        verify_ssl: bool = False,
        max_connections: int = 100,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.max_connections = max_connections
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
            headers={"User-Agent": USER_AGENT},
            limits=httpx.Limits(max_connections=self.max_connections),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def get(self, url: str) -> HTTPResponse:
        """Make a GET request.

        Transport failures surface as :class:`httpx.HTTPError`.
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        start = time.time()
        response = await self.client.get(url)
        elapsed = time.time() - start

        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            body=response.text,
            response_time=elapsed,
            server=response.headers.get("server", ""),
        )
