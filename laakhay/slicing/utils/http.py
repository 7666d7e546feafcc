"""HTTP client helper for offset-paginated endpoints.

``HTTPPageRetriever`` issues every slice of a fetch through one
``HTTPClient``, so the probe and all concurrently fanned-out slices reuse the
same aiohttp connection pool.
"""

from typing import Any, Dict, Optional

import aiohttp

DEFAULT_TIMEOUT = 30.0


class HTTPClient:
    """Async HTTP client shared by the slices of a fetch.

    The session is created lazily on first use, inside the running event
    loop, and recreated if it was closed. Close the client (or use it as an
    async context manager) once the fetch has completed.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Prefix joined onto relative slice paths (e.g. "/items")
            timeout: Total timeout per page request in seconds
        """
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Session shared by all concurrent page requests."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, url: str) -> str:
        """Join relative urls onto base_url with exactly one slash."""
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Fetch one page and return its decoded JSON body.

        HTTP error statuses raise ``aiohttp.ClientResponseError``; the slice
        fetcher wraps that with the failing offset.
        """
        async with self.session.get(
            self.build_url(url), params=params, headers=headers
        ) as response:
            response.raise_for_status()
            return await response.json()

    async def close(self) -> None:
        """Close the shared session if it is open."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
