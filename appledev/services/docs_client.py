"""
Apple Docs Client
=================
Asynchronous HTTP client for Apple's documentation JSON API.

Request Policy:
    - One GET per documentation path, never retried
    - Bounded by DOCS_FETCH_TIMEOUT
    - Any failure (HTTP error status, timeout, transport error, body that is
      not a JSON object) yields None; the caller degrades to templated text

Usage:
    async with AppleDocsClient() as client:
        page = await client.fetch_page("swiftui/navigationstack")
"""
import logging
from typing import Any, Optional

import httpx

from appledev.core.config import APPLE_DOCS_API, DOCS_FETCH_TIMEOUT, DOCS_USER_AGENT

logger = logging.getLogger(__name__)


class AppleDocsClient:
    """Fetches raw documentation pages as parsed JSON dicts."""

    def __init__(
        self,
        base_url: str = APPLE_DOCS_API,
        timeout_seconds: float = DOCS_FETCH_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.headers = {
            "Accept": "application/json",
            "User-Agent": DOCS_USER_AGENT,
        }
        self._http: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "AppleDocsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_http(self) -> httpx.AsyncClient:
        """Lazy-initialise the HTTP client."""
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout_seconds))
        return self._http

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http and not self._http.is_closed:
            await self._http.aclose()
            self._http = None

    def url_for(self, doc_path: str) -> str:
        return f"{self.base_url}/{doc_path}.json"

    async def fetch_page(self, doc_path: str) -> Optional[dict[str, Any]]:
        """
        Fetch one documentation page.

        Parameters
        ----------
        doc_path : str
            Path relative to the API base, without the ".json" suffix.

        Returns
        -------
        dict | None
            The decoded page, or None when the page is unavailable.
        """
        url = self.url_for(doc_path)
        http = await self._get_http()

        try:
            resp = await http.get(url, headers=self.headers)
            resp.raise_for_status()
            data = resp.json()
        except httpx.TimeoutException:
            logger.warning("Docs fetch timed out after %.1fs: %s", self.timeout_seconds, url)
            return None
        except httpx.HTTPStatusError as e:
            logger.debug("Docs fetch HTTP %d: %s", e.response.status_code, url)
            return None
        except httpx.HTTPError as e:
            logger.warning("Docs fetch transport error for %s: %s", url, e)
            return None
        except ValueError as e:
            logger.warning("Docs fetch returned invalid JSON for %s: %s", url, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Docs fetch returned a non-object body for %s", url)
            return None

        logger.debug("Docs page fetched: %s", url)
        return data
