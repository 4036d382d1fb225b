"""Crossref works API client for single-DOI metadata lookups.

This module defines an asynchronous client that resolves one DOI against
``https://api.crossref.org/works/{doi}`` and returns a normalized
``MetadataRecord``. Each lookup is a single GET: there is no retry, rate
limiting or caching. Non-success responses raise ``CrossrefAPIError``;
transport and JSON decoding errors propagate unchanged.
"""

from __future__ import annotations

from typing import Optional, Dict, Any

import httpx

from ..config.settings import settings
from ..core.ids import build_work_url
from ..core.models import MetadataRecord
from ..utils.logging import get_logger
from .errors import CrossrefAPIError
from .parser import parse_work


logger = get_logger(__name__)


class CrossrefClient:
    """
    Crossref works API client.

    Usage::

        async with CrossrefClient() as client:
            record = await client.fetch_metadata("10.1145/3292500.3330701")

    An existing ``httpx.AsyncClient`` may be passed in; it is then left open
    on ``close()`` since the caller owns it.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url or settings.crossref_base_url
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(**self._client_options())

    @staticmethod
    def _client_options() -> Dict[str, Any]:
        options: Dict[str, Any] = {"follow_redirects": True}
        if settings.request_timeout is not None:
            options["timeout"] = settings.request_timeout
        return options

    async def _fetch_work(self, doi: str) -> Dict[str, Any]:
        """Fetch the raw work document for a DOI and return the parsed JSON."""
        url = build_work_url(self.base_url, doi)
        logger.debug("Fetching Crossref work", extra={"doi": doi, "url": url})
        response = await self.client.get(url)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                f"Crossref returned HTTP {response.status_code}",
                extra={"doi": doi, "status_code": response.status_code},
            )
            raise CrossrefAPIError(response.status_code, doi=doi) from exc
        return response.json()

    async def fetch_metadata(self, doi: str) -> MetadataRecord:
        """Fetch and normalize metadata for a DOI.

        Args:
            doi: DOI string; sent as-is apart from percent-encoding.

        Returns:
            The normalized ``MetadataRecord``.

        Raises:
            CrossrefAPIError: If Crossref responds with a non-2xx status.
            httpx.TransportError: If the request itself fails.
            ValueError: If the body is not valid JSON.
        """
        data = await self._fetch_work(doi)
        record = parse_work(data, doi)
        logger.debug(
            "Parsed Crossref work",
            extra={"doi": doi, "authors": len(record.authors), "references": len(record.references)},
        )
        return record

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "CrossrefClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} base_url={self.base_url}>"


async def fetch_metadata(doi: str) -> MetadataRecord:
    """Fetch normalized metadata for one DOI using a short-lived client."""
    async with CrossrefClient() as client:
        return await client.fetch_metadata(doi)
