"""Exceptions raised by the Crossref client."""

from typing import Optional


class CrossrefAPIError(Exception):
    """Crossref answered with a non-success HTTP status."""

    def __init__(self, status_code: int, doi: Optional[str] = None) -> None:
        super().__init__(f"Crossref API error: {status_code}")
        self.status_code = status_code
        self.doi = doi
