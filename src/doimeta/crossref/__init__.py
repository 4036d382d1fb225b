"""Crossref works API access and response parsing."""

from .client import CrossrefClient, fetch_metadata
from .errors import CrossrefAPIError

__all__ = ["CrossrefClient", "CrossrefAPIError", "fetch_metadata"]
