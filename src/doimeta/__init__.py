"""
Crossref DOI metadata lookups.

Resolves a DOI against the Crossref works API and returns a flat,
fully-defaulted record of title, authors, year and references.

Basic Usage:
    >>> import asyncio
    >>> from doimeta import fetch_metadata
    >>>
    >>> record = asyncio.run(fetch_metadata("10.1145/3292500.3330701"))
    >>> record.title, record.year
"""

from .core.models import MetadataRecord, ReferenceRecord, YEAR_NOT_AVAILABLE
from .crossref import CrossrefAPIError, CrossrefClient, fetch_metadata

__all__ = [
    "CrossrefAPIError",
    "CrossrefClient",
    "MetadataRecord",
    "ReferenceRecord",
    "YEAR_NOT_AVAILABLE",
    "fetch_metadata",
]
