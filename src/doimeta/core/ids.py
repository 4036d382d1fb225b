"""DOI encoding and URL construction utilities."""

from urllib.parse import quote

# Characters left unescaped by JavaScript's encodeURIComponent, beyond
# the alphanumerics and "-_.~" that quote() never escapes.
_COMPONENT_SAFE = "!*'()"


def quote_doi(doi: str) -> str:
    """Percent-encode a DOI for use as a single URL path segment."""
    return quote(doi, safe=_COMPONENT_SAFE)


def build_work_url(base_url: str, doi: str) -> str:
    """Build the works endpoint URL for a DOI."""
    return f"{base_url.rstrip('/')}/{quote_doi(doi)}"
