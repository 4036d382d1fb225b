"""Mapping of Crossref work documents onto ``MetadataRecord``.

Crossref's works schema is loose: any field may be missing, ``title`` may be
a string or a list, and dates come as nested ``date-parts`` arrays. All of
the presence checks and defaulting live here so the client only deals with
HTTP. Shape errors that cannot be defaulted (for example an empty
``date-parts`` array) are not caught and surface to the caller as the
underlying ``KeyError``, ``IndexError`` or ``TypeError``.
"""

from typing import Any, Dict, List, Union

from ..core.models import MetadataRecord, ReferenceRecord, YEAR_NOT_AVAILABLE


def _text(value: Any) -> str:
    """Return ``value`` as a string, with falsy values mapped to ``""``."""
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_title(message: Dict[str, Any]) -> str:
    """Return the title, taking the first entry when Crossref sends a list."""
    title = message.get("title")
    if isinstance(title, list):
        title = title[0] if title else None
    return title or ""


def parse_author(author_data: Dict[str, Any]) -> str:
    """Format an author as ``"<family> <given>"``."""
    family = _text(author_data.get("family"))
    given = _text(author_data.get("given"))
    return f"{family} {given}".strip()


def parse_authors(message: Dict[str, Any]) -> List[str]:
    authors_data = message.get("author") or []
    return [parse_author(a) for a in authors_data]


def parse_year(message: Dict[str, Any]) -> Union[int, str]:
    """Resolve the publication year.

    ``published-print`` wins whenever it carries ``date-parts``, even if the
    year inside is null; ``published-online`` is only consulted when print
    has no ``date-parts`` at all. An empty ``date-parts`` list raises.
    """
    year = None
    for key in ("published-print", "published-online"):
        published = message.get(key)
        if published and published.get("date-parts") is not None:
            year = published["date-parts"][0][0]
            break
    return year or YEAR_NOT_AVAILABLE


def parse_reference(ref_data: Dict[str, Any]) -> ReferenceRecord:
    """Map one reference entry, falling back to the journal title."""
    return ReferenceRecord(
        title=_text(ref_data.get("article-title") or ref_data.get("journal-title")),
        doi=_text(ref_data.get("DOI")),
        year=_text(ref_data.get("year")),
    )


def parse_references(message: Dict[str, Any]) -> List[ReferenceRecord]:
    refs_data = message.get("reference")
    if not isinstance(refs_data, list):
        return []
    return [parse_reference(ref) for ref in refs_data]


def parse_work(data: Dict[str, Any], doi: str) -> MetadataRecord:
    """Convert a Crossref ``/works/{doi}`` response body to a ``MetadataRecord``.

    Args:
        data: Decoded JSON body; the work itself is under ``message``.
        doi: The DOI that was requested, echoed into the record.

    Returns:
        A fully populated ``MetadataRecord``.
    """
    message = data["message"]
    return MetadataRecord(
        title=parse_title(message),
        authors=parse_authors(message),
        year=parse_year(message),
        doi=doi,
        references=parse_references(message),
    )
