"""Core domain models for normalized DOI metadata."""

from typing import List, Dict, Any, Literal, Union
from pydantic import BaseModel, Field

YEAR_NOT_AVAILABLE = "N/A"


class ReferenceRecord(BaseModel):
    """One entry of a work's reference list."""
    title: str = ""
    doi: str = ""
    year: str = ""


class MetadataRecord(BaseModel):
    """Normalized metadata for a single work.

    Every field is always populated: missing source data is replaced by an
    empty string, an empty list, or ``YEAR_NOT_AVAILABLE`` for the year.
    """

    title: str = ""
    authors: List[str] = Field(default_factory=list)
    year: Union[int, Literal["N/A"]] = YEAR_NOT_AVAILABLE
    doi: str = Field(..., description="DOI exactly as requested")
    references: List[ReferenceRecord] = Field(default_factory=list)

    @property
    def has_year(self) -> bool:
        """True when a publication year was resolved."""
        return isinstance(self.year, int)

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as plain JSON-compatible data."""
        return self.model_dump(mode="json")
