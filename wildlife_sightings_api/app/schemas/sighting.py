"""
Pydantic models for wildlife sighting data.

``SightingRecord`` mirrors one entry of the ``sightings`` array in the
data file.  The ``date`` is validated as ISO‑8601 but kept as the
original string so that responses echo the file verbatim; use
``observed_at`` for ordering.  Keys the model does not know about are
kept, and keys missing from the file are not emitted when records are
serialised with ``exclude_unset``.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, StrictBool, field_validator


def parse_sighting_date(value: str) -> datetime:
    """Parse an ISO‑8601 date or date‑time; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SightingRecord(BaseModel):
    species: str = Field(..., examples=["Bald Eagle"])
    habitat: str = Field(..., examples=["Forest"])
    date: str = Field(..., examples=["2025-09-14T07:45:00Z"])
    location: str = Field(..., examples=["Algonquin Park, ON"])
    verified: StrictBool = Field(..., examples=[True])
    notes: Optional[str] = Field(None, examples=["Perched on a dead pine near the lake shore."])

    model_config = {
        "extra": "allow",
        "frozen": True,
    }

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        try:
            parse_sighting_date(value)
        except ValueError as exc:
            raise ValueError(f"date must be ISO-8601, got {value!r}") from exc
        return value

    @property
    def observed_at(self) -> datetime:
        return parse_sighting_date(self.date)


class HabitatSightings(BaseModel):
    """Sightings recorded in one habitat, with their count."""

    habitat: str
    sightings: List[SightingRecord]
    count: int


class SearchMiss(BaseModel):
    """Returned by the species search when nothing matches."""

    message: str


class SpeciesIndexLookup(BaseModel):
    """Position of the first record of a species, ``-1`` when absent."""

    index: int
    sighting: Optional[SightingRecord]
    found: bool


class RecentSighting(BaseModel):
    """Condensed view of a sighting used by the ``recent`` listing."""

    species: str
    date: str
    location: str
    verified: bool
    notes: str = ""
