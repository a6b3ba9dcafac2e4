"""
Query layer for wildlife sightings.

The module-level functions are pure transformations over a list of
``SightingRecord`` objects; each API view applies exactly one of them.
``SightingService`` pairs them with ``load_sightings`` so that every
call works on a freshly read copy of the data file.

The two species lookups differ: ``search_species``
matches a case-insensitive substring, ``find_species_index`` an exact,
case-sensitive name.
"""

from __future__ import annotations

from typing import List, Optional, Union

from wildlife_sightings_api.app.schemas.sighting import (
    HabitatSightings,
    RecentSighting,
    SearchMiss,
    SightingRecord,
    SpeciesIndexLookup,
)
from wildlife_sightings_api.app.services.data_loader import load_sightings


NOTES_PREVIEW_LENGTH = 100
RECENT_LIMIT = 3


def verified_sightings(records: List[SightingRecord]) -> List[SightingRecord]:
    return [record for record in records if record.verified is True]


def unique_species(records: List[SightingRecord]) -> List[str]:
    """Species names without duplicates, in order of first appearance."""
    return list(dict.fromkeys(record.species for record in records))


def sightings_in_habitat(records: List[SightingRecord], habitat: str) -> HabitatSightings:
    wanted = habitat.lower()
    matches = [record for record in records if record.habitat.lower() == wanted]
    return HabitatSightings(habitat=habitat, sightings=matches, count=len(matches))


def search_species(records: List[SightingRecord], term: str) -> Optional[SightingRecord]:
    """First record whose species contains ``term``, ignoring case."""
    needle = term.lower()
    return next((record for record in records if needle in record.species.lower()), None)


def find_species_index(records: List[SightingRecord], species: str) -> SpeciesIndexLookup:
    """Index of the first record whose species is exactly ``species``."""
    for index, record in enumerate(records):
        if record.species == species:
            return SpeciesIndexLookup(index=index, sighting=record, found=True)
    return SpeciesIndexLookup(index=-1, sighting=None, found=False)


def preview_notes(notes: Optional[str]) -> str:
    # Non-empty notes always get the ellipsis, even when shorter than the limit.
    if not notes:
        return ""
    return notes[:NOTES_PREVIEW_LENGTH] + "..."


def recent_sightings(records: List[SightingRecord], limit: int = RECENT_LIMIT) -> List[RecentSighting]:
    """The ``limit`` most recent sightings, newest first.

    ``sorted`` is stable with ``reverse=True`` too, so records sharing a
    date keep their order from the file.
    """
    newest_first = sorted(records, key=lambda record: record.observed_at, reverse=True)
    return [
        RecentSighting(
            species=record.species,
            date=record.date,
            location=record.location,
            verified=record.verified,
            notes=preview_notes(record.notes),
        )
        for record in newest_first[:limit]
    ]


class SightingService:
    """Read-only access to the sightings file for the API layer."""

    @classmethod
    async def list_sightings(cls) -> List[SightingRecord]:
        return await load_sightings()

    @classmethod
    async def list_verified(cls) -> List[SightingRecord]:
        return verified_sightings(await load_sightings())

    @classmethod
    async def list_species(cls) -> List[str]:
        return unique_species(await load_sightings())

    @classmethod
    async def by_habitat(cls, habitat: str) -> HabitatSightings:
        return sightings_in_habitat(await load_sightings(), habitat)

    @classmethod
    async def search(cls, term: str) -> Union[SightingRecord, SearchMiss]:
        """Return the first match for ``term`` or a ``SearchMiss`` message."""
        match = search_species(await load_sightings(), term)
        if match is None:
            return SearchMiss(message=f"No {term} sighting found")
        return match

    @classmethod
    async def find_index(cls, species: str) -> SpeciesIndexLookup:
        return find_species_index(await load_sightings(), species)

    @classmethod
    async def recent(cls, limit: int = RECENT_LIMIT) -> List[RecentSighting]:
        return recent_sightings(await load_sightings(), limit)
