"""
Sightings endpoints.

Each route reads the data file through ``SightingService`` and applies
one fixed view to it: all records, verified only, the species list,
forest sightings, the first eagle, the position of the first moose and
the three most recent sightings.  Load failures are not handled here;
they propagate to the exception handlers registered in ``main``.

Record responses use ``response_model_exclude_unset`` so that records
are echoed as they appear in the file, without ``null`` placeholders
for missing optional fields.
"""

from typing import List, Union

from fastapi import APIRouter

from wildlife_sightings_api.app.schemas.sighting import (
    HabitatSightings,
    RecentSighting,
    SearchMiss,
    SightingRecord,
    SpeciesIndexLookup,
)
from wildlife_sightings_api.app.services.sighting_service import SightingService

router = APIRouter()

FOREST_HABITAT = "forest"
EAGLE_SEARCH_TERM = "eagle"
MOOSE_SPECIES = "Moose"


@router.get("", response_model=List[SightingRecord], response_model_exclude_unset=True)
async def list_sightings() -> List[SightingRecord]:
    """Return every sighting in the data file."""
    return await SightingService.list_sightings()


@router.get("/verified", response_model=List[SightingRecord], response_model_exclude_unset=True)
async def list_verified_sightings() -> List[SightingRecord]:
    """Return only the sightings flagged as verified."""
    return await SightingService.list_verified()


@router.get("/species-list", response_model=List[str])
async def list_species() -> List[str]:
    """Return the distinct species names in order of first appearance."""
    return await SightingService.list_species()


@router.get("/habitat/forest", response_model=HabitatSightings, response_model_exclude_unset=True)
async def forest_sightings() -> HabitatSightings:
    """Return forest sightings (habitat compared case-insensitively) and their count."""
    return await SightingService.by_habitat(FOREST_HABITAT)


@router.get(
    "/search/eagle",
    response_model=Union[SightingRecord, SearchMiss],
    response_model_exclude_unset=True,
)
async def search_eagle() -> Union[SightingRecord, SearchMiss]:
    """Return the first sighting whose species mentions "eagle".

    When there is none, a ``{"message": ...}`` object is returned
    instead, still with status 200.
    """
    return await SightingService.search(EAGLE_SEARCH_TERM)


@router.get(
    "/find-index/moose",
    response_model=SpeciesIndexLookup,
    response_model_exclude_unset=True,
)
async def find_moose_index() -> SpeciesIndexLookup:
    """Return the position of the first sighting whose species is exactly "Moose"."""
    return await SightingService.find_index(MOOSE_SPECIES)


@router.get("/recent", response_model=List[RecentSighting])
async def recent_sightings() -> List[RecentSighting]:
    """Return the three most recent sightings with notes shortened."""
    return await SightingService.recent()
