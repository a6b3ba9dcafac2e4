"""
Top‑level API router.

Aggregates the domain routers under the ``/api`` prefix applied in
``main.create_app``.  Sightings are the only domain at present.
"""

from fastapi import APIRouter

from .endpoints import sightings

router = APIRouter()

router.include_router(sightings.router, prefix="/sightings", tags=["sightings"])
