"""
Top‑level package for the Wildlife Sightings API.

This file makes ``wildlife_sightings_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``wildlife_sightings_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
