"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and point
at the ``data``, ``views`` and ``public`` folders in the project root,
so a fresh checkout runs without any configuration at all.
"""

import os
from dataclasses import dataclass
from pathlib import Path


# Project root: three levels above ``wildlife_sightings_api/app/core``.
PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Wildlife Sightings API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # JSON file holding ``{"sightings": [...]}``.  It is re-read on
    # every request, so edits show up without a restart.
    data_file: str = os.getenv(
        "SIGHTINGS_DATA_FILE", str(PROJECT_ROOT / "data" / "sightings.json")
    )

    # Landing page and static assets.
    views_dir: str = os.getenv("VIEWS_DIR", str(PROJECT_ROOT / "views"))
    static_dir: str = os.getenv("STATIC_DIR", str(PROJECT_ROOT / "public"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
