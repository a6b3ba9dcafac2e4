"""Shared fixtures: a temporary sightings file wired into the settings."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wildlife_sightings_api.app.core.config import settings
from wildlife_sightings_api.app.main import create_app


LONG_NOTES = (
    "Adult perched on a dead cottonwood at the marsh edge, later seen diving for fish "
    "several times. Photographed from the boardwalk at roughly eighty metres."
)

SAMPLE_SIGHTINGS = [
    {
        "species": "Bald Eagle",
        "habitat": "Wetland",
        "date": "2025-09-14T07:45:00Z",
        "location": "Point Pelee National Park, ON",
        "verified": True,
        "notes": LONG_NOTES,
    },
    {
        "species": "White-tailed Deer",
        "habitat": "Forest",
        "date": "2025-08-02T18:20:00Z",
        "location": "Rouge National Urban Park, ON",
        "verified": True,
        "notes": "Doe with two fawns.",
    },
    {
        "species": "Red Fox",
        "habitat": "Grassland",
        "date": "2025-09-01T20:05:00Z",
        "location": "Leslie Street Spit, Toronto, ON",
        "verified": False,
    },
    {
        "species": "Moose",
        "habitat": "Wetland",
        "date": "2025-09-14T07:45:00Z",
        "location": "Algonquin Provincial Park, ON",
        "verified": True,
        "notes": "Bull in pond.",
        "observer": "K. Lindqvist",
    },
    {
        "species": "White-tailed Deer",
        "habitat": "FOREST",
        "date": "2025-06-01T05:55:00Z",
        "location": "Bronte Creek Provincial Park, ON",
        "verified": False,
        "notes": "",
    },
    {
        "species": "Black Bear",
        "habitat": "forest",
        "date": "2025-09-20",
        "location": "Killarney Provincial Park, ON",
        "verified": False,
    },
]


@pytest.fixture
def write_data_file(tmp_path, monkeypatch):
    """Return a writer that stores content in a temp file and points the app at it.

    Dicts and lists are dumped as JSON; strings are written verbatim so
    tests can produce malformed files.
    """

    def _write(content) -> Path:
        path = tmp_path / "sightings.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        monkeypatch.setattr(settings, "data_file", str(path))
        return path

    return _write


@pytest.fixture
def sample_data_file(write_data_file):
    return write_data_file({"sightings": SAMPLE_SIGHTINGS})


@pytest.fixture
def missing_data_file(tmp_path, monkeypatch):
    path = tmp_path / "absent" / "sightings.json"
    monkeypatch.setattr(settings, "data_file", str(path))
    return path


@pytest.fixture
def client():
    app = create_app()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
