"""Tests for the uniform error payloads."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from wildlife_sightings_api.app.core.config import settings
from wildlife_sightings_api.app.core.errors import AVAILABLE_ROUTES
from wildlife_sightings_api.app.services.sighting_service import SightingService


DATA_ROUTES = [
    "/api/sightings",
    "/api/sightings/verified",
    "/api/sightings/species-list",
    "/api/sightings/habitat/forest",
    "/api/sightings/search/eagle",
    "/api/sightings/find-index/moose",
    "/api/sightings/recent",
]


@pytest.mark.parametrize("route", DATA_ROUTES)
def test_missing_file_gives_500_on_every_route(client, missing_data_file, route):
    response = client.get(route)

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"error", "route", "timestamp"}
    assert "Sightings data file not found" in body["error"]
    assert body["route"] == route
    assert body["timestamp"].endswith("Z")
    datetime.fromisoformat(body["timestamp"])


@pytest.mark.parametrize("route", DATA_ROUTES)
def test_malformed_file_gives_500_on_every_route(client, write_data_file, route):
    write_data_file("this is not json")

    response = client.get(route)

    assert response.status_code == 500
    assert response.json()["error"] == "Invalid JSON format in sightings.json file."
    assert response.json()["route"] == route


def test_wrong_shape_gives_500(client, write_data_file):
    write_data_file({"observations": []})

    response = client.get("/api/sightings/recent")

    assert response.status_code == 500
    assert response.json()["error"] == "Invalid data structure: sightings array not found"


def test_unknown_route_gives_404_with_route_list(client):
    response = client.get("/api/sightings/habitat/desert")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Route not found",
        "message": "The route /api/sightings/habitat/desert does not exist on this server",
        "availableRoutes": AVAILABLE_ROUTES,
    }


def test_unknown_route_message_keeps_query_string(client):
    response = client.get("/nowhere?species=moose")

    assert response.status_code == 404
    assert response.json()["message"] == "The route /nowhere?species=moose does not exist on this server"


def test_non_get_method_is_reported_as_unknown_route(client, sample_data_file):
    response = client.post("/api/sightings")

    assert response.status_code == 404
    assert response.json()["error"] == "Route not found"


def test_available_routes_are_literal():
    assert AVAILABLE_ROUTES == [
        "GET /",
        "GET /api/sightings",
        "GET /api/sightings/verified",
        "GET /api/sightings/species-list",
        "GET /api/sightings/habitat/forest",
        "GET /api/sightings/search/eagle",
        "GET /api/sightings/find-index/moose",
        "GET /api/sightings/recent",
    ]


def test_unhandled_error_hides_details(client, monkeypatch):
    monkeypatch.setattr(settings, "debug", False)
    monkeypatch.setattr(SightingService, "list_species", AsyncMock(side_effect=RuntimeError("boom")))

    response = client.get("/api/sightings/species-list")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "message": "Something went wrong!"}


def test_unhandled_error_shows_details_in_debug(client, monkeypatch):
    monkeypatch.setattr(settings, "debug", True)
    monkeypatch.setattr(SightingService, "list_species", AsyncMock(side_effect=RuntimeError("boom")))

    response = client.get("/api/sightings/species-list")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "message": "boom"}


def test_error_route_is_full_path_of_nested_route(client, missing_data_file):
    response = client.get("/api/sightings/recent")

    assert response.status_code == 500
    assert response.json()["route"] == "/api/sightings/recent"


@pytest.mark.parametrize(
    "bad",
    [
        {"species": "Red Fox", "habitat": "Grassland", "date": "2025/09/14", "location": "Toronto, ON", "verified": False},
        {"species": "Red Fox", "habitat": "Grassland", "date": "2025-09-14", "location": "Toronto, ON"},
    ],
    ids=["slash-date", "missing-verified"],
)
def test_one_invalid_record_fails_the_whole_collection(client, write_data_file, bad):
    write_data_file({"sightings": [bad]})

    response = client.get("/api/sightings")

    assert response.status_code == 500
    body = response.json()
    assert body["route"] == "/api/sightings"
    assert body["error"].startswith("Invalid sighting record at index 0:")
