"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def nominatim_berlin_response():
    """Trimmed real Nominatim search result for "Berlin Mitte"."""
    return [
        {
            "place_id": 132553328,
            "licence": "Data © OpenStreetMap contributors, ODbL 1.0. https://osm.org/copyright",
            "osm_type": "relation",
            "lat": "52.5170365",
            "lon": "13.3888599",
            "display_name": "Mitte, Berlin, Deutschland",
            "class": "boundary",
            "type": "administrative",
        },
        {
            "place_id": 132435111,
            "lat": "52.5178",
            "lon": "13.4040",
            "display_name": "Mitte, Berlin, Deutschland",
        },
    ]
