"""Tests for ResolveLocationUseCase with an in-memory geocoder."""

from __future__ import annotations

import pytest

from tanker_price.application.ports.geocoder_port import GeocoderPort
from tanker_price.application.use_cases.resolve_location import ResolveLocationUseCase
from tanker_price.domain.errors import UnresolvableLocationError
from tanker_price.domain.value_objects.geo_point import GeoPoint
from tanker_price.domain.value_objects.location import CoordinateLocation, NamedLocation

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    def __init__(self, results: dict[str, GeoPoint] | None = None):
        self._results = results or {}
        self.queries: list[str] = []

    async def geocode(self, query):
        self.queries.append(query)
        if query not in self._results:
            raise UnresolvableLocationError(query)
        return self._results[query]


# ─── Tests ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_coordinate_is_returned_without_geocoding():
    geocoder = FakeGeocoder()
    uc = ResolveLocationUseCase(geocoder=geocoder)

    point = await uc.execute(CoordinateLocation(GeoPoint(52.5, 13.4)))

    assert point == GeoPoint(52.5, 13.4)
    assert geocoder.queries == []


@pytest.mark.asyncio
async def test_named_location_is_geocoded_once():
    geocoder = FakeGeocoder({"Berlin": GeoPoint(52.517, 13.389)})
    uc = ResolveLocationUseCase(geocoder=geocoder)

    point = await uc.execute(NamedLocation("Berlin"))

    assert point == GeoPoint(52.517, 13.389)
    assert geocoder.queries == ["Berlin"]


@pytest.mark.asyncio
async def test_named_location_passed_verbatim():
    geocoder = FakeGeocoder({"  Berlin Mitte ": GeoPoint(1.0, 2.0)})
    uc = ResolveLocationUseCase(geocoder=geocoder)

    await uc.execute(NamedLocation("  Berlin Mitte "))

    assert geocoder.queries == ["  Berlin Mitte "]


@pytest.mark.asyncio
async def test_unresolvable_propagates():
    uc = ResolveLocationUseCase(geocoder=FakeGeocoder())

    with pytest.raises(UnresolvableLocationError):
        await uc.execute(NamedLocation("Atlantis"))


@pytest.mark.asyncio
async def test_no_caching_between_calls():
    geocoder = FakeGeocoder({"Berlin": GeoPoint(52.517, 13.389)})
    uc = ResolveLocationUseCase(geocoder=geocoder)

    await uc.execute(NamedLocation("Berlin"))
    await uc.execute(NamedLocation("Berlin"))

    assert geocoder.queries == ["Berlin", "Berlin"]


@pytest.mark.asyncio
async def test_execute_raw_parses_coordinates():
    geocoder = FakeGeocoder()
    uc = ResolveLocationUseCase(geocoder=geocoder)

    point = await uc.execute_raw("52°S 13°W")

    assert point == GeoPoint(-52.0, -13.0)
    assert geocoder.queries == []


@pytest.mark.asyncio
async def test_execute_raw_geocodes_names():
    geocoder = FakeGeocoder({"Hamburg": GeoPoint(53.55, 9.99)})
    uc = ResolveLocationUseCase(geocoder=geocoder)

    assert await uc.execute_raw("Hamburg") == GeoPoint(53.55, 9.99)
