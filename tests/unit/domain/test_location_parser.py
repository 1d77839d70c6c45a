"""Tests for the location parser — decimal pairs, DMS pairs, place names."""

import pytest

from tanker_price.domain.policies.location_parser import (
    match_decimal_pair,
    match_dms_pair,
    parse_location,
)
from tanker_price.domain.value_objects.geo_point import GeoPoint
from tanker_price.domain.value_objects.location import CoordinateLocation, NamedLocation


def _point(location) -> GeoPoint:
    assert isinstance(location, CoordinateLocation)
    return location.point


# ─── Decimal pairs ──────────────────────────────────────────────────


def test_decimal_comma():
    assert parse_location("52.5,13.4") == CoordinateLocation(GeoPoint(52.5, 13.4))


@pytest.mark.parametrize("raw", ["52.5/13.4", "52.5 , 13.4", "  52.5 / 13.4  "])
def test_decimal_other_separators(raw):
    assert _point(parse_location(raw)) == GeoPoint(52.5, 13.4)


def test_decimal_signed():
    assert _point(parse_location("-33.8688,+151.2093")) == GeoPoint(-33.8688, 151.2093)


def test_decimal_integers():
    assert _point(parse_location("48,11")) == GeoPoint(48.0, 11.0)


def test_decimal_period_separator():
    """A period between two decimals is a separator."""
    assert _point(parse_location("52.5.13.4")) == GeoPoint(52.5, 13.4)


def test_decimal_single_period_splits_integers():
    assert _point(parse_location("52.13")) == GeoPoint(52.0, 13.0)


def test_decimal_missing_second_number_is_named():
    assert parse_location("52.5,") == NamedLocation("52.5,")


# ─── Degree / minute / second pairs ─────────────────────────────────


def test_dms_degrees_and_minutes():
    point = _point(parse_location("52°30'N 13°24'E"))
    assert point.latitude == pytest.approx(52.5)
    assert point.longitude == pytest.approx(13.4)


def test_dms_degrees_only_south_west():
    assert _point(parse_location("52°S 13°W")) == GeoPoint(-52.0, -13.0)


def test_dms_full_with_seconds():
    point = _point(parse_location("48°51'24\"N 2°21'8\"E"))
    assert point.latitude == pytest.approx(48 + 51 / 60 + 24 / 3600)
    assert point.longitude == pytest.approx(2 + 21 / 60 + 8 / 3600)


def test_dms_seconds_without_minutes():
    point = _point(parse_location("10°36\"N 20°E"))
    assert point.latitude == pytest.approx(10.01)
    assert point.longitude == pytest.approx(20.0)


def test_dms_lowercase_compass_and_no_space():
    point = _point(parse_location("52°30'n13°24'e"))
    assert point.latitude == pytest.approx(52.5)
    assert point.longitude == pytest.approx(13.4)


def test_dms_decimal_degrees():
    point = _point(parse_location("52.5°N 13.4°W"))
    assert point == GeoPoint(52.5, -13.4)


def test_dms_without_compass_is_named():
    assert parse_location("52°30' 13°24'") == NamedLocation("52°30' 13°24'")


def test_dms_axes_swapped_is_named():
    """The first axis must be N/S and the second E/W."""
    assert isinstance(parse_location("13°24'E 52°30'N"), NamedLocation)


# ─── Named locations ────────────────────────────────────────────────


def test_named_keeps_casing():
    assert parse_location("Berlin") == NamedLocation("Berlin")


def test_named_keeps_whitespace():
    assert parse_location("  Berlin Mitte ") == NamedLocation("  Berlin Mitte ")


def test_named_empty_string():
    assert parse_location("") == NamedLocation("")


# ─── Matchers ───────────────────────────────────────────────────────


def test_match_decimal_pair_captures():
    captures = match_decimal_pair("52.5,13.4")
    assert captures == {"lat": "52.5", "long": "13.4"}


def test_match_dms_pair_optional_groups_absent():
    captures = match_dms_pair("52°S 13°W")
    assert captures is not None
    assert captures["lat_min"] is None
    assert captures["lat_sec"] is None
    assert captures["lat_dir"] == "S"
    assert captures["long_dir"] == "W"


def test_matchers_reject_other_format():
    assert match_decimal_pair("52°S 13°W") is None
    assert match_dms_pair("52.5,13.4") is None


# ─── Round trip ─────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "point",
    [
        GeoPoint(52.5, 13.4),
        GeoPoint(-33.8688, 151.2093),
        GeoPoint(0.0, -0.5),
        GeoPoint(0.00001, 13.4),
        GeoPoint(52.5, -0.000005),
        GeoPoint(1e-12, 1e16),
    ],
)
def test_rendered_point_parses_back(point):
    parsed = _point(parse_location(str(point)))
    assert parsed.latitude == pytest.approx(point.latitude)
    assert parsed.longitude == pytest.approx(point.longitude)
