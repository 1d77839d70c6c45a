"""LocationParser — classify a raw location string and extract its coordinates.

Supported shapes, tried in this order (first match wins):

1. Decimal pair: ``"52.5,13.4"``, ``"52.5/13.4"``, ``"-33.9 , 151.2"``
2. Degree/minute/second pair: ``"52°30'N 13°24'E"``, ``"52°S 13°W"``,
   ``"48°51'24\\"N 2°21'8\\"E"``
3. Anything else is a place name and is kept verbatim for geocoding.
"""

from __future__ import annotations

import re

from tanker_price.domain.errors import MalformedLocationError, NumericConversionError
from tanker_price.domain.policies.sexagesimal import compass_sign, sexagesimal_to_decimal
from tanker_price.domain.value_objects.geo_point import GeoPoint
from tanker_price.domain.value_objects.location import (
    CoordinateLocation,
    Location,
    NamedLocation,
)

_NUMBER = r"\d+(?:\.\d+)?"

# "." is both the decimal point and a valid separator; the regex backtracking
# decides, e.g. "52.13" is (52, 13) and "52.5.13.4" is (52.5, 13.4).
DECIMAL_PAIR_RE = re.compile(
    rf"(?P<lat>[+-]?{_NUMBER})\s*[,./]\s*(?P<long>[+-]?{_NUMBER})"
)

DMS_PAIR_RE = re.compile(
    rf"(?P<lat_deg>{_NUMBER})°"
    rf"(?:(?P<lat_min>{_NUMBER})')?"
    rf"(?:(?P<lat_sec>{_NUMBER})\"?)?"
    r"(?P<lat_dir>[NS])"
    r"\s*"
    rf"(?P<long_deg>{_NUMBER})°"
    rf"(?:(?P<long_min>{_NUMBER})')?"
    rf"(?:(?P<long_sec>{_NUMBER})\"?)?"
    r"(?P<long_dir>[EW])"
)

Captures = dict[str, str | None]


def match_decimal_pair(normalized: str) -> Captures | None:
    match = DECIMAL_PAIR_RE.fullmatch(normalized)
    return match.groupdict() if match else None


def match_dms_pair(normalized: str) -> Captures | None:
    match = DMS_PAIR_RE.fullmatch(normalized)
    return match.groupdict() if match else None


def parse_location(raw: str) -> Location:
    """Parse a user supplied location string.

    Unrecognised input is never an error: it becomes a ``NamedLocation``
    holding the original string (casing and whitespace untouched).

    Raises:
        MalformedLocationError: a format matched without a required part.
        NumericConversionError: a matched number is not a valid float.
    """
    normalized = raw.upper().strip()

    captures = match_decimal_pair(normalized)
    if captures is not None:
        return CoordinateLocation(
            GeoPoint(
                latitude=_to_float(_required(captures, "lat")),
                longitude=_to_float(_required(captures, "long")),
            )
        )

    captures = match_dms_pair(normalized)
    if captures is not None:
        return CoordinateLocation(
            GeoPoint(
                latitude=_dms_axis(captures, "lat"),
                longitude=_dms_axis(captures, "long"),
            )
        )

    return NamedLocation(raw)


def _dms_axis(captures: Captures, axis: str) -> float:
    decimal = sexagesimal_to_decimal(
        _to_float(_required(captures, f"{axis}_deg")),
        _optional_float(captures.get(f"{axis}_min")),
        _optional_float(captures.get(f"{axis}_sec")),
    )
    return compass_sign(_required(captures, f"{axis}_dir")) * decimal


def _required(captures: Captures, group: str) -> str:
    value = captures.get(group)
    if value is None:
        raise MalformedLocationError(f"Missing '{group}' in location")
    return value


def _optional_float(value: str | None) -> float | None:
    return None if value is None else _to_float(value)


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise NumericConversionError(value) from e
