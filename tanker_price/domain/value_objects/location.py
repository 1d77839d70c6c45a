"""Location value objects — either a known coordinate or a place name to geocode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tanker_price.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class CoordinateLocation:
    point: GeoPoint

    def __str__(self) -> str:
        return str(self.point)


@dataclass(frozen=True)
class NamedLocation:
    """Free text (address, city, ...) kept verbatim until it is geocoded."""

    name: str

    def __str__(self) -> str:
        return self.name


Location = Union[CoordinateLocation, NamedLocation]
