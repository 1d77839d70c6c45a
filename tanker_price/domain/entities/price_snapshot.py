"""PriceSnapshot entity — the stations around the search center at one point in time."""

from dataclasses import dataclass
from datetime import datetime

from tanker_price.domain.entities.station import Station
from tanker_price.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class PriceSnapshot:
    center: GeoPoint
    radius_km: float
    stations: list[Station]
    updated_at: datetime
