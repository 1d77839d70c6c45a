"""ResolveLocationUseCase — turn any Location into a concrete GeoPoint."""

from __future__ import annotations

import logging
from typing import assert_never

from tanker_price.application.ports.geocoder_port import GeocoderPort
from tanker_price.domain.policies.location_parser import parse_location
from tanker_price.domain.value_objects.geo_point import GeoPoint
from tanker_price.domain.value_objects.location import (
    CoordinateLocation,
    Location,
    NamedLocation,
)

logger = logging.getLogger(__name__)


class ResolveLocationUseCase:
    """Resolves locations, geocoding place names through the injected port.

    Every call is independent: nothing is cached and failures are never
    retried, so callers decide how to react to a LocationError.
    """

    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    async def execute(self, location: Location) -> GeoPoint:
        match location:
            case CoordinateLocation(point=point):
                return point
            case NamedLocation(name=name):
                logger.info("Geocoding location '%s'", name)
                point = await self._geocoder.geocode(name)
                logger.info("Resolved '%s' → %s", name, point)
                return point
            case _:
                assert_never(location)

    async def execute_raw(self, raw: str) -> GeoPoint:
        """Parse a configuration string and resolve it in one step."""
        return await self.execute(parse_location(raw))
