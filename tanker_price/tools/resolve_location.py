"""Resolve a location string to coordinates.

Usage:
    python -m tanker_price.tools.resolve_location "52.5,13.4"
    python -m tanker_price.tools.resolve_location "52°30'N 13°24'E"
    python -m tanker_price.tools.resolve_location "Berlin Alexanderplatz"
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import assert_never

from tanker_price.adapters.geocoder.nominatim_adapter import NominatimAdapter
from tanker_price.application.use_cases.resolve_location import ResolveLocationUseCase
from tanker_price.domain.errors import LocationError
from tanker_price.domain.policies.location_parser import parse_location
from tanker_price.domain.value_objects.location import CoordinateLocation, NamedLocation

logger = logging.getLogger(__name__)


async def resolve(raw: str, user_agent: str | None = None) -> str:
    """Parse and resolve *raw*, returning the ``"<lat>,<long>"`` rendering."""
    location = parse_location(raw)
    match location:
        case CoordinateLocation():
            kind = "coordinates"
        case NamedLocation():
            kind = "place name"
        case _:
            assert_never(location)
    logger.info("Recognised '%s' as %s", raw, kind)

    use_case = ResolveLocationUseCase(geocoder=NominatimAdapter(user_agent=user_agent))
    point = await use_case.execute(location)
    return str(point)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve a location to latitude,longitude")
    parser.add_argument("location", help="Decimal pair, degree/minute/second pair, or place name")
    parser.add_argument(
        "--user-agent", type=str, default=None,
        help="User-Agent sent to Nominatim (default: GEOCODER_USER_AGENT)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    try:
        print(asyncio.run(resolve(args.location, args.user_agent)))
    except LocationError as e:
        logger.error("Unable to resolve location: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
