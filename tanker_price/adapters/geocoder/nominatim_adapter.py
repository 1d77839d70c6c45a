"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from tanker_price.application.ports.geocoder_port import GeocoderPort
from tanker_price.config import settings
from tanker_price.domain.errors import (
    GeocoderTransportError,
    NumericConversionError,
    UnresolvableLocationError,
)
from tanker_price.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class NominatimAdapter(GeocoderPort):
    """Single-shot OpenStreetMap Nominatim lookup.

    One GET per call, first result wins. No caching, no retries and no
    fallbacks: every failure surfaces as a LocationError subclass.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._url = url or settings.nominatim_url
        self._transport = transport

    async def geocode(self, query: str) -> GeoPoint:
        results = await self._search(query)

        if not results:
            logger.warning("Nominatim returned no results for '%s'", query)
            raise UnresolvableLocationError(query)

        first = results[0]
        try:
            raw_lat, raw_lon = first["lat"], first["lon"]
        except (KeyError, TypeError) as e:
            raise GeocoderTransportError(f"Unexpected Nominatim result: {first!r}") from e

        point = GeoPoint(latitude=_parse_coordinate(raw_lat), longitude=_parse_coordinate(raw_lon))
        logger.info("Nominatim resolved '%s' → (%f, %f)", query, point.latitude, point.longitude)
        return point

    async def _search(self, query: str) -> list:
        """Query Nominatim and return the decoded JSON array."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    params={"format": "json", "q": query},
                    headers={"User-Agent": self._user_agent},
                )
                response.raise_for_status()
                results = response.json()
        except httpx.HTTPError as e:
            logger.error("Nominatim request failed for '%s': %s", query, e)
            raise GeocoderTransportError(f"Nominatim request failed: {e}") from e
        except ValueError as e:
            logger.error("Nominatim returned invalid JSON for '%s'", query)
            raise GeocoderTransportError("Nominatim returned invalid JSON") from e

        if not isinstance(results, list):
            raise GeocoderTransportError(f"Expected a JSON array from Nominatim, got {type(results).__name__}")
        return results


def _parse_coordinate(value: str) -> float:
    # Nominatim sends coordinates as strings
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise NumericConversionError(str(value)) from e
