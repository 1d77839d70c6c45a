"""Tankerkönig price adapter — implements FuelPricePort.

API docs: https://creativecommons.tankerkoenig.de/
"""

from __future__ import annotations

import logging

import httpx

from tanker_price.application.ports.price_port import FuelPricePort
from tanker_price.config import settings
from tanker_price.domain.entities.station import FuelPrice, Station
from tanker_price.domain.errors import PriceServiceError
from tanker_price.domain.value_objects.enums import FuelType
from tanker_price.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

# Response field → fuel type
FUEL_FIELDS: dict[str, FuelType] = {
    "diesel": FuelType.DIESEL,
    "e5": FuelType.E5,
    "e10": FuelType.E10,
}


class TankerkoenigAdapter(FuelPricePort):
    """Loads all stations around a point from the Tankerkönig list endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        url: str | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.tankerkoenig_api_key
        self._url = url or settings.tankerkoenig_url
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._transport = transport

    async def load_prices(self, center: GeoPoint, radius_km: float) -> list[Station]:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    params={
                        "type": "all",
                        "apikey": self._api_key,
                        "lat": center.latitude,
                        "lng": center.longitude,
                        "rad": radius_km,
                    },
                    headers={"User-Agent": self._user_agent},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error("Tankerkönig request failed: %s", e)
            raise PriceServiceError(f"There was a connection error to the API: {e}") from e
        except ValueError as e:
            raise PriceServiceError("Tankerkönig returned invalid JSON") from e

        if not isinstance(data, dict):
            raise PriceServiceError("Tankerkönig returned an unexpected response")

        stations = data.get("stations")
        if not data.get("ok") or stations is None:
            logger.warning("Tankerkönig API error: %s", data.get("message"))
            raise PriceServiceError(data.get("message"))
        if not isinstance(stations, list) or not all(isinstance(raw, dict) for raw in stations):
            raise PriceServiceError("Tankerkönig returned malformed station data")

        try:
            return [self._map_station(raw) for raw in stations]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise PriceServiceError(f"Unexpected station data: {e}") from e

    @staticmethod
    def _map_station(raw: dict) -> Station:
        """Map one API station object to a Station, skipping fuels without a price."""
        prices = [
            FuelPrice(fuel_type=fuel_type, price=float(raw[field]))
            for field, fuel_type in FUEL_FIELDS.items()
            # closed stations report false instead of null
            if isinstance(raw.get(field), (int, float)) and not isinstance(raw.get(field), bool)
        ]
        return Station(
            id=raw["id"],
            name=raw["name"],
            brand=raw["brand"],
            is_open=bool(raw["isOpen"]),
            distance_km=float(raw["dist"]),
            location=GeoPoint(latitude=float(raw["lat"]), longitude=float(raw["lng"])),
            prices=prices,
        )
