"""Port interface for loading fuel prices around a coordinate."""

from abc import ABC, abstractmethod

from tanker_price.domain.entities.station import Station
from tanker_price.domain.value_objects.geo_point import GeoPoint


class FuelPricePort(ABC):
    @abstractmethod
    async def load_prices(self, center: GeoPoint, radius_km: float) -> list[Station]:
        """Return all stations within *radius_km* of *center*.

        Raises PriceServiceError if the price API fails.
        """
        ...
