"""Port interface for geocoding place names to coordinates."""

from abc import ABC, abstractmethod

from tanker_price.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, query: str) -> GeoPoint:
        """Convert free text (address, city, ...) to lat/lon coordinates.

        Raises:
            GeocoderTransportError: the lookup request failed.
            UnresolvableLocationError: the service found nothing for the query.
            NumericConversionError: the service returned an unparseable coordinate.
        """
        ...
