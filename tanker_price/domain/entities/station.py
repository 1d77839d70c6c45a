"""Station entity — a fuel station with its current prices."""

from dataclasses import dataclass, field

from tanker_price.domain.value_objects.enums import FuelType
from tanker_price.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class FuelPrice:
    fuel_type: FuelType
    price: float

    def __str__(self) -> str:
        return f"{self.fuel_type.value}: {self.price:.2f}€"


@dataclass
class Station:
    id: str
    name: str
    brand: str
    is_open: bool
    distance_km: float
    location: GeoPoint
    prices: list[FuelPrice] = field(default_factory=list)

    def price_for(self, fuel_type: FuelType) -> float | None:
        """Price per litre for a fuel type, None if the station doesn't sell it."""
        return next((p.price for p in self.prices if p.fuel_type == fuel_type), None)
