"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        """Render as ``"<lat>,<long>"``, the decimal-pair location format."""
        return f"{_plain(self.latitude)},{_plain(self.longitude)}"


def _plain(value: float) -> str:
    # shortest repr digits, never exponent notation ("1e-05" → "0.00001")
    return format(Decimal(repr(value)), "f")
