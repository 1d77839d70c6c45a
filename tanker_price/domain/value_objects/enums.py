"""Domain enums — pure Python, no external dependencies."""

from enum import Enum

from tanker_price.domain.errors import InvalidCompassDirectionError


class CompassDirection(str, Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @classmethod
    def from_token(cls, token: str) -> "CompassDirection":
        """Build from a single letter or full word, case-insensitive.

        Raises:
            InvalidCompassDirectionError: for anything outside N/E/S/W and
                NORTH/EAST/SOUTH/WEST.
        """
        normalized = token.strip().upper()
        for direction in cls:
            if normalized in (direction.value, direction.name):
                return direction
        raise InvalidCompassDirectionError(token)

    @property
    def sign(self) -> float:
        return 1.0 if self in (CompassDirection.NORTH, CompassDirection.EAST) else -1.0


class FuelType(str, Enum):
    E10 = "E10"
    E5 = "E5"
    DIESEL = "Diesel"
