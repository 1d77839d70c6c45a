"""Sexagesimal (degree/minute/second) helpers."""

from __future__ import annotations

from tanker_price.domain.value_objects.enums import CompassDirection


def sexagesimal_to_decimal(
    degree: float, minutes: float | None = None, seconds: float | None = None
) -> float:
    """Convert degrees + optional minutes/seconds to decimal degrees.

    The result is always non-negative for non-negative input; the
    hemisphere sign is applied separately by :func:`compass_sign`.
    """
    return degree + (minutes or 0.0) / 60 + (seconds or 0.0) / 3600


def compass_sign(token: str) -> float:
    """Return +1 for north/east and -1 for south/west.

    Raises:
        InvalidCompassDirectionError: if the token is not a compass direction.
    """
    return CompassDirection.from_token(token).sign
