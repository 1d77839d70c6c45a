"""Domain errors for location parsing/resolution and the price service."""

from __future__ import annotations


class LocationError(Exception):
    """Base class for everything that can go wrong turning a string into a GeoPoint."""


class MalformedLocationError(LocationError):
    """A location format matched but a required part was missing."""


class InvalidCompassDirectionError(MalformedLocationError):
    def __init__(self, token: str):
        super().__init__(f"Unknown compass direction: {token!r}")
        self.token = token


class NumericConversionError(LocationError):
    """A captured number could not be converted to a float."""

    def __init__(self, value: str):
        super().__init__(f"Not a valid number: {value!r}")
        self.value = value


class GeocoderTransportError(LocationError):
    """The geocoding request failed or its response could not be decoded."""


class UnresolvableLocationError(LocationError):
    def __init__(self, name: str):
        super().__init__(f"Geocoder returned no results for {name!r}")
        self.name = name


class PriceServiceError(Exception):
    """The fuel price API could not be reached or reported an error."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "The fuel price API returned an error")
        self.message = message
