"""Exceptions raised by solartime.

Only invalid input is an error. An event that does not happen on a given day
(polar day or polar night) is reported as ``None``, never raised.
"""

from __future__ import annotations


class SolarTimeError(Exception):
    """Base exception for solartime errors."""


class InvalidInputError(SolarTimeError, ValueError):
    """Raised when a query is rejected before any computation begins."""


class InvalidCoordinateError(InvalidInputError):
    """Raised when latitude or longitude is out of range or not finite."""

    def __init__(self, latitude: float, longitude: float, message: str | None = None):
        super().__init__(
            message
            or f"Invalid coordinates ({latitude}, {longitude}): latitude must be "
            "within [-90, 90] and longitude within [-180, 180]"
        )
        self.latitude = latitude
        self.longitude = longitude


class NaiveDatetimeError(InvalidInputError):
    """Raised when a timestamp carries no timezone information."""
