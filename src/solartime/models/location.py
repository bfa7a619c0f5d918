"""Geographic coordinates for solar calculations."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from solartime.errors import InvalidCoordinateError


# Regex for parsing lat/long coordinates: "latitude,longitude"
# Supports optional +/- prefix for both values
COORDINATE_PATTERN = re.compile(
    r"^(?P<lat>[-+]?\d*\.?\d+)\s*,\s*(?P<lon>[-+]?\d*\.?\d+)$"
)


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude).

    Latitude:
        - Negative (-) = south of equator
        - Positive (+) = north of equator
        - Range: -90 to +90

    Longitude:
        - Negative (-) = west of prime meridian
        - Positive (+) = east of prime meridian
        - Range: -180 to +180
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ..., ge=-90, le=90, allow_inf_nan=False, description="Latitude in decimal degrees"
    )
    longitude: float = Field(
        ..., ge=-180, le=180, allow_inf_nan=False, description="Longitude in decimal degrees"
    )

    @classmethod
    def of(cls, latitude: float, longitude: float) -> Self:
        """Validate raw degrees, raising InvalidCoordinateError when out of range.

        Every public calculation goes through here before doing any work.
        """
        try:
            return cls(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            raise InvalidCoordinateError(latitude, longitude) from e

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse coordinates from string format 'latitude,longitude'.

        Examples:
            '51.44968,6.97337' -> Essen
            '-33.8688,151.2093' -> Sydney
            '+69.660716,18.925278' -> Tromsø
        """
        match = COORDINATE_PATTERN.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid coordinate format: '{value}'. "
                "Expected format: 'latitude,longitude' (e.g., '51.44968,6.97337')"
            )
        return cls.of(float(match.group("lat")), float(match.group("lon")))

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    def to_tuple(self) -> tuple[float, float]:
        """Return coordinates as (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)
