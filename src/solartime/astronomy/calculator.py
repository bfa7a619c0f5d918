"""Location-bound façade over the solar event and classification functions."""

from __future__ import annotations

from datetime import date, datetime

from solartime.astronomy import classifier, projector
from solartime.astronomy.ephemeris import SolarAngles, compute_angles
from solartime.astronomy.position import SunPosition, get_sun_position
from solartime.models.events import DayEventSet, DayPeriod
from solartime.models.location import Coordinates


class SolarCalculator:
    """Calculator for solar events at a specific location.

    The calculator only holds its (immutable) coordinates, so one instance can
    be shared freely. Nothing is cached; every call recomputes the angles.

    Example:
        ```python
        calc = SolarCalculator(Coordinates(latitude=51.44968, longitude=6.97337))

        # All events for today
        events = calc.get_day_events(datetime.now(ZoneInfo("Europe/Berlin")))

        # Is the sun up right now?
        calc.is_day(datetime.now(timezone.utc))

        # Next solar midnight
        calc.get_next_solar_midnight(datetime.now(timezone.utc))
        ```
    """

    def __init__(self, coordinates: Coordinates):
        """Initialize calculator for a specific location.

        Args:
            coordinates: Geographic coordinates for calculations
        """
        self.coordinates = coordinates

    @classmethod
    def at(cls, latitude: float, longitude: float) -> SolarCalculator:
        """Create a calculator from raw degrees, raising InvalidCoordinateError if out of range."""
        return cls(Coordinates.of(latitude, longitude))

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    def get_angles(self, instant: datetime) -> SolarAngles:
        """Get solar angles for the transit nearest ``instant``."""
        return compute_angles(instant, self.latitude, self.longitude)

    def get_sun_position(self, time: datetime) -> SunPosition:
        """Get precise sun position at the given time."""
        return get_sun_position(time, self.latitude, self.longitude)

    def get_day_events(self, day: date | datetime) -> DayEventSet:
        """Get all solar events for a civil day."""
        return projector.compute_day_events(day, self.latitude, self.longitude)

    def get_sunrise(self, day: date | datetime) -> datetime | None:
        return projector.calculate_sunrise(day, self.latitude, self.longitude)

    def get_solar_noon(self, day: date | datetime) -> datetime:
        return projector.calculate_solar_noon(day, self.latitude, self.longitude)

    def get_sunset(self, day: date | datetime) -> datetime | None:
        return projector.calculate_sunset(day, self.latitude, self.longitude)

    def get_next_solar_midnight(self, reference: datetime) -> datetime | None:
        """Get the first solar midnight strictly after ``reference``."""
        return projector.calculate_next_solar_midnight(reference, self.latitude, self.longitude)

    def get_previous_solar_midnight(self, reference: datetime) -> datetime | None:
        """Get the last solar midnight strictly before ``reference``."""
        return projector.calculate_previous_solar_midnight(
            reference, self.latitude, self.longitude
        )

    def get_day_period(self, instant: datetime) -> DayPeriod:
        """Classify the phase of the sun at ``instant``."""
        return classifier.get_day_period(instant, self.latitude, self.longitude)

    def is_day(self, instant: datetime) -> bool:
        """Check if the sun is up."""
        return classifier.is_day(instant, self.latitude, self.longitude)

    def is_night(self, instant: datetime) -> bool:
        """Check if it's astronomical night (sun below -18°)."""
        return classifier.is_night(instant, self.latitude, self.longitude)

    def is_twilight(self, instant: datetime) -> bool:
        """Check if it's civil, nautical or astronomical twilight."""
        return classifier.is_twilight(instant, self.latitude, self.longitude)
