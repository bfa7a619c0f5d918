"""Low-precision solar ephemeris.

This module turns an instant and a location into the solar quantities needed
to find rise, set and twilight times:
- Julian date of the instant (via astropy, UTC scale)
- Solar mean anomaly, equation of center and ecliptic longitude
- Solar transit (solar noon) as a Julian date
- Declination and equation of time
- Hour angle at which the sun crosses a given elevation threshold

The series are the ones from the Wikipedia article on the sunrise equation
(https://en.wikipedia.org/wiki/Sunrise_equation), accurate to about a minute
for the current era.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from astropy.time import Time

from solartime.errors import NaiveDatetimeError
from solartime.models.events import Altitude
from solartime.models.location import Coordinates

JULIAN_DATE_2000_01_01 = 2451545.0
JULIAN_DAY_OFFSET = 0.0009  # Leap second / UT1 drift in the transit series
EARTH_MAX_TILT_TOWARDS_SUN = 23.439  # Obliquity of the ecliptic, degrees
MINUTES_PER_DAY = 1440.0


def ensure_aware(dt: datetime) -> datetime:
    """Reject naive datetimes; every instant must carry its UTC offset."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise NaiveDatetimeError(
            f"Datetime {dt.isoformat()} has no timezone; pass an aware datetime"
        )
    return dt


def to_utc(dt: datetime) -> datetime:
    """Convert an aware datetime to UTC.

    Aware datetimes sharing a tzinfo compare and subtract by wall clock, which
    goes wrong across a DST change. Compare instants in UTC instead.
    """
    return ensure_aware(dt).astimezone(timezone.utc)


def to_julian_date(dt: datetime) -> float:
    """Convert an aware datetime to a Julian date (UTC)."""
    utc = to_utc(dt).replace(tzinfo=None)
    return float(Time(utc, format="datetime", scale="utc").jd)


def from_julian_date(julian_date: float, tz: tzinfo = timezone.utc) -> datetime:
    """Convert a Julian date (UTC) to an aware datetime in ``tz``."""
    utc = Time(julian_date, format="jd", scale="utc").to_datetime(timezone=timezone.utc)
    return utc.astimezone(tz)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class SolarAngles:
    """Solar quantities for one transit at one latitude.

    Angles are in radians except where the name says otherwise.
    """

    latitude: float  # Degrees
    julian_cycle: int  # Days since 2000-01-01 12:00 UTC at this longitude
    mean_anomaly: float
    ecliptic_longitude: float
    declination: float
    transit: float  # Julian date of solar noon
    equation_of_time: float  # Minutes, apparent minus mean solar time

    @property
    def declination_deg(self) -> float:
        return math.degrees(self.declination)

    @property
    def transit_elevation(self) -> float:
        """Sun elevation at transit in degrees, ignoring refraction."""
        return 90.0 - abs(self.latitude - self.declination_deg)

    def hour_angle_cosine(self, altitude: Altitude | float) -> float:
        """Cosine argument of the hour-angle relation for an elevation threshold.

        Values below -1 mean the sun stays above the threshold all day, values
        above 1 mean it stays below.
        """
        latitude_rad = math.radians(self.latitude)
        return (
            math.sin(math.radians(float(altitude)))
            - math.sin(latitude_rad) * math.sin(self.declination)
        ) / (math.cos(latitude_rad) * math.cos(self.declination))

    def hour_angle(self, altitude: Altitude | float) -> float | None:
        """Hour angle in degrees at which the sun crosses ``altitude``.

        Returns None if the sun never crosses that elevation on this day.
        """
        cosine = self.hour_angle_cosine(altitude)
        if not -1.0 <= cosine <= 1.0:
            return None
        return math.degrees(math.acos(cosine))

    def crossing(self, altitude: Altitude | float, rising: bool) -> float | None:
        """Julian date at which the sun crosses ``altitude``, or None."""
        omega = self.hour_angle(altitude)
        if omega is None:
            return None
        offset = omega / 360.0
        return self.transit - offset if rising else self.transit + offset


def compute_angles(instant: datetime, latitude: float, longitude: float) -> SolarAngles:
    """Compute solar angles for the transit nearest to ``instant``.

    Args:
        instant: Aware datetime
        latitude: Latitude in degrees (north positive)
        longitude: Longitude in degrees (east positive)

    Returns:
        SolarAngles for that transit

    Raises:
        InvalidCoordinateError: If the coordinates are out of range
        NaiveDatetimeError: If ``instant`` has no timezone
    """
    coords = Coordinates.of(latitude, longitude)
    julian_date = to_julian_date(instant)

    # The series is written for west-positive longitudes
    west = -coords.longitude / 360.0

    # Julian cycle and approximate solar noon
    n = _round_half_up(julian_date - JULIAN_DATE_2000_01_01 - JULIAN_DAY_OFFSET - west)
    approx_noon = JULIAN_DATE_2000_01_01 + JULIAN_DAY_OFFSET + west + n

    mean_anomaly_deg = (
        357.5291 + 0.98560028 * (approx_noon - JULIAN_DATE_2000_01_01)
    ) % 360.0
    m = math.radians(mean_anomaly_deg)

    # Equation of center
    c = 1.9148 * math.sin(m) + 0.0200 * math.sin(2 * m) + 0.0003 * math.sin(3 * m)

    # Ecliptic longitude (102.9372 is the argument of perihelion)
    ecliptic_longitude = math.radians((mean_anomaly_deg + 102.9372 + c + 180.0) % 360.0)

    transit_correction = 0.0053 * math.sin(m) - 0.0069 * math.sin(2 * ecliptic_longitude)
    declination = math.asin(
        math.sin(ecliptic_longitude) * math.sin(math.radians(EARTH_MAX_TILT_TOWARDS_SUN))
    )

    return SolarAngles(
        latitude=coords.latitude,
        julian_cycle=n,
        mean_anomaly=m,
        ecliptic_longitude=ecliptic_longitude,
        declination=declination,
        transit=approx_noon + transit_correction,
        equation_of_time=-transit_correction * MINUTES_PER_DAY,
    )
