"""Precise sun position using astropy.

The event calculations use a low-precision series. This module asks astropy's
full ephemeris where the sun actually is, which is useful for checking the
series and for callers who need altitude/azimuth at a given instant.

Altitudes are geometric (no atmospheric refraction).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from astropy import units as u
from astropy.coordinates import AltAz, EarthLocation, get_sun
from astropy.time import Time
from astropy.utils import iers

from solartime.astronomy.ephemeris import to_utc
from solartime.config import get_settings
from solartime.models.events import Altitude
from solartime.models.location import Coordinates


@dataclass
class SunPosition:
    """Sun position at a specific time and location."""

    altitude_deg: float  # Degrees above horizon (negative = below)
    azimuth_deg: float  # Degrees from north (0=N, 90=E, 180=S, 270=W)
    time: datetime
    is_day: bool  # Sun above the sunrise/sunset threshold


def _coords_to_earth_location(coords: Coordinates) -> EarthLocation:
    """Convert our Coordinates to astropy EarthLocation."""
    return EarthLocation(lat=coords.latitude * u.deg, lon=coords.longitude * u.deg)


def _datetime_to_astropy_time(dt: datetime) -> Time:
    """Convert an aware datetime to astropy Time (UTC)."""
    return Time(to_utc(dt).replace(tzinfo=None), scale="utc")


def get_sun_position(time: datetime, latitude: float, longitude: float) -> SunPosition:
    """Calculate sun position at a given time and location.

    Args:
        time: Aware datetime to calculate position for
        latitude: Latitude in degrees
        longitude: Longitude in degrees (west is negative)

    Returns:
        SunPosition with altitude and azimuth in degrees
    """
    coords = Coordinates.of(latitude, longitude)
    location = _coords_to_earth_location(coords)
    obs_time = _datetime_to_astropy_time(time)

    with iers.conf.set_temp("auto_download", get_settings().iers_auto_download):
        # Create the AltAz frame for this location and time
        altaz_frame = AltAz(obstime=obs_time, location=location)

        # Get the sun's position and transform to AltAz
        sun_altaz = get_sun(obs_time).transform_to(altaz_frame)

    altitude = float(sun_altaz.alt.deg)
    azimuth = float(sun_altaz.az.deg)

    return SunPosition(
        altitude_deg=altitude,
        azimuth_deg=azimuth,
        time=time,
        is_day=altitude >= Altitude.SUNRISE_SUNSET,
    )
