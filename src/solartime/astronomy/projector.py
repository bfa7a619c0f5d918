"""Solar event times for a civil day.

This module projects the ephemeris onto the clock:
- Dawn and dusk at each threshold (astronomical, nautical, civil, sunrise/sunset)
- Solar noon
- Next and previous solar midnight relative to a reference instant
- Lights on / lights off (sun at -3°)

All arithmetic is done on Julian dates in UTC. Results are converted to the
caller's timezone only when they are returned. An event that does not happen
on the requested day (polar day or polar night) is returned as None.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from solartime.astronomy.ephemeris import (
    SolarAngles,
    compute_angles,
    ensure_aware,
    from_julian_date,
    to_utc,
)
from solartime.config import get_settings
from solartime.models.events import (
    Altitude,
    DayEventSet,
    SolarEvent,
    SolarEventKind,
)
from solartime.models.location import Coordinates

logger = logging.getLogger(__name__)


def resolve_civil_day(day: date | datetime) -> tuple[date, tzinfo]:
    """Split a query day into its calendar date and the zone to answer in.

    A plain date is taken to be a UTC calendar day.
    """
    if isinstance(day, datetime):
        ensure_aware(day)
        return day.date(), day.tzinfo
    return day, timezone.utc


def compute_day_angles(civil_date: date, tz: tzinfo, coords: Coordinates) -> SolarAngles:
    """Angles for the transit nearest local noon of ``civil_date``."""
    local_noon = datetime.combine(civil_date, time(12, 0), tzinfo=tz)
    return compute_angles(local_noon, coords.latitude, coords.longitude)


def _crossing_time(
    angles: SolarAngles, altitude: Altitude, rising: bool, tz: tzinfo
) -> datetime | None:
    julian_date = angles.crossing(altitude, rising)
    if julian_date is None:
        return None
    return from_julian_date(julian_date, tz)


def _event(
    day: date | datetime, latitude: float, longitude: float, altitude: Altitude, rising: bool
) -> datetime | None:
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(day)
    angles = compute_day_angles(civil_date, tz, coords)
    result = _crossing_time(angles, altitude, rising, tz)
    if result is None:
        logger.debug(
            f"No {'rising' if rising else 'setting'} crossing of {altitude.value}° "
            f"on {civil_date} at {coords}"
        )
    return result


def _midpoint(first: datetime, second: datetime) -> datetime:
    first_utc = to_utc(first)
    return (first_utc + (to_utc(second) - first_utc) / 2).astimezone(first.tzinfo)


def _midnight_after(civil_date: date, tz: tzinfo, coords: Coordinates) -> datetime | None:
    """Solar midnight of the night that follows ``civil_date``.

    Defined as the midpoint between astronomical dusk and the next day's
    astronomical dawn, so it is absent whenever the sun does not reach -18°.
    """
    dusk = _crossing_time(
        compute_day_angles(civil_date, tz, coords), Altitude.ASTRONOMICAL, False, tz
    )
    if dusk is None:
        return None
    dawn = _crossing_time(
        compute_day_angles(civil_date + timedelta(days=1), tz, coords),
        Altitude.ASTRONOMICAL,
        True,
        tz,
    )
    if dawn is None:
        return None
    return _midpoint(dusk, dawn)


def calculate_astronomical_dawn(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate astronomical dawn (sun rising through -18°).

    Args:
        day: Day to calculate for; an aware datetime selects the civil day in its zone
        latitude: Latitude in degrees
        longitude: Longitude in degrees (west is negative)

    Returns:
        Astronomical dawn, or None if there is none (e.g. Antarctica in December)
    """
    return _event(day, latitude, longitude, Altitude.ASTRONOMICAL, rising=True)


def calculate_nautical_dawn(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate nautical dawn (sun rising through -12°), or None."""
    return _event(day, latitude, longitude, Altitude.NAUTICAL, rising=True)


def calculate_civil_dawn(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate civil dawn (sun rising through -6°), or None."""
    return _event(day, latitude, longitude, Altitude.CIVIL, rising=True)


def calculate_sunrise(day: date | datetime, latitude: float, longitude: float) -> datetime | None:
    """Calculate sunrise (sun rising through -0.833°), or None."""
    return _event(day, latitude, longitude, Altitude.SUNRISE_SUNSET, rising=True)


def calculate_solar_noon(day: date | datetime, latitude: float, longitude: float) -> datetime:
    """Calculate solar noon, the instant the sun crosses the local meridian.

    The sun transits every day, even during polar day or night, so this never
    returns None.
    """
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(day)
    return from_julian_date(compute_day_angles(civil_date, tz, coords).transit, tz)


def calculate_sunset(day: date | datetime, latitude: float, longitude: float) -> datetime | None:
    """Calculate sunset (sun setting through -0.833°), or None."""
    return _event(day, latitude, longitude, Altitude.SUNRISE_SUNSET, rising=False)


def calculate_civil_dusk(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate civil dusk (sun setting through -6°), or None."""
    return _event(day, latitude, longitude, Altitude.CIVIL, rising=False)


def calculate_nautical_dusk(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate nautical dusk (sun setting through -12°), or None."""
    return _event(day, latitude, longitude, Altitude.NAUTICAL, rising=False)


def calculate_astronomical_dusk(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate astronomical dusk (sun setting through -18°).

    Returns:
        Astronomical dusk, or None if there is none (e.g. 51°N in late June)
    """
    return _event(day, latitude, longitude, Altitude.ASTRONOMICAL, rising=False)


def calculate_lights_off(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate when to switch lights off in the morning (sun rising through -3°)."""
    return _event(day, latitude, longitude, Altitude.LIGHTS, rising=True)


def calculate_lights_on(
    day: date | datetime, latitude: float, longitude: float
) -> datetime | None:
    """Calculate when to switch lights on in the evening (sun setting through -3°)."""
    return _event(day, latitude, longitude, Altitude.LIGHTS, rising=False)


def calculate_next_solar_midnight(
    reference: datetime, latitude: float, longitude: float
) -> datetime | None:
    """Find the first solar midnight strictly after ``reference``.

    Solar midnight can fall before or after local midnight depending on
    longitude and the equation of time, so candidates are built for the day
    before the reference day through the end of the search window (see
    ``Settings.midnight_search_days``) and the earliest one after the
    reference wins.

    Args:
        reference: Aware datetime to search forward from
        latitude: Latitude in degrees
        longitude: Longitude in degrees (west is negative)

    Returns:
        Next solar midnight in the reference's zone, or None if the sun does not
        reach -18° anywhere in the window (e.g. 51°N around midsummer)
    """
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(reference)
    search_days = get_settings().midnight_search_days

    for offset in range(-1, search_days):
        candidate = _midnight_after(civil_date + timedelta(days=offset), tz, coords)
        if candidate is not None and to_utc(candidate) > to_utc(reference):
            return candidate

    logger.debug(f"No solar midnight within {search_days} days after {reference} at {coords}")
    return None


def calculate_previous_solar_midnight(
    reference: datetime, latitude: float, longitude: float
) -> datetime | None:
    """Find the last solar midnight strictly before ``reference``, or None."""
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(reference)
    search_days = get_settings().midnight_search_days

    for offset in range(0, -search_days - 1, -1):
        candidate = _midnight_after(civil_date + timedelta(days=offset), tz, coords)
        if candidate is not None and to_utc(candidate) < to_utc(reference):
            return candidate

    logger.debug(f"No solar midnight within {search_days} days before {reference} at {coords}")
    return None


def compute_day_events(day: date | datetime, latitude: float, longitude: float) -> DayEventSet:
    """Calculate every solar event for one civil day.

    The solar midnight entry is the one of the night following ``day``.

    Args:
        day: Day to calculate for; an aware datetime selects the civil day in its zone
        latitude: Latitude in degrees
        longitude: Longitude in degrees (west is negative)

    Returns:
        DayEventSet with one SolarEvent per SolarEventKind
    """
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(day)
    angles = compute_day_angles(civil_date, tz, coords)

    events = []
    for kind in SolarEventKind:
        if kind is SolarEventKind.SOLAR_NOON:
            when = from_julian_date(angles.transit, tz)
        elif kind is SolarEventKind.SOLAR_MIDNIGHT:
            when = _midnight_after(civil_date, tz, coords)
        else:
            when = _crossing_time(angles, kind.altitude, kind.is_dawn, tz)
        events.append(SolarEvent(kind=kind, time=when))

    return DayEventSet(
        day=civil_date,
        latitude=coords.latitude,
        longitude=coords.longitude,
        events=tuple(events),
    )
