"""Day, twilight and night classification.

The phase at an instant is found by placing the instant between the solar
events around it. Every dawn event leads into a brighter phase and every dusk
event into a darker one, so the phase after the last event before the instant
is the answer.

Boundary convention: an instant exactly on an event belongs to the brighter
of the two phases. The sunrise and sunset instants themselves are DAY.

When no event exists near the instant (midnight sun, polar night) the sun
stays inside one band all day and that band is read off the transit elevation.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from solartime.astronomy.ephemeris import ensure_aware, to_utc
from solartime.astronomy.projector import (
    calculate_lights_off,
    calculate_lights_on,
    compute_day_angles,
    compute_day_events,
    resolve_civil_day,
)
from solartime.models.events import (
    Altitude,
    DayPeriod,
    SolarEvent,
    SolarEventKind,
)
from solartime.models.location import Coordinates

logger = logging.getLogger(__name__)

# Phase entered when the event happens
_PHASE_AFTER = {
    SolarEventKind.ASTRONOMICAL_DAWN: DayPeriod.ASTRONOMICAL_TWILIGHT,
    SolarEventKind.NAUTICAL_DAWN: DayPeriod.NAUTICAL_TWILIGHT,
    SolarEventKind.CIVIL_DAWN: DayPeriod.CIVIL_TWILIGHT,
    SolarEventKind.SUNRISE: DayPeriod.DAY,
    SolarEventKind.SUNSET: DayPeriod.CIVIL_TWILIGHT,
    SolarEventKind.CIVIL_DUSK: DayPeriod.NAUTICAL_TWILIGHT,
    SolarEventKind.NAUTICAL_DUSK: DayPeriod.ASTRONOMICAL_TWILIGHT,
    SolarEventKind.ASTRONOMICAL_DUSK: DayPeriod.NIGHT,
}

# Phase left when the event happens
_PHASE_BEFORE = {
    SolarEventKind.ASTRONOMICAL_DAWN: DayPeriod.NIGHT,
    SolarEventKind.NAUTICAL_DAWN: DayPeriod.ASTRONOMICAL_TWILIGHT,
    SolarEventKind.CIVIL_DAWN: DayPeriod.NAUTICAL_TWILIGHT,
    SolarEventKind.SUNRISE: DayPeriod.CIVIL_TWILIGHT,
    SolarEventKind.SUNSET: DayPeriod.DAY,
    SolarEventKind.CIVIL_DUSK: DayPeriod.CIVIL_TWILIGHT,
    SolarEventKind.NAUTICAL_DUSK: DayPeriod.NAUTICAL_TWILIGHT,
    SolarEventKind.ASTRONOMICAL_DUSK: DayPeriod.ASTRONOMICAL_TWILIGHT,
}


def _period_for_elevation(elevation: float) -> DayPeriod:
    if elevation >= Altitude.SUNRISE_SUNSET:
        return DayPeriod.DAY
    if elevation >= Altitude.CIVIL:
        return DayPeriod.CIVIL_TWILIGHT
    if elevation >= Altitude.NAUTICAL:
        return DayPeriod.NAUTICAL_TWILIGHT
    if elevation >= Altitude.ASTRONOMICAL:
        return DayPeriod.ASTRONOMICAL_TWILIGHT
    return DayPeriod.NIGHT


def _crossings(instant: datetime, coords: Coordinates) -> list[SolarEvent]:
    """Threshold crossings of the instant's civil day and both neighbours, by time."""
    events: list[SolarEvent] = []
    for offset in (-1, 0, 1):
        day_events = compute_day_events(
            instant + timedelta(days=offset), coords.latitude, coords.longitude
        )
        events.extend(
            event
            for event in day_events
            if event.time is not None and event.kind in _PHASE_AFTER
        )
    return sorted(events, key=lambda event: to_utc(event.time))


def _has_passed(event: SolarEvent, instant: datetime) -> bool:
    # Ties go to the brighter phase: a dawn counts once reached, a dusk only after
    if event.kind.is_dawn:
        return to_utc(event.time) <= to_utc(instant)
    return to_utc(event.time) < to_utc(instant)


def get_day_period(instant: datetime, latitude: float, longitude: float) -> DayPeriod:
    """Classify the phase of the sun at an instant.

    Args:
        instant: Aware datetime to classify
        latitude: Latitude in degrees
        longitude: Longitude in degrees (west is negative)

    Returns:
        DayPeriod of the sun at ``instant``
    """
    coords = Coordinates.of(latitude, longitude)
    ensure_aware(instant)

    crossings = _crossings(instant, coords)
    previous = [event for event in crossings if _has_passed(event, instant)]
    if previous:
        return _PHASE_AFTER[previous[-1].kind]

    upcoming = [event for event in crossings if not _has_passed(event, instant)]
    if upcoming:
        return _PHASE_BEFORE[upcoming[0].kind]

    # No crossing for three days: the sun stays in a single band
    civil_date, tz = resolve_civil_day(instant)
    angles = compute_day_angles(civil_date, tz, coords)
    period = _period_for_elevation(angles.transit_elevation)
    logger.debug(
        f"No solar events around {instant} at {coords}; "
        f"transit elevation {angles.transit_elevation:.2f}° gives {period.value}"
    )
    return period


def is_day(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if the sun is up (between sunrise and sunset, both inclusive)."""
    return get_day_period(instant, latitude, longitude) is DayPeriod.DAY


def is_night(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if it is night (after astronomical dusk and before astronomical dawn)."""
    return get_day_period(instant, latitude, longitude) is DayPeriod.NIGHT


def is_civil_twilight(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if it is civil twilight (between civil dawn and sunrise, or sunset and civil dusk)."""
    return get_day_period(instant, latitude, longitude) is DayPeriod.CIVIL_TWILIGHT


def is_nautical_twilight(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if it is nautical twilight (sun between -6° and -12°)."""
    return get_day_period(instant, latitude, longitude) is DayPeriod.NAUTICAL_TWILIGHT


def is_astronomical_twilight(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if it is astronomical twilight (sun between -12° and -18°)."""
    return get_day_period(instant, latitude, longitude) is DayPeriod.ASTRONOMICAL_TWILIGHT


def is_twilight(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if it is civil, nautical or astronomical twilight."""
    return get_day_period(instant, latitude, longitude) in (
        DayPeriod.CIVIL_TWILIGHT,
        DayPeriod.NAUTICAL_TWILIGHT,
        DayPeriod.ASTRONOMICAL_TWILIGHT,
    )


def is_24_hour_day(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if the sun does not set on the instant's civil day (midnight sun)."""
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(instant)
    angles = compute_day_angles(civil_date, tz, coords)
    return angles.hour_angle_cosine(Altitude.SUNRISE_SUNSET) < -1.0


def is_24_hour_night(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if the sun does not rise on the instant's civil day (polar night)."""
    coords = Coordinates.of(latitude, longitude)
    civil_date, tz = resolve_civil_day(instant)
    angles = compute_day_angles(civil_date, tz, coords)
    return angles.hour_angle_cosine(Altitude.SUNRISE_SUNSET) > 1.0


def switch_lights_on(instant: datetime, latitude: float, longitude: float) -> bool:
    """Check if lights should be on (sun below -3° between an evening and the next morning).

    Both the night that started the previous evening and the one starting this
    evening are considered. Days where the sun never crosses -3° give False.
    """
    ensure_aware(instant)
    for evening in (instant - timedelta(days=1), instant):
        lights_on = calculate_lights_on(evening, latitude, longitude)
        lights_off = calculate_lights_off(evening + timedelta(days=1), latitude, longitude)
        if lights_on is None or lights_off is None:
            continue
        if to_utc(lights_on) < to_utc(instant) < to_utc(lights_off):
            return True
    return False
