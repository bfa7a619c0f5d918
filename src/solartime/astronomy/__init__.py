"""Solar ephemeris, event times and day/night classification."""

from solartime.astronomy.calculator import SolarCalculator
from solartime.astronomy.classifier import (
    get_day_period,
    is_24_hour_day,
    is_24_hour_night,
    is_astronomical_twilight,
    is_civil_twilight,
    is_day,
    is_nautical_twilight,
    is_night,
    is_twilight,
    switch_lights_on,
)
from solartime.astronomy.ephemeris import (
    SolarAngles,
    compute_angles,
    from_julian_date,
    to_julian_date,
    to_utc,
)
from solartime.astronomy.position import SunPosition, get_sun_position
from solartime.astronomy.projector import (
    calculate_astronomical_dawn,
    calculate_astronomical_dusk,
    calculate_civil_dawn,
    calculate_civil_dusk,
    calculate_lights_off,
    calculate_lights_on,
    calculate_nautical_dawn,
    calculate_nautical_dusk,
    calculate_next_solar_midnight,
    calculate_previous_solar_midnight,
    calculate_solar_noon,
    calculate_sunrise,
    calculate_sunset,
    compute_day_events,
)

__all__ = [
    # Facade
    "SolarCalculator",
    # Ephemeris
    "SolarAngles",
    "compute_angles",
    "from_julian_date",
    "to_julian_date",
    "to_utc",
    # Precise position
    "SunPosition",
    "get_sun_position",
    # Events
    "calculate_astronomical_dawn",
    "calculate_astronomical_dusk",
    "calculate_civil_dawn",
    "calculate_civil_dusk",
    "calculate_lights_off",
    "calculate_lights_on",
    "calculate_nautical_dawn",
    "calculate_nautical_dusk",
    "calculate_next_solar_midnight",
    "calculate_previous_solar_midnight",
    "calculate_solar_noon",
    "calculate_sunrise",
    "calculate_sunset",
    "compute_day_events",
    # Classification
    "get_day_period",
    "is_24_hour_day",
    "is_24_hour_night",
    "is_astronomical_twilight",
    "is_civil_twilight",
    "is_day",
    "is_nautical_twilight",
    "is_night",
    "is_twilight",
    "switch_lights_on",
]
