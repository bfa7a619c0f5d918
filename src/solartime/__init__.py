"""Sunrise, sunset, twilight and solar midnight times, and day/night state.

```python
from datetime import datetime
from zoneinfo import ZoneInfo

from solartime import SolarCalculator

calc = SolarCalculator.at(51.44968, 6.97337)
events = calc.get_day_events(datetime(2019, 1, 24, tzinfo=ZoneInfo("Europe/Berlin")))
print(events.sunrise, events.sunset)
```
"""

from solartime.astronomy import (
    SolarCalculator,
    calculate_next_solar_midnight,
    calculate_previous_solar_midnight,
    compute_angles,
    compute_day_events,
    get_day_period,
    is_day,
    is_night,
)
from solartime.errors import (
    InvalidCoordinateError,
    InvalidInputError,
    NaiveDatetimeError,
    SolarTimeError,
)
from solartime.models import (
    Altitude,
    Coordinates,
    DayEventSet,
    DayPeriod,
    SolarEvent,
    SolarEventKind,
)

__version__ = "0.1.0"

__all__ = [
    "SolarCalculator",
    "calculate_next_solar_midnight",
    "calculate_previous_solar_midnight",
    "compute_angles",
    "compute_day_events",
    "get_day_period",
    "is_day",
    "is_night",
    # Errors
    "InvalidCoordinateError",
    "InvalidInputError",
    "NaiveDatetimeError",
    "SolarTimeError",
    # Models
    "Altitude",
    "Coordinates",
    "DayEventSet",
    "DayPeriod",
    "SolarEvent",
    "SolarEventKind",
]
