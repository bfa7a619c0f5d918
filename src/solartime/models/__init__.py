"""Domain models for solar event calculations."""

from solartime.models.location import Coordinates
from solartime.models.events import (
    Altitude,
    DayEventSet,
    DayPeriod,
    SolarEvent,
    SolarEventKind,
)

__all__ = [
    # Location
    "Coordinates",
    # Events
    "Altitude",
    "DayEventSet",
    "DayPeriod",
    "SolarEvent",
    "SolarEventKind",
]
