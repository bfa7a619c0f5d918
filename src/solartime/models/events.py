"""Solar event models: elevation thresholds, event kinds and day event sets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Iterator


class Altitude(float, Enum):
    """Sun elevation thresholds in degrees.

    See https://en.wikipedia.org/wiki/Dawn and
    https://en.wikipedia.org/wiki/Sunrise_equation
    """

    SUNRISE_SUNSET = -0.833  # Refraction plus solar semi-diameter
    LIGHTS = -3.0  # When to switch lights on or off
    CIVIL = -6.0
    NAUTICAL = -12.0
    ASTRONOMICAL = -18.0


class SolarEventKind(str, Enum):
    """Kinds of solar events, in their natural order within a day."""

    ASTRONOMICAL_DAWN = "astronomical_dawn"
    NAUTICAL_DAWN = "nautical_dawn"
    CIVIL_DAWN = "civil_dawn"
    SUNRISE = "sunrise"
    SOLAR_NOON = "solar_noon"
    SUNSET = "sunset"
    CIVIL_DUSK = "civil_dusk"
    NAUTICAL_DUSK = "nautical_dusk"
    ASTRONOMICAL_DUSK = "astronomical_dusk"
    SOLAR_MIDNIGHT = "solar_midnight"

    @property
    def altitude(self) -> Altitude | None:
        """Threshold crossed by this event, None for noon and midnight."""
        return _EVENT_ALTITUDES.get(self)

    @property
    def is_dawn(self) -> bool:
        """True for events where the sun rises above its threshold."""
        return self in DAWN_EVENTS

    @property
    def is_dusk(self) -> bool:
        """True for events where the sun sinks below its threshold."""
        return self in DUSK_EVENTS


DAWN_EVENTS = (
    SolarEventKind.ASTRONOMICAL_DAWN,
    SolarEventKind.NAUTICAL_DAWN,
    SolarEventKind.CIVIL_DAWN,
    SolarEventKind.SUNRISE,
)

DUSK_EVENTS = (
    SolarEventKind.SUNSET,
    SolarEventKind.CIVIL_DUSK,
    SolarEventKind.NAUTICAL_DUSK,
    SolarEventKind.ASTRONOMICAL_DUSK,
)

_EVENT_ALTITUDES = {
    SolarEventKind.ASTRONOMICAL_DAWN: Altitude.ASTRONOMICAL,
    SolarEventKind.NAUTICAL_DAWN: Altitude.NAUTICAL,
    SolarEventKind.CIVIL_DAWN: Altitude.CIVIL,
    SolarEventKind.SUNRISE: Altitude.SUNRISE_SUNSET,
    SolarEventKind.SUNSET: Altitude.SUNRISE_SUNSET,
    SolarEventKind.CIVIL_DUSK: Altitude.CIVIL,
    SolarEventKind.NAUTICAL_DUSK: Altitude.NAUTICAL,
    SolarEventKind.ASTRONOMICAL_DUSK: Altitude.ASTRONOMICAL,
}


class DayPeriod(str, Enum):
    """Phase of the sun, from brightest to darkest."""

    DAY = "day"
    CIVIL_TWILIGHT = "civil_twilight"
    NAUTICAL_TWILIGHT = "nautical_twilight"
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"
    NIGHT = "night"


@dataclass(frozen=True)
class SolarEvent:
    """A solar event of a given kind.

    ``time`` is None when the event does not occur on the queried day, e.g. no
    sunset during the midnight sun.
    """

    kind: SolarEventKind
    time: datetime | None

    @property
    def occurs(self) -> bool:
        return self.time is not None


@dataclass(frozen=True)
class DayEventSet:
    """All solar events for one civil day at one location.

    Events are held in SolarEventKind order. Instances are immutable; build
    them with ``solartime.astronomy.projector.compute_day_events``.
    """

    day: date
    latitude: float
    longitude: float
    events: tuple[SolarEvent, ...]

    def __post_init__(self) -> None:
        kinds = tuple(event.kind for event in self.events)
        if kinds != tuple(SolarEventKind):
            raise ValueError(f"DayEventSet needs one event per kind in order, got {kinds}")

    def __getitem__(self, kind: SolarEventKind) -> datetime | None:
        return self.events[_KIND_INDEX[kind]].time

    def __iter__(self) -> Iterator[SolarEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def occurring(self) -> list[SolarEvent]:
        """Events that happen, sorted by time."""
        return sorted(
            (event for event in self.events if event.time is not None),
            key=lambda event: event.time.astimezone(timezone.utc),
        )

    def as_dict(self) -> dict[SolarEventKind, datetime | None]:
        """Mapping of event kind to time (None when absent)."""
        return {event.kind: event.time for event in self.events}

    @property
    def sunrise(self) -> datetime | None:
        return self[SolarEventKind.SUNRISE]

    @property
    def solar_noon(self) -> datetime | None:
        return self[SolarEventKind.SOLAR_NOON]

    @property
    def sunset(self) -> datetime | None:
        return self[SolarEventKind.SUNSET]

    @property
    def solar_midnight(self) -> datetime | None:
        return self[SolarEventKind.SOLAR_MIDNIGHT]


_KIND_INDEX = {kind: index for index, kind in enumerate(SolarEventKind)}
