from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .geo import Coord

HUB_REACH_ATTRIBUTE = "hub-reach"


@dataclass(frozen=True, slots=True)
class TransitStopFacility:
    id: str
    coord: Coord | None
    link_id: str | None = None
    name: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def hub_reach(self) -> int | None:
        """Declared hub reach in stops, or None when the stop is not a hub.

        Unparseable or negative values are treated as absent.
        """

        raw = self.attributes.get(HUB_REACH_ATTRIBUTE)
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, float):
            if not raw.is_integer():
                return None
            raw = int(raw)
        try:
            reach = int(str(raw).strip())
        except (TypeError, ValueError):
            return None
        return reach if reach >= 0 else None


@dataclass(frozen=True, slots=True)
class TransitRouteStop:
    """A stop call on a route. Offsets are seconds from the route start."""

    facility: TransitStopFacility
    arrival_offset_s: float | None = None
    departure_offset_s: float | None = None
    await_departure: bool = False


@dataclass(frozen=True, slots=True)
class Departure:
    id: str
    departure_time_s: float
    vehicle_id: str | None = None


@dataclass(frozen=True, slots=True)
class TransitRoute:
    """Ordered stop calls plus the link path from the first to the last stop."""

    id: str
    stops: tuple[TransitRouteStop, ...]
    link_ids: tuple[str, ...] = ()
    transport_mode: str = "bus"
    departures: tuple[Departure, ...] = ()

    @property
    def facility_ids(self) -> tuple[str, ...]:
        return tuple(stop.facility.id for stop in self.stops)


@dataclass(frozen=True, slots=True)
class TransitLine:
    id: str
    routes: dict[str, TransitRoute] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TransitSchedule:
    lines: dict[str, TransitLine] = field(default_factory=dict)
    facilities: dict[str, TransitStopFacility] = field(default_factory=dict)
