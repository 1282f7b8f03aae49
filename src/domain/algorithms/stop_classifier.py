from __future__ import annotations

from collections.abc import Iterator

from src.domain.algorithms.zone import ZoneIndex
from src.domain.exceptions import MalformedRouteError
from src.domain.models import StopsInZone, TransitSchedule, TransitStopFacility


def _distinct_facilities(schedule: TransitSchedule) -> Iterator[TransitStopFacility]:
    seen: set[str] = set()
    for facility in schedule.facilities.values():
        if facility.id not in seen:
            seen.add(facility.id)
            yield facility
    # Route stops may reference facilities missing from the facility map.
    for line in schedule.lines.values():
        for route in line.routes.values():
            for stop in route.stops:
                if stop.facility.id not in seen:
                    seen.add(stop.facility.id)
                    yield stop.facility


def classify_stops(schedule: TransitSchedule, zone: ZoneIndex) -> StopsInZone:
    """Return the ids of all stop facilities covered by the zone.

    Each distinct facility is tested once, no matter how many routes call it.
    """

    inside: set[str] = set()
    for facility in _distinct_facilities(schedule):
        if facility.coord is None:
            raise MalformedRouteError(f"Stop facility {facility.id} has no coordinate")
        if zone.in_zone(facility.coord):
            inside.add(facility.id)
    return frozenset(inside)
