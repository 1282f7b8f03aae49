from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.domain.exceptions import MalformedRouteError
from src.domain.models import StopsInZone, TransitRoute


class RouteType(str, Enum):
    ALL_IN = "AllIn"
    ALL_OUT = "AllOut"
    HALF_IN = "HalfIn"
    MIDDLE_IN = "MiddleIn"


@dataclass(frozen=True, slots=True)
class Run:
    """Maximal block of consecutive stops on the same side of the zone.

    ``start`` and ``end`` are inclusive stop indices.
    """

    inside: bool
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


def segment_route(route: TransitRoute, stops_in_zone: StopsInZone) -> list[Run]:
    if not route.stops:
        raise MalformedRouteError(f"Route {route.id} has no stops")

    runs: list[Run] = []
    start = 0
    inside = route.stops[0].facility.id in stops_in_zone
    for i, stop in enumerate(route.stops[1:], start=1):
        flag = stop.facility.id in stops_in_zone
        if flag != inside:
            runs.append(Run(inside=inside, start=start, end=i - 1))
            start = i
            inside = flag
    runs.append(Run(inside=inside, start=start, end=len(route.stops) - 1))
    return runs


def classify_route(runs: list[Run]) -> RouteType:
    if len(runs) == 1:
        return RouteType.ALL_IN if runs[0].inside else RouteType.ALL_OUT
    if not runs[0].inside and not runs[-1].inside:
        return RouteType.MIDDLE_IN
    return RouteType.HALF_IN


def is_interior(run: Run, runs: list[Run]) -> bool:
    return run.start > runs[0].start and run.end < runs[-1].end


def absorb_short_incursions(runs: list[Run], max_len: int) -> list[Run]:
    """Relabel interior inside runs of at most ``max_len`` stops as outside.

    Neighbouring outside runs are merged so the result still alternates.
    """

    if max_len <= 0:
        return list(runs)

    relabelled = [
        Run(inside=False, start=r.start, end=r.end)
        if r.inside and is_interior(r, runs) and r.length <= max_len
        else r
        for r in runs
    ]

    merged: list[Run] = []
    for run in relabelled:
        if merged and merged[-1].inside == run.inside:
            prev = merged.pop()
            merged.append(Run(inside=run.inside, start=prev.start, end=run.end))
        else:
            merged.append(run)
    return merged
