from __future__ import annotations

from dataclasses import dataclass

from src.domain.algorithms.segmentation import Run
from src.domain.models import TransitRoute


@dataclass(frozen=True, slots=True)
class HubCandidate:
    index: int
    distance: int
    reach: int
    facility_id: str

    @property
    def within_reach(self) -> bool:
        return self.distance <= self.reach


def hub_candidates(
    route: TransitRoute, run: Run, boundary_index: int, direction: int
) -> list[HubCandidate]:
    """List the hubs of an inside run in the order met when walking inward.

    The walk starts at ``boundary_index`` (the first zone stop after leaving
    an outside run) and moves by ``direction`` (+1 or -1) without leaving the
    run. The boundary stop is at inward distance 1.
    """

    if direction not in (1, -1):
        raise ValueError(f"Invalid direction: {direction}")
    if not run.start <= boundary_index <= run.end:
        raise ValueError(f"Boundary {boundary_index} outside of run {run}")

    out: list[HubCandidate] = []
    i = boundary_index
    distance = 1
    while run.start <= i <= run.end:
        facility = route.stops[i].facility
        reach = facility.hub_reach
        if reach is not None:
            out.append(
                HubCandidate(
                    index=i, distance=distance, reach=reach, facility_id=facility.id
                )
            )
        i += direction
        distance += 1
    return out


def select_furthest_hub(candidates: list[HubCandidate]) -> HubCandidate | None:
    """Pick the qualifying hub furthest into the zone.

    Equal distances resolve to the smallest facility id.
    """

    qualifying = [c for c in candidates if c.within_reach]
    if not qualifying:
        return None
    return min(qualifying, key=lambda c: (-c.distance, c.facility_id))


def find_hub(
    route: TransitRoute,
    run: Run,
    boundary_index: int,
    direction: int,
    force_nearest: bool = False,
) -> int | None:
    """Return the stop index a trimmed route may extend to, if any."""

    candidates = hub_candidates(route, run, boundary_index, direction)
    best = select_furthest_hub(candidates)
    if best is not None:
        return best.index
    if force_nearest and candidates:
        return candidates[0].index
    return None
