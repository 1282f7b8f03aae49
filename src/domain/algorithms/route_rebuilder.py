from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from src.domain.exceptions import MalformedRouteError
from src.domain.models import TransitRoute


def anchor_stops(route: TransitRoute) -> list[int]:
    """Position of each stop's link within the route's link path.

    Stops are matched in order, so a link visited twice anchors the later
    stop to the later visit.
    """

    anchors: list[int] = []
    pos = 0
    for stop in route.stops:
        link_id = stop.facility.link_id
        if link_id is None:
            raise MalformedRouteError(
                f"Stop {stop.facility.id} on route {route.id} has no link"
            )
        try:
            pos = route.link_ids.index(link_id, pos)
        except ValueError:
            raise MalformedRouteError(
                f"Stop {stop.facility.id} on route {route.id} is not on its link path"
            ) from None
        anchors.append(pos)
    return anchors


def rebuild_route(
    route: TransitRoute, kept_indices: Sequence[int], suffix: str
) -> TransitRoute:
    """Copy ``route`` keeping only the given stops, with a matching link path.

    The link path runs from the first kept stop's link to the last kept
    stop's link. Links between retained stops are kept even where stops in
    between are dropped, so the path stays contiguous.
    """

    if not kept_indices:
        raise ValueError(f"No stops kept for route {route.id}")
    if list(kept_indices) != sorted(set(kept_indices)):
        raise ValueError(f"Kept stop indices must be strictly increasing: {kept_indices}")

    stops = tuple(route.stops[i] for i in kept_indices)
    link_ids: tuple[str, ...] = ()
    if route.link_ids:
        anchors = anchor_stops(route)
        link_ids = route.link_ids[anchors[kept_indices[0]] : anchors[kept_indices[-1]] + 1]

    return replace(route, id=f"{route.id}{suffix}", stops=stops, link_ids=link_ids)


def mod_suffix(n: int) -> str:
    return f"_mod{n}"
