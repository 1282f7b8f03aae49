from __future__ import annotations

from collections.abc import Callable

from src.domain.algorithms.hubs import find_hub
from src.domain.algorithms.route_rebuilder import mod_suffix, rebuild_route
from src.domain.algorithms.segmentation import (
    RouteType,
    Run,
    absorb_short_incursions,
    classify_route,
    is_interior,
    segment_route,
)
from src.domain.models import StopsInZone, TransitRoute, TrimmerConfig, TrimMethod

Strategy = Callable[[TransitRoute, StopsInZone, TrimmerConfig], list[TransitRoute]]


def _end_bounds(runs: list[Run], include_boundary: bool) -> tuple[int, int]:
    """Stop range left after cutting inside runs off either end of a route."""

    lo = 0
    hi = runs[-1].end
    if runs[0].inside:
        lo = runs[0].end if include_boundary else runs[0].end + 1
    if runs[-1].inside:
        hi = runs[-1].start if include_boundary else runs[-1].start - 1
    return lo, hi


def delete_routes_entirely_inside_zone(
    route: TransitRoute, stops_in_zone: StopsInZone, config: TrimmerConfig
) -> list[TransitRoute]:
    runs = segment_route(route, stops_in_zone)
    if classify_route(runs) is RouteType.ALL_IN:
        return []
    return [route]


def trim_ends(
    route: TransitRoute, stops_in_zone: StopsInZone, config: TrimmerConfig
) -> list[TransitRoute]:
    runs = segment_route(route, stops_in_zone)
    if classify_route(runs) is RouteType.ALL_IN:
        return []
    lo, hi = _end_bounds(runs, config.include_first_stop_within_zone)
    return [rebuild_route(route, range(lo, hi + 1), mod_suffix(1))]


def skip_stops_within_zone(
    route: TransitRoute, stops_in_zone: StopsInZone, config: TrimmerConfig
) -> list[TransitRoute]:
    runs = segment_route(route, stops_in_zone)
    if classify_route(runs) is RouteType.ALL_IN:
        return []
    lo, hi = _end_bounds(runs, config.include_first_stop_within_zone)

    kept: list[int] = []
    for run in runs:
        # Interior incursions keep only the stop where the route enters the zone.
        if run.inside and is_interior(run, runs):
            kept.append(run.start)
            continue
        kept.extend(i for i in range(run.start, run.end + 1) if lo <= i <= hi)
    return [rebuild_route(route, kept, mod_suffix(1))]


def _extend_into(
    route: TransitRoute, run: Run, entering: bool, config: TrimmerConfig
) -> int | None:
    """How far a fragment adjacent to inside ``run`` may reach into it.

    ``entering`` is True when the fragment precedes the run (walk forward from
    ``run.start``) and False when it follows it (walk backward from
    ``run.end``). Returns the furthest stop index to keep, or None.
    """

    boundary = run.start if entering else run.end
    direction = 1 if entering else -1

    reach: int | None = boundary if config.include_first_stop_within_zone else None
    hub = find_hub(
        route, run, boundary, direction, force_nearest=config.include_first_hub_in_zone
    )
    if hub is None:
        return reach
    if reach is None:
        return hub
    return max(reach, hub) if entering else min(reach, hub)


def _merge_fragments(fragments: list[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for lo, hi in fragments:
        if merged and lo <= merged[-1][1] + 1:
            prev_lo, prev_hi = merged.pop()
            merged.append((prev_lo, max(prev_hi, hi)))
        else:
            merged.append((lo, hi))
    return merged


def split_route(
    route: TransitRoute, stops_in_zone: StopsInZone, config: TrimmerConfig
) -> list[TransitRoute]:
    runs = segment_route(route, stops_in_zone)
    if classify_route(runs) is RouteType.ALL_IN:
        return []
    runs = absorb_short_incursions(runs, config.allowable_stops_within_zone)

    fragments: list[tuple[int, int]] = []
    for idx, run in enumerate(runs):
        if run.inside:
            continue
        lo, hi = run.start, run.end
        if idx > 0:
            ext = _extend_into(route, runs[idx - 1], entering=False, config=config)
            if ext is not None:
                lo = ext
        if idx < len(runs) - 1:
            ext = _extend_into(route, runs[idx + 1], entering=True, config=config)
            if ext is not None:
                hi = ext
        fragments.append((lo, hi))

    return [
        rebuild_route(route, range(lo, hi + 1), mod_suffix(n))
        for n, (lo, hi) in enumerate(_merge_fragments(fragments), start=1)
    ]


STRATEGIES: dict[TrimMethod, Strategy] = {
    TrimMethod.DELETE_ROUTES_ENTIRELY_INSIDE_ZONE: delete_routes_entirely_inside_zone,
    TrimMethod.TRIM_ENDS: trim_ends,
    TrimMethod.SKIP_STOPS_WITHIN_ZONE: skip_stops_within_zone,
    TrimMethod.SPLIT_ROUTE: split_route,
}


def trim_route(
    route: TransitRoute, stops_in_zone: StopsInZone, config: TrimmerConfig
) -> list[TransitRoute]:
    return STRATEGIES[config.method](route, stops_in_zone, config)
