from __future__ import annotations

import pytest

from src.domain.algorithms.segmentation import (
    RouteType,
    Run,
    absorb_short_incursions,
    classify_route,
    is_interior,
    segment_route,
)
from src.domain.algorithms.stop_classifier import classify_stops
from src.domain.exceptions import MalformedRouteError
from src.domain.models import TransitRoute
from tests.unit.schedule_builders import (
    ALL_IN_LINE,
    ALL_IN_ROUTE,
    HALF_IN_LINE,
    HALF_IN_ROUTE,
    MIDDLE_IN_LINE,
    MIDDLE_IN_ROUTE,
)


def test_segment_middle_in_route(schedule, zone) -> None:
    stops_in_zone = classify_stops(schedule, zone)
    route = schedule.lines[MIDDLE_IN_LINE].routes[MIDDLE_IN_ROUTE]

    runs = segment_route(route, stops_in_zone)

    assert runs == [
        Run(inside=False, start=0, end=4),
        Run(inside=True, start=5, end=23),
        Run(inside=False, start=24, end=27),
    ]
    assert runs[1].length == 19
    assert classify_route(runs) is RouteType.MIDDLE_IN
    assert is_interior(runs[1], runs)
    assert not is_interior(runs[0], runs)


@pytest.mark.parametrize(
    ("line_id", "route_id", "expected"),
    [
        (ALL_IN_LINE, ALL_IN_ROUTE, RouteType.ALL_IN),
        (HALF_IN_LINE, HALF_IN_ROUTE, RouteType.HALF_IN),
        (MIDDLE_IN_LINE, MIDDLE_IN_ROUTE, RouteType.MIDDLE_IN),
    ],
)
def test_classify_route_types(schedule, zone, line_id, route_id, expected) -> None:
    stops_in_zone = classify_stops(schedule, zone)
    route = schedule.lines[line_id].routes[route_id]

    assert classify_route(segment_route(route, stops_in_zone)) is expected


def test_all_out_route_is_one_outside_run(schedule) -> None:
    route = schedule.lines[MIDDLE_IN_LINE].routes[MIDDLE_IN_ROUTE]
    runs = segment_route(route, frozenset())

    assert runs == [Run(inside=False, start=0, end=27)]
    assert classify_route(runs) is RouteType.ALL_OUT


def test_route_starting_inside_is_half_in() -> None:
    runs = [
        Run(inside=True, start=0, end=1),
        Run(inside=False, start=2, end=3),
        Run(inside=True, start=4, end=4),
    ]
    assert classify_route(runs) is RouteType.HALF_IN


def test_segment_rejects_route_without_stops() -> None:
    with pytest.raises(MalformedRouteError):
        segment_route(TransitRoute(id="empty", stops=()), frozenset())


def test_absorb_short_incursions_merges_neighbours() -> None:
    runs = [
        Run(inside=False, start=0, end=2),
        Run(inside=True, start=3, end=4),
        Run(inside=False, start=5, end=6),
        Run(inside=True, start=7, end=9),
        Run(inside=False, start=10, end=10),
    ]

    assert absorb_short_incursions(runs, 2) == [
        Run(inside=False, start=0, end=6),
        Run(inside=True, start=7, end=9),
        Run(inside=False, start=10, end=10),
    ]
    assert absorb_short_incursions(runs, 3) == [Run(inside=False, start=0, end=10)]
    assert absorb_short_incursions(runs, 0) == runs


def test_absorb_never_touches_runs_at_route_ends() -> None:
    runs = [Run(inside=True, start=0, end=0), Run(inside=False, start=1, end=3)]

    assert absorb_short_incursions(runs, 5) == runs
