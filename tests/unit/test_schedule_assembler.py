from __future__ import annotations

from dataclasses import replace

import pytest

from src.domain.algorithms.schedule_assembler import assemble_schedule
from src.domain.algorithms.stop_classifier import classify_stops
from src.domain.exceptions import MalformedRouteError, NotFoundError
from src.domain.models import TransitLine, TrimmerConfig, TrimMethod
from tests.unit.schedule_builders import (
    ALL_IN_LINE,
    HALF_IN_LINE,
    HALF_IN_ROUTE,
    MIDDLE_IN_LINE,
)


def test_unknown_line_is_not_found(schedule, zone) -> None:
    with pytest.raises(NotFoundError, match="no-such-line"):
        assemble_schedule(
            schedule, {"no-such-line"}, TrimmerConfig(), classify_stops(schedule, zone)
        )


def test_untargeted_lines_are_copied_verbatim(schedule, zone) -> None:
    result = assemble_schedule(
        schedule,
        {MIDDLE_IN_LINE},
        TrimmerConfig(method=TrimMethod.TRIM_ENDS),
        classify_stops(schedule, zone),
    )

    assert result is not schedule
    assert result.lines[HALF_IN_LINE] is schedule.lines[HALF_IN_LINE]
    assert result.lines[ALL_IN_LINE] is schedule.lines[ALL_IN_LINE]
    assert result.facilities == schedule.facilities
    assert list(result.lines) == list(schedule.lines)


@pytest.mark.parametrize("remove_empty_lines", [True, False])
def test_empty_lines_follow_remove_empty_lines(schedule, zone, remove_empty_lines) -> None:
    config = TrimmerConfig(
        method=TrimMethod.SPLIT_ROUTE, remove_empty_lines=remove_empty_lines
    )
    result = assemble_schedule(
        schedule, {ALL_IN_LINE}, config, classify_stops(schedule, zone)
    )

    assert (ALL_IN_LINE in result.lines) is not remove_empty_lines


def test_malformed_route_aborts_the_whole_run(schedule, zone) -> None:
    broken = replace(schedule.lines[HALF_IN_LINE].routes[HALF_IN_ROUTE], id="broken", stops=())
    lines = dict(schedule.lines)
    lines[HALF_IN_LINE] = TransitLine(
        id=HALF_IN_LINE,
        routes={**schedule.lines[HALF_IN_LINE].routes, "broken": broken},
    )
    bad = replace(schedule, lines=lines)

    with pytest.raises(MalformedRouteError):
        assemble_schedule(
            bad,
            {MIDDLE_IN_LINE, HALF_IN_LINE},
            TrimmerConfig(),
            classify_stops(bad, zone),
        )


def test_colliding_route_ids_are_rejected(schedule, zone) -> None:
    route = schedule.lines[HALF_IN_LINE].routes[HALF_IN_ROUTE]
    lines = dict(schedule.lines)
    # Two mapping keys holding routes that carry the same id.
    lines[HALF_IN_LINE] = TransitLine(
        id=HALF_IN_LINE, routes={route.id: route, "alias": route}
    )
    bad = replace(schedule, lines=lines)

    with pytest.raises(MalformedRouteError):
        assemble_schedule(
            bad,
            {HALF_IN_LINE},
            TrimmerConfig(method=TrimMethod.DELETE_ROUTES_ENTIRELY_INSIDE_ZONE),
            classify_stops(bad, zone),
        )
