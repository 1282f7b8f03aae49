from __future__ import annotations

import logging
from collections.abc import Iterable

from src.domain.algorithms.trimming import trim_route
from src.domain.exceptions import MalformedRouteError, NotFoundError
from src.domain.models import (
    StopsInZone,
    TransitLine,
    TransitSchedule,
    TrimmerConfig,
)

logger = logging.getLogger(__name__)


def trim_line(
    line: TransitLine, stops_in_zone: StopsInZone, config: TrimmerConfig
) -> TransitLine:
    routes = {}
    for route in line.routes.values():
        trimmed = trim_route(route, stops_in_zone, config)
        logger.debug(
            "Line %s route %s -> %s",
            line.id,
            route.id,
            [r.id for r in trimmed] or "removed",
        )
        for new_route in trimmed:
            if new_route.id in routes:
                raise MalformedRouteError(
                    f"Route id {new_route.id} produced twice on line {line.id}"
                )
            routes[new_route.id] = new_route
    return TransitLine(id=line.id, routes=routes)


def assemble_schedule(
    schedule: TransitSchedule,
    target_lines: Iterable[str],
    config: TrimmerConfig,
    stops_in_zone: StopsInZone,
) -> TransitSchedule:
    """Build a new schedule with the targeted lines trimmed.

    Every targeted line is rebuilt before the output is assembled, so any
    error leaves no partial result behind. The input schedule is not modified.
    """

    targets = set(target_lines)
    missing = sorted(targets - schedule.lines.keys())
    if missing:
        raise NotFoundError(f"Transit lines not found in schedule: {', '.join(missing)}")

    rebuilt = {
        line_id: trim_line(line, stops_in_zone, config)
        for line_id, line in schedule.lines.items()
        if line_id in targets
    }

    lines: dict[str, TransitLine] = {}
    for line_id, line in schedule.lines.items():
        new_line = rebuilt.get(line_id)
        if new_line is None:
            lines[line_id] = line
        elif new_line.routes or not config.remove_empty_lines:
            lines[line_id] = new_line

    return TransitSchedule(lines=lines, facilities=dict(schedule.facilities))
