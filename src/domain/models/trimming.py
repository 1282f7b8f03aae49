from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

StopsInZone = frozenset[str]


class TrimMethod(str, Enum):
    DELETE_ROUTES_ENTIRELY_INSIDE_ZONE = "DeleteRoutesEntirelyInsideZone"
    TRIM_ENDS = "TrimEnds"
    SKIP_STOPS_WITHIN_ZONE = "SkipStopsWithinZone"
    SPLIT_ROUTE = "SplitRoute"


@dataclass(frozen=True, slots=True)
class TrimmerConfig:
    method: TrimMethod = TrimMethod.SPLIT_ROUTE
    remove_empty_lines: bool = True
    include_first_stop_within_zone: bool = True
    include_first_hub_in_zone: bool = False
    # Interior incursions with at most this many stops do not split a route.
    allowable_stops_within_zone: int = 0
    target_lines: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.allowable_stops_within_zone < 0:
            raise ValueError(
                f"Invalid allowable_stops_within_zone: {self.allowable_stops_within_zone}"
            )
