from __future__ import annotations

from dataclasses import dataclass, field

from .geo import Coord


@dataclass(frozen=True, slots=True)
class Link:
    id: str
    from_node: str
    to_node: str
    length_m: float
    coord: Coord | None = None  # usually the link midpoint


@dataclass(frozen=True, slots=True)
class Network:
    links: dict[str, Link] = field(default_factory=dict)
