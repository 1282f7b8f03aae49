from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coord:
    """Planar coordinate, expressed in the same CRS as the zone geometry."""

    x: float
    y: float
