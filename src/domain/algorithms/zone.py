from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry
from shapely.prepared import prep

from src.domain.models import Coord


@dataclass(frozen=True, slots=True)
class ZoneIndex:
    """Point-in-zone lookups against a prepared (multi)polygon.

    Membership uses ``covers``, so stops lying exactly on the boundary count
    as inside the zone.
    """

    geometry: BaseGeometry
    _prepared: Any

    @classmethod
    def from_geometry(cls, geometry: BaseGeometry) -> ZoneIndex:
        if geometry.is_empty:
            raise ValueError("Zone geometry is empty")
        if geometry.geom_type not in {"Polygon", "MultiPolygon", "GeometryCollection"}:
            raise ValueError(f"Unsupported zone geometry type: {geometry.geom_type}")
        return cls(geometry=geometry, _prepared=prep(geometry))

    def in_zone(self, coord: Coord) -> bool:
        return bool(self._prepared.covers(Point(coord.x, coord.y)))
