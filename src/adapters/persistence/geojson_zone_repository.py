from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from shapely.geometry.base import BaseGeometry

from src.adapters.persistence.schedule_codec import zone_from_geojson
from src.app.ports.output import IZoneRepository


@dataclass(slots=True)
class GeoJsonZoneRepository(IZoneRepository):
    """Loads the zone from a GeoJSON file.

    Coordinates must already be in the schedule's CRS; no reprojection is done.

    Env vars:
      - ZONE_PATH: GeoJSON file used when no path is given
    """

    path: str | Path | None = None

    def load_zone(self) -> BaseGeometry:
        path = Path(self.path or os.getenv("ZONE_PATH") or "data/zone.geojson")
        with path.open("r", encoding="utf-8") as fp:
            return zone_from_geojson(json.load(fp))
