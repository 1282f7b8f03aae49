from __future__ import annotations

from abc import ABC, abstractmethod

from shapely.geometry.base import BaseGeometry


class IZoneRepository(ABC):
    """Port for loading the zone geometry, already in the schedule's CRS."""

    @abstractmethod
    def load_zone(self) -> BaseGeometry:
        raise NotImplementedError
