from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from src.domain.models import LinkLeaveEvent, VehicleLeavesTrafficEvent


class IEventsRepository(ABC):
    """Port for simulation output: vehicle types and link traversal events."""

    @abstractmethod
    def load_vehicle_types(self) -> Mapping[str, str]:
        raise NotImplementedError

    @abstractmethod
    def load_events(self) -> Sequence[LinkLeaveEvent | VehicleLeavesTrafficEvent]:
        raise NotImplementedError
