from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LinkLeaveEvent:
    time_s: float
    link_id: str
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class VehicleLeavesTrafficEvent:
    time_s: float
    link_id: str
    vehicle_id: str
