from .events import LinkLeaveEvent, VehicleLeavesTrafficEvent
from .geo import Coord
from .network import Link, Network
from .schedule import (
    HUB_REACH_ATTRIBUTE,
    Departure,
    TransitLine,
    TransitRoute,
    TransitRouteStop,
    TransitSchedule,
    TransitStopFacility,
)
from .trimming import StopsInZone, TrimmerConfig, TrimMethod

__all__ = [
    "Coord",
    "Departure",
    "HUB_REACH_ATTRIBUTE",
    "Link",
    "LinkLeaveEvent",
    "Network",
    "StopsInZone",
    "TransitLine",
    "TransitRoute",
    "TransitRouteStop",
    "TransitSchedule",
    "TransitStopFacility",
    "TrimMethod",
    "TrimmerConfig",
    "VehicleLeavesTrafficEvent",
]
