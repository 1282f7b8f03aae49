from .events_repository import IEventsRepository
from .network_repository import INetworkRepository
from .schedule_repository import IScheduleRepository
from .zone_repository import IZoneRepository

__all__ = [
    "IEventsRepository",
    "INetworkRepository",
    "IScheduleRepository",
    "IZoneRepository",
]
