from .geojson_zone_repository import GeoJsonZoneRepository
from .local_schedule_repository import (
    LocalEventsRepository,
    LocalNetworkRepository,
    LocalScheduleRepository,
)

__all__ = [
    "GeoJsonZoneRepository",
    "LocalEventsRepository",
    "LocalNetworkRepository",
    "LocalScheduleRepository",
]
