from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import (
    IEventsRepository,
    INetworkRepository,
    IScheduleRepository,
    IZoneRepository,
)
from src.domain.algorithms.bus_km import BusKm, BusKmCounter, scheduled_bus_km
from src.domain.algorithms.zone import ZoneIndex

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BusKmService:
    """Bus kilometres, planned from the schedule or driven in a simulation."""

    schedule_repository: IScheduleRepository
    network_repository: INetworkRepository
    zone_repository: IZoneRepository
    events_repository: IEventsRepository | None = None

    def count(self) -> BusKm:
        schedule = self.schedule_repository.load_schedule()
        network = self.network_repository.load_network()
        zone = ZoneIndex.from_geometry(self.zone_repository.load_zone())

        result = scheduled_bus_km(schedule, network, zone)
        logger.info(
            "Scheduled bus km: %.1f total, %.1f inside zone",
            result.total_km,
            result.in_zone_km,
        )
        return result

    def count_driven(self) -> BusKm:
        if self.events_repository is None:
            raise RuntimeError("Events repository not configured")

        counter = BusKmCounter(
            network=self.network_repository.load_network(),
            zone=ZoneIndex.from_geometry(self.zone_repository.load_zone()),
            vehicle_types=self.events_repository.load_vehicle_types(),
        )
        result = counter.handle_events(self.events_repository.load_events())
        logger.info(
            "Driven bus km: %.1f total, %.1f inside zone",
            result.total_km,
            result.in_zone_km,
        )
        return result
