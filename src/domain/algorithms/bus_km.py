from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from src.domain.algorithms.zone import ZoneIndex
from src.domain.models import (
    LinkLeaveEvent,
    Network,
    TransitSchedule,
    VehicleLeavesTrafficEvent,
)

BUS_VEHICLE_TYPE = "Bus_veh_type"


@dataclass(frozen=True, slots=True)
class BusKm:
    total_km: float
    in_zone_km: float


@dataclass(slots=True)
class BusKmCounter:
    """Accumulates kilometres driven by buses from simulation events.

    A link counts towards ``in_zone_km`` when its coordinate is covered by
    the zone. Events on unknown vehicles or links are ignored.
    """

    network: Network
    zone: ZoneIndex
    vehicle_types: Mapping[str, str]
    bus_vehicle_type: str = BUS_VEHICLE_TYPE

    total_km: float = 0.0
    in_zone_km: float = 0.0

    def handle_event(self, event: LinkLeaveEvent | VehicleLeavesTrafficEvent) -> None:
        if self.vehicle_types.get(event.vehicle_id) != self.bus_vehicle_type:
            return
        link = self.network.links.get(event.link_id)
        if link is None:
            return
        km = link.length_m / 1000.0
        self.total_km += km
        if link.coord is not None and self.zone.in_zone(link.coord):
            self.in_zone_km += km

    def handle_events(
        self, events: Iterable[LinkLeaveEvent | VehicleLeavesTrafficEvent]
    ) -> BusKm:
        for event in events:
            self.handle_event(event)
        return self.result()

    def result(self) -> BusKm:
        return BusKm(total_km=self.total_km, in_zone_km=self.in_zone_km)


def scheduled_bus_km(
    schedule: TransitSchedule, network: Network, zone: ZoneIndex, mode: str = "bus"
) -> BusKm:
    """Kilometres a schedule plans to drive: route length times departures."""

    total = 0.0
    in_zone = 0.0
    for line in schedule.lines.values():
        for route in line.routes.values():
            if route.transport_mode != mode or not route.departures:
                continue
            n = len(route.departures)
            for link_id in route.link_ids:
                link = network.links.get(link_id)
                if link is None:
                    continue
                km = link.length_m / 1000.0 * n
                total += km
                if link.coord is not None and zone.in_zone(link.coord):
                    in_zone += km
    return BusKm(total_km=total, in_zone_km=in_zone)
