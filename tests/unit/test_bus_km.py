from __future__ import annotations

import pytest

from src.domain.algorithms.bus_km import BusKmCounter, scheduled_bus_km
from src.domain.models import LinkLeaveEvent, TransitSchedule, VehicleLeavesTrafficEvent
from tests.unit.schedule_builders import HALF_IN_LINE


def test_counter_sums_bus_links_and_zone_share(network, zone) -> None:
    counter = BusKmCounter(
        network=network,
        zone=zone,
        vehicle_types={"bus1": "Bus_veh_type", "car1": "car"},
    )

    result = counter.handle_events(
        [
            LinkLeaveEvent(time_s=10.0, link_id="l_h_in_0", vehicle_id="bus1"),
            LinkLeaveEvent(time_s=20.0, link_id="c_h_out_0_h_out_1", vehicle_id="bus1"),
            LinkLeaveEvent(time_s=30.0, link_id="l_h_in_1", vehicle_id="car1"),
            LinkLeaveEvent(time_s=35.0, link_id="no-such-link", vehicle_id="bus1"),
            LinkLeaveEvent(time_s=36.0, link_id="l_h_in_1", vehicle_id="ghost"),
            VehicleLeavesTrafficEvent(time_s=40.0, link_id="l_h_out_0", vehicle_id="bus1"),
        ]
    )

    assert result.total_km == pytest.approx(1.1)
    assert result.in_zone_km == pytest.approx(0.1)


def test_scheduled_bus_km_counts_every_departure(schedule, network, zone) -> None:
    single = TransitSchedule(
        lines={HALF_IN_LINE: schedule.lines[HALF_IN_LINE]},
        facilities=schedule.facilities,
    )

    result = scheduled_bus_km(single, network, zone)

    # 10 stop links of 100 m and 9 connectors of 900 m, driven twice.
    assert result.total_km == pytest.approx(18.2)
    assert result.in_zone_km == pytest.approx(1.2)


def test_scheduled_bus_km_ignores_other_modes(schedule, network, zone) -> None:
    assert scheduled_bus_km(schedule, network, zone, mode="rail").total_km == 0.0
