from __future__ import annotations

from collections.abc import Callable

import pytest
from shapely.geometry import box

from src.domain.algorithms.zone import ZoneIndex
from src.domain.models import Network, TransitSchedule
from tests.unit.schedule_builders import build_network, build_schedule


@pytest.fixture
def zone_geometry():
    # Zone is the square (0, 0) - (100, 100).
    return box(0.0, 0.0, 100.0, 100.0)


@pytest.fixture
def zone(zone_geometry) -> ZoneIndex:
    return ZoneIndex.from_geometry(zone_geometry)


@pytest.fixture
def schedule() -> TransitSchedule:
    return build_schedule()


@pytest.fixture
def schedule_with_hubs() -> Callable[..., TransitSchedule]:
    return build_schedule


@pytest.fixture
def network() -> Network:
    return build_network()
