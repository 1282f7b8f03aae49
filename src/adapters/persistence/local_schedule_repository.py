from __future__ import annotations

import gzip
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

from src.adapters.persistence.schedule_codec import (
    events_from_dict,
    network_from_dict,
    schedule_from_dict,
    schedule_to_dict,
    vehicle_types_from_dict,
)
from src.app.ports.output import IEventsRepository, INetworkRepository, IScheduleRepository
from src.domain.models import (
    LinkLeaveEvent,
    Network,
    TransitSchedule,
    VehicleLeavesTrafficEvent,
)

logger = logging.getLogger(__name__)


def _open(path: Path, mode: str) -> IO[Any]:
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t", encoding="utf-8")
    return path.open(mode, encoding="utf-8")


@dataclass(slots=True)
class LocalScheduleRepository(IScheduleRepository):
    """Reads and writes a schedule as JSON (optionally gzipped).

    Env vars:
      - SCHEDULE_PATH: schedule file used when no path is given
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("SCHEDULE_PATH") or "data/schedule.json"
        return Path(value)

    def load_schedule(self) -> TransitSchedule:
        path = self._path()
        with _open(path, "r") as fp:
            schedule = schedule_from_dict(json.load(fp))
        logger.info(
            "Loaded schedule %s: %d lines, %d stop facilities",
            path,
            len(schedule.lines),
            len(schedule.facilities),
        )
        return schedule

    def save_schedule(self, schedule: TransitSchedule) -> None:
        path = self._path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name("." + path.name + ".tmp" + path.suffix)
        with _open(tmp, "w") as fp:
            json.dump(schedule_to_dict(schedule), fp, indent=2)
        os.replace(tmp, path)
        logger.info("Wrote schedule %s: %d lines", path, len(schedule.lines))


@dataclass(slots=True)
class LocalNetworkRepository(INetworkRepository):
    """Reads a network of links from JSON.

    Env vars:
      - NETWORK_PATH: network file used when no path is given
    """

    path: str | Path | None = None

    def load_network(self) -> Network:
        path = Path(self.path or os.getenv("NETWORK_PATH") or "data/network.json")
        with _open(path, "r") as fp:
            return network_from_dict(json.load(fp))


@dataclass(slots=True)
class LocalEventsRepository(IEventsRepository):
    """Reads simulation events and vehicle types from one JSON file.

    Layout::

        {"vehicles": [{"id": "bus_1", "type": "Bus_veh_type"}],
         "events": [{"type": "left link", "time": 21600.0,
                     "link": "l_12", "vehicle": "bus_1"}]}

    Env vars:
      - EVENTS_PATH: events file used when no path is given
    """

    path: str | Path | None = None
    _data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            path = Path(self.path or os.getenv("EVENTS_PATH") or "data/events.json")
            with _open(path, "r") as fp:
                self._data = json.load(fp)
        return self._data

    def load_vehicle_types(self) -> dict[str, str]:
        return vehicle_types_from_dict(self._load())

    def load_events(self) -> list[LinkLeaveEvent | VehicleLeavesTrafficEvent]:
        events = events_from_dict(self._load())
        logger.info("Loaded %d link events", len(events))
        return events
