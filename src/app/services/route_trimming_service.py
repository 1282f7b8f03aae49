from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from shapely.geometry.base import BaseGeometry

from src.app.ports.output import (
    INetworkRepository,
    IScheduleRepository,
    IZoneRepository,
)
from src.domain.algorithms.link_paths import link_graph, link_path_gaps
from src.domain.algorithms.schedule_assembler import assemble_schedule
from src.domain.algorithms.stop_classifier import classify_stops
from src.domain.algorithms.zone import ZoneIndex
from src.domain.models import (
    Network,
    StopsInZone,
    TransitSchedule,
    TrimmerConfig,
    TrimMethod,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransitRouteTrimmer:
    """Trims the routes of selected transit lines against a zone.

    Stop classification runs once on construction and is reused by every
    call. The input schedule is never modified; each call returns a new one.
    """

    schedule: TransitSchedule
    zone: ZoneIndex
    config: TrimmerConfig = field(default_factory=TrimmerConfig)
    network: Network | None = None

    stops_in_zone: StopsInZone = field(init=False)

    def __post_init__(self) -> None:
        self.stops_in_zone = classify_stops(self.schedule, self.zone)
        logger.info(
            "Classified %d stop facilities, %d inside zone",
            len(self.schedule.facilities),
            len(self.stops_in_zone),
        )

    @classmethod
    def from_geometry(
        cls,
        schedule: TransitSchedule,
        geometry: BaseGeometry,
        config: TrimmerConfig | None = None,
        network: Network | None = None,
    ) -> TransitRouteTrimmer:
        return cls(
            schedule=schedule,
            zone=ZoneIndex.from_geometry(geometry),
            config=config or TrimmerConfig(),
            network=network,
        )

    def modify_transit_lines(
        self,
        line_ids: Iterable[str] | None = None,
        method: TrimMethod | None = None,
    ) -> TransitSchedule:
        """Apply a trimming method to ``line_ids`` (default: the configured ones)."""

        config = self.config
        if method is not None and method is not config.method:
            config = replace(config, method=method)
        targets = set(config.target_lines if line_ids is None else line_ids)

        result = assemble_schedule(self.schedule, targets, config, self.stops_in_zone)

        routes_in = sum(
            len(self.schedule.lines[line_id].routes) for line_id in targets
        )
        routes_out = sum(
            len(result.lines[line_id].routes) for line_id in targets if line_id in result.lines
        )
        logger.info(
            "%s: %d lines modified, %d routes in, %d routes out",
            config.method.value,
            len(targets),
            routes_in,
            routes_out,
        )

        if self.network is not None:
            self._warn_on_disconnected_paths(result, targets)
        return result

    def _warn_on_disconnected_paths(
        self, schedule: TransitSchedule, targets: set[str]
    ) -> None:
        graph = link_graph(self.network)
        for line_id in targets:
            line = schedule.lines.get(line_id)
            if line is None:
                continue
            for route in line.routes.values():
                for a, b in link_path_gaps(route.link_ids, graph):
                    logger.warning(
                        "Route %s of line %s: links %s and %s are not connected",
                        route.id,
                        line_id,
                        a,
                        b,
                    )


@dataclass(slots=True)
class ScheduleTrimmingService:
    """Application service: load inputs through ports, trim, store the result."""

    schedule_repository: IScheduleRepository
    zone_repository: IZoneRepository
    output_repository: IScheduleRepository | None = None
    network_repository: INetworkRepository | None = None

    def run(self, config: TrimmerConfig) -> TransitSchedule:
        network = (
            self.network_repository.load_network()
            if self.network_repository is not None
            else None
        )
        trimmer = TransitRouteTrimmer.from_geometry(
            self.schedule_repository.load_schedule(),
            self.zone_repository.load_zone(),
            config=config,
            network=network,
        )
        result = trimmer.modify_transit_lines()
        if self.output_repository is not None:
            self.output_repository.save_schedule(result)
        return result
