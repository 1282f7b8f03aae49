from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from src.adapters.persistence import (
    GeoJsonZoneRepository,
    LocalEventsRepository,
    LocalNetworkRepository,
    LocalScheduleRepository,
)
from src.adapters.settings import parse_line_ids, parse_method, trimmer_config_from_env
from src.app.services.bus_km_service import BusKmService
from src.app.services.route_trimming_service import ScheduleTrimmingService
from src.domain.exceptions import TrimmingError
from src.domain.models import TrimMethod

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trim-schedule",
        description="Trim transit routes of selected lines against a zone.",
    )
    parser.add_argument("--schedule", help="Input schedule JSON (default: $SCHEDULE_PATH)")
    parser.add_argument("--zone", help="Zone GeoJSON (default: $ZONE_PATH)")
    parser.add_argument("--network", help="Network JSON used to check rebuilt link paths")
    parser.add_argument("--output", help="Output schedule JSON (required unless --bus-km)")
    parser.add_argument(
        "--lines", help="Comma-separated transit line ids (default: $TRIM_TARGET_LINES)"
    )
    parser.add_argument(
        "--method",
        choices=[m.value for m in TrimMethod],
        help="Trimming method (default: $TRIM_METHOD or SplitRoute)",
    )
    parser.add_argument(
        "--keep-empty-lines",
        action="store_true",
        help="Keep targeted lines that end up with no routes",
    )
    parser.add_argument(
        "--exclude-first-stop",
        action="store_true",
        help="End trimmed routes at the last stop outside the zone",
    )
    parser.add_argument(
        "--include-first-hub",
        action="store_true",
        help="Extend to the nearest hub even when it is out of reach",
    )
    parser.add_argument(
        "--allowable-stops",
        type=int,
        help="Interior zone stops a route may pass without being split",
    )
    parser.add_argument(
        "--bus-km",
        action="store_true",
        help="Report scheduled bus kilometres instead of trimming (needs --network)",
    )
    parser.add_argument(
        "--events",
        help="Simulation events JSON; with --bus-km, count driven instead of scheduled km",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    schedules = LocalScheduleRepository(path=args.schedule)
    zones = GeoJsonZoneRepository(path=args.zone)
    networks = LocalNetworkRepository(path=args.network) if args.network else None

    if args.bus_km:
        if networks is None:
            logger.error("--bus-km requires --network")
            return 2
        bus_km = BusKmService(
            schedule_repository=schedules,
            network_repository=networks,
            zone_repository=zones,
            events_repository=LocalEventsRepository(path=args.events) if args.events else None,
        )
        try:
            result = bus_km.count_driven() if args.events else bus_km.count()
        except (TrimmingError, RuntimeError, ValueError, OSError) as exc:
            logger.error("Counting bus km failed: %s", exc)
            return 1
        print(f"Bus km total: {result.total_km:.3f}")
        print(f"Bus km inside zone: {result.in_zone_km:.3f}")
        return 0

    if not args.output:
        logger.error("--output is required")
        return 2

    try:
        config = trimmer_config_from_env()
        overrides: dict = {}
        if args.method:
            overrides["method"] = parse_method(args.method)
        if args.lines:
            overrides["target_lines"] = parse_line_ids(args.lines)
        if args.keep_empty_lines:
            overrides["remove_empty_lines"] = False
        if args.exclude_first_stop:
            overrides["include_first_stop_within_zone"] = False
        if args.include_first_hub:
            overrides["include_first_hub_in_zone"] = True
        if args.allowable_stops is not None:
            overrides["allowable_stops_within_zone"] = args.allowable_stops
        config = replace(config, **overrides)

        service = ScheduleTrimmingService(
            schedule_repository=schedules,
            zone_repository=zones,
            output_repository=LocalScheduleRepository(path=args.output),
            network_repository=networks,
        )
        service.run(config)
    except (TrimmingError, RuntimeError, ValueError, OSError) as exc:
        logger.error("Trimming failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
