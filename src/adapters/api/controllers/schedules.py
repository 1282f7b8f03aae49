from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_default_trimmer_config
from src.adapters.api.schemas.schedules import (
    BusKmRequestSchema,
    BusKmResponseSchema,
    TransitScheduleSchema,
    TrimRequestSchema,
    TrimResponseSchema,
)
from src.adapters.persistence.schedule_codec import (
    network_from_dict,
    schedule_from_dict,
    schedule_to_dict,
    zone_from_geojson,
)
from src.app.services.route_trimming_service import TransitRouteTrimmer
from src.domain.algorithms.bus_km import scheduled_bus_km
from src.domain.algorithms.zone import ZoneIndex
from src.domain.exceptions import MalformedRouteError, NotFoundError
from src.domain.models import TrimmerConfig, TrimMethod

router = APIRouter(prefix="/schedules", tags=["schedules"])


def _zone_index(raw: dict) -> ZoneIndex:
    try:
        return ZoneIndex.from_geometry(zone_from_geojson(raw))
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        raise HTTPException(status_code=422, detail=f"Invalid zone: {exc}") from exc


@router.post("/trim", response_model=TrimResponseSchema)
def trim_schedule(
    req: TrimRequestSchema,
    defaults: TrimmerConfig = Depends(get_default_trimmer_config),
) -> TrimResponseSchema:
    opts = req.options
    overrides = {
        name: value
        for name, value in (
            ("remove_empty_lines", opts.remove_empty_lines),
            ("include_first_stop_within_zone", opts.include_first_stop_within_zone),
            ("include_first_hub_in_zone", opts.include_first_hub_in_zone),
            ("allowable_stops_within_zone", opts.allowable_stops_within_zone),
        )
        if value is not None
    }
    if opts.method is not None:
        overrides["method"] = TrimMethod(opts.method)
    if opts.target_lines is not None:
        overrides["target_lines"] = frozenset(opts.target_lines)
    config = replace(defaults, **overrides)

    zone = _zone_index(req.zone)
    try:
        schedule = schedule_from_dict(req.schedule.model_dump())
        trimmer = TransitRouteTrimmer(schedule=schedule, zone=zone, config=config)
        result = trimmer.modify_transit_lines()
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except MalformedRouteError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return TrimResponseSchema(
        schedule=TransitScheduleSchema.model_validate(schedule_to_dict(result)),
        stops_in_zone=sorted(trimmer.stops_in_zone),
    )


@router.post("/bus-km", response_model=BusKmResponseSchema)
def count_bus_km(req: BusKmRequestSchema) -> BusKmResponseSchema:
    zone = _zone_index(req.zone)
    try:
        schedule = schedule_from_dict(req.schedule.model_dump())
    except MalformedRouteError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    network = network_from_dict(req.network.model_dump())

    result = scheduled_bus_km(schedule, network, zone)
    return BusKmResponseSchema(total_km=result.total_km, in_zone_km=result.in_zone_km)
