from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

TrimMethodName = Literal[
    "DeleteRoutesEntirelyInsideZone",
    "TrimEnds",
    "SkipStopsWithinZone",
    "SplitRoute",
]


class StopFacilitySchema(BaseModel):
    id: str
    x: float | None = None
    y: float | None = None
    link_id: str | None = None
    name: str | None = None
    attributes: dict[str, Any] = {}


class RouteStopSchema(BaseModel):
    facility_id: str
    arrival_offset_s: float | None = None
    departure_offset_s: float | None = None
    await_departure: bool = False


class DepartureSchema(BaseModel):
    id: str
    departure_time_s: float
    vehicle_id: str | None = None


class TransitRouteSchema(BaseModel):
    id: str
    transport_mode: str = "bus"
    link_ids: list[str] = []
    stops: list[RouteStopSchema] = []
    departures: list[DepartureSchema] = []


class TransitLineSchema(BaseModel):
    id: str
    routes: list[TransitRouteSchema] = []


class TransitScheduleSchema(BaseModel):
    facilities: list[StopFacilitySchema] = []
    lines: list[TransitLineSchema] = []


class LinkSchema(BaseModel):
    id: str
    from_node: str
    to_node: str
    length_m: float = Field(0.0, ge=0.0)
    x: float | None = None
    y: float | None = None


class NetworkSchema(BaseModel):
    links: list[LinkSchema] = []


class TrimOptionsSchema(BaseModel):
    """Unset options fall back to the server's configured defaults."""

    method: TrimMethodName | None = None
    target_lines: list[str] | None = None
    remove_empty_lines: bool | None = None
    include_first_stop_within_zone: bool | None = None
    include_first_hub_in_zone: bool | None = None
    allowable_stops_within_zone: int | None = Field(None, ge=0)


class TrimRequestSchema(BaseModel):
    schedule: TransitScheduleSchema
    zone: dict[str, Any]  # GeoJSON geometry, Feature or FeatureCollection
    options: TrimOptionsSchema = TrimOptionsSchema()


class TrimResponseSchema(BaseModel):
    schedule: TransitScheduleSchema
    stops_in_zone: list[str]


class BusKmRequestSchema(BaseModel):
    schedule: TransitScheduleSchema
    network: NetworkSchema
    zone: dict[str, Any]


class BusKmResponseSchema(BaseModel):
    total_km: float
    in_zone_km: float
