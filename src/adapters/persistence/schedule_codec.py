from __future__ import annotations

from typing import Any, Mapping

from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from src.domain.exceptions import MalformedRouteError
from src.domain.models import (
    Coord,
    Departure,
    Link,
    LinkLeaveEvent,
    Network,
    TransitLine,
    TransitRoute,
    TransitRouteStop,
    TransitSchedule,
    TransitStopFacility,
    VehicleLeavesTrafficEvent,
)

LEFT_LINK = "left link"
VEHICLE_LEAVES_TRAFFIC = "vehicle leaves traffic"


def _opt_float(raw: Any) -> float | None:
    if raw is None or raw == "":
        return None
    return float(raw)


def _coord(row: Mapping[str, Any]) -> Coord | None:
    try:
        x = _opt_float(row.get("x"))
        y = _opt_float(row.get("y"))
    except (TypeError, ValueError):
        return None
    if x is None or y is None:
        return None
    return Coord(x=x, y=y)


def facility_from_dict(row: Mapping[str, Any]) -> TransitStopFacility:
    return TransitStopFacility(
        id=str(row["id"]),
        coord=_coord(row),
        link_id=(str(row["link_id"]) if row.get("link_id") is not None else None),
        name=row.get("name"),
        attributes=dict(row.get("attributes") or {}),
    )


def route_from_dict(
    row: Mapping[str, Any], facilities: Mapping[str, TransitStopFacility]
) -> TransitRoute:
    route_id = str(row["id"])
    stops: list[TransitRouteStop] = []
    for stop in row.get("stops") or ():
        facility_id = str(stop["facility_id"])
        facility = facilities.get(facility_id)
        if facility is None:
            raise MalformedRouteError(
                f"Route {route_id} references unknown stop facility {facility_id}"
            )
        stops.append(
            TransitRouteStop(
                facility=facility,
                arrival_offset_s=_opt_float(stop.get("arrival_offset_s")),
                departure_offset_s=_opt_float(stop.get("departure_offset_s")),
                await_departure=bool(stop.get("await_departure", False)),
            )
        )

    departures = tuple(
        Departure(
            id=str(dep["id"]),
            departure_time_s=float(dep["departure_time_s"]),
            vehicle_id=dep.get("vehicle_id"),
        )
        for dep in row.get("departures") or ()
    )

    return TransitRoute(
        id=route_id,
        stops=tuple(stops),
        link_ids=tuple(str(link_id) for link_id in row.get("link_ids") or ()),
        transport_mode=str(row.get("transport_mode") or "bus"),
        departures=departures,
    )


def schedule_from_dict(data: Mapping[str, Any]) -> TransitSchedule:
    facilities: dict[str, TransitStopFacility] = {}
    for row in data.get("facilities") or ():
        facility = facility_from_dict(row)
        facilities[facility.id] = facility

    lines: dict[str, TransitLine] = {}
    for line_row in data.get("lines") or ():
        line_id = str(line_row["id"])
        routes: dict[str, TransitRoute] = {}
        for route_row in line_row.get("routes") or ():
            route = route_from_dict(route_row, facilities)
            routes[route.id] = route
        lines[line_id] = TransitLine(id=line_id, routes=routes)

    return TransitSchedule(lines=lines, facilities=facilities)


def schedule_to_dict(schedule: TransitSchedule) -> dict[str, Any]:
    return {
        "facilities": [
            {
                "id": f.id,
                "x": f.coord.x if f.coord else None,
                "y": f.coord.y if f.coord else None,
                "link_id": f.link_id,
                "name": f.name,
                "attributes": dict(f.attributes),
            }
            for f in schedule.facilities.values()
        ],
        "lines": [
            {
                "id": line.id,
                "routes": [
                    {
                        "id": route.id,
                        "transport_mode": route.transport_mode,
                        "link_ids": list(route.link_ids),
                        "stops": [
                            {
                                "facility_id": stop.facility.id,
                                "arrival_offset_s": stop.arrival_offset_s,
                                "departure_offset_s": stop.departure_offset_s,
                                "await_departure": stop.await_departure,
                            }
                            for stop in route.stops
                        ],
                        "departures": [
                            {
                                "id": dep.id,
                                "departure_time_s": dep.departure_time_s,
                                "vehicle_id": dep.vehicle_id,
                            }
                            for dep in route.departures
                        ],
                    }
                    for route in line.routes.values()
                ],
            }
            for line in schedule.lines.values()
        ],
    }


def network_from_dict(data: Mapping[str, Any]) -> Network:
    links: dict[str, Link] = {}
    for row in data.get("links") or ():
        link = Link(
            id=str(row["id"]),
            from_node=str(row["from_node"]),
            to_node=str(row["to_node"]),
            length_m=float(row.get("length_m") or 0.0),
            coord=_coord(row),
        )
        links[link.id] = link
    return Network(links=links)


def zone_from_geojson(data: Mapping[str, Any]) -> BaseGeometry:
    """Geometry of a GeoJSON Geometry, Feature or FeatureCollection.

    Multiple features are dissolved into a single geometry.
    """

    kind = data.get("type")
    if kind == "FeatureCollection":
        geoms = [shape(f["geometry"]) for f in data.get("features") or () if f.get("geometry")]
        if not geoms:
            raise ValueError("Zone FeatureCollection contains no geometries")
        return unary_union(geoms)
    if kind == "Feature":
        if not data.get("geometry"):
            raise ValueError("Zone Feature has no geometry")
        return shape(data["geometry"])
    return shape(data)


def zone_to_geojson(geometry: BaseGeometry) -> dict[str, Any]:
    return dict(mapping(geometry))


def vehicle_types_from_dict(data: Mapping[str, Any]) -> dict[str, str]:
    return {str(row["id"]): str(row["type"]) for row in data.get("vehicles") or ()}


def events_from_dict(
    data: Mapping[str, Any],
) -> list[LinkLeaveEvent | VehicleLeavesTrafficEvent]:
    """Link-leave and vehicle-leaves-traffic events; other event types are skipped."""

    events: list[LinkLeaveEvent | VehicleLeavesTrafficEvent] = []
    for row in data.get("events") or ():
        kind = row.get("type")
        if kind == LEFT_LINK:
            cls = LinkLeaveEvent
        elif kind == VEHICLE_LEAVES_TRAFFIC:
            cls = VehicleLeavesTrafficEvent
        else:
            continue
        events.append(
            cls(
                time_s=float(row["time"]),
                link_id=str(row["link"]),
                vehicle_id=str(row["vehicle"]),
            )
        )
    return events
