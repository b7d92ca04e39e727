# path: wits-campus-map/app/services/directions.py

from __future__ import annotations

from typing import List, Optional

from app.core.exceptions import InvalidRouteRequestError, VenueNotFoundError
from app.core.logging_config import get_logger
from app.models.campus_models import CampusMap, Venue
from app.models.route_models import BBoxWGS84, Route, RouteRequest, RouteResponse
from app.services.geojson import create_route_geojson
from app.services.route_planner import FallbackStrategy, plan_route
from app.services.venue_registry import find_venue_by_id
from app.utils.geo import bbox_wgs84
from app.utils.polyline import encode_polyline

logger = get_logger(__name__)


PATH_TYPE_PATHWAY = "Campus Pathway"
PATH_TYPE_DIRECT = "Straight line"
DIRECT_ROUTE_NOTE = "For detailed walking directions, please follow visible pathways on campus."


def resolve_venues(request: RouteRequest, campus: CampusMap) -> tuple[Venue, Venue]:
    if request.start_venue_id == request.end_venue_id:
        raise InvalidRouteRequestError(
            "Start and destination cannot be the same.",
            details={"venue_id": request.start_venue_id},
        )

    start = find_venue_by_id(request.start_venue_id, campus.venues)
    if start is None:
        raise VenueNotFoundError(request.start_venue_id, field="start_venue_id")
    end = find_venue_by_id(request.end_venue_id, campus.venues)
    if end is None:
        raise VenueNotFoundError(request.end_venue_id, field="end_venue_id")
    return start, end


def round_half_up(meters: float) -> int:
    # Halves round up, matching the distance shown on the map front end
    return int(meters + 0.5)


def route_steps(route: Route, start: Venue, end: Venue) -> List[str]:
    if route.kind == "direct":
        return [DIRECT_ROUTE_NOTE]
    return [
        f"Start at {start.name}",
        "Follow the highlighted pathway",
        f"Arrive at {end.name}",
    ]


def get_directions(
    route_id: str,
    request: RouteRequest,
    campus: CampusMap,
    fallback: Optional[FallbackStrategy] = None,
) -> RouteResponse:
    start, end = resolve_venues(request, campus)
    route = plan_route(start, end, campus, fallback=fallback)

    path_type = PATH_TYPE_PATHWAY if route.kind == "pathway" else PATH_TYPE_DIRECT
    logger.info(
        "Route %s: %s -> %s, %d points, %.0f m (%s)",
        route_id, start.id, end.id, len(route.points), route.total_distance_m, route.kind,
    )

    return RouteResponse(
        route_id=route_id,
        kind=route.kind,
        path_type=path_type,
        start=start,
        end=end,
        points=route.points,
        total_distance_m=route.total_distance_m,
        distance_rounded_m=round_half_up(route.total_distance_m),
        bbox_wgs84=BBoxWGS84(**bbox_wgs84(route.points)),
        steps=route_steps(route, start, end),
        encoded_polyline=encode_polyline(route.points),
        geojson=create_route_geojson(
            route.points,
            properties={
                "start": start.id,
                "end": end.id,
                "total_distance_m": route.total_distance_m,
            },
        ),
    )
