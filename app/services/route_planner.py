# path: wits-campus-map/app/services/route_planner.py

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from app.core.logging_config import get_logger
from app.data.campus import CAMPUS_CENTER
from app.models.campus_models import CampusMap, LngLat, Pathway, Venue
from app.models.route_models import Route
from app.utils.geo import (
    closest_point_on_segment,
    haversine_m,
    line_intersection,
    polyline_length_m,
)

logger = get_logger(__name__)


# (start, end, start_pathway, end_pathway) -> connecting points
FallbackStrategy = Callable[[LngLat, LngLat, Pathway, Pathway], List[LngLat]]


def via_campus_center(center: LngLat) -> FallbackStrategy:
    """
    Bridge two non-crossing pathways through one fixed point.

    Geometrically arbitrary but deterministic; swap in a real graph search
    by passing a different strategy to find_path_through_pathways.
    """
    def _bridge(start: LngLat, end: LngLat, start_pathway: Pathway, end_pathway: Pathway) -> List[LngLat]:
        return [start, center, end]

    return _bridge


default_fallback = via_campus_center(CAMPUS_CENTER)


def find_nearest_pathway_point(coord: LngLat, pathways: Sequence[Pathway]) -> LngLat:
    nearest: Optional[LngLat] = None
    min_dist = float("inf")

    for pathway in pathways:
        pts = pathway.coordinates
        for i in range(len(pts) - 1):
            closest = closest_point_on_segment(coord, pts[i], pts[i + 1])
            d = haversine_m(coord[0], coord[1], closest[0], closest[1])
            if d < min_dist:
                min_dist = d
                nearest = closest

    # No segments at all: leave the coordinate where it is
    return nearest if nearest is not None else coord


def find_closest_pathway(point: LngLat, pathways: Sequence[Pathway]) -> Optional[Pathway]:
    # Nearest *vertex*, not nearest segment; can disagree with
    # find_nearest_pathway_point close to pathway ends.
    closest: Optional[Pathway] = None
    min_dist = float("inf")

    for pathway in pathways:
        for lon, lat in pathway.coordinates:
            d = haversine_m(point[0], point[1], lon, lat)
            if d < min_dist:
                min_dist = d
                closest = pathway

    return closest


def find_pathway_intersection(first: Pathway, second: Pathway) -> Optional[LngLat]:
    a = first.coordinates
    b = second.coordinates
    for i in range(len(a) - 1):
        for j in range(len(b) - 1):
            hit = line_intersection(a[i], a[i + 1], b[j], b[j + 1])
            if hit is not None:
                return hit
    return None


def find_path_through_pathways(
    start: LngLat,
    end: LngLat,
    pathways: Sequence[Pathway],
    fallback: Optional[FallbackStrategy] = None,
) -> List[LngLat]:
    """
    Approximate path between two points over the pathway network.

    Returns [] when there are no pathways (caller draws a straight line),
    [start, end] when both ends share a pathway, [start, crossing, end] when
    their pathways cross, and otherwise whatever `fallback` produces
    (by default a detour through the Wits campus center).
    """
    fallback = fallback or default_fallback
    start_pathway = find_closest_pathway(start, pathways)
    end_pathway = find_closest_pathway(end, pathways)

    if start_pathway is None or end_pathway is None:
        return []

    if start_pathway is end_pathway:
        return [start, end]

    crossing = find_pathway_intersection(start_pathway, end_pathway)
    if crossing is not None:
        return [start, crossing, end]

    logger.debug(
        "No crossing between %r and %r; using fallback connector",
        start_pathway.name, end_pathway.name,
    )
    return fallback(start, end, start_pathway, end_pathway)


def plan_route(
    start_venue: Venue,
    end_venue: Venue,
    campus: CampusMap,
    fallback: Optional[FallbackStrategy] = None,
) -> Route:
    fallback = fallback or via_campus_center(campus.center)

    start_point = find_nearest_pathway_point(start_venue.coordinates, campus.pathways)
    end_point = find_nearest_pathway_point(end_venue.coordinates, campus.pathways)

    path = find_path_through_pathways(start_point, end_point, campus.pathways, fallback)

    if not path:
        logger.info(
            "No pathway data; straight line from %s to %s", start_venue.id, end_venue.id
        )
        points = [start_venue.coordinates, end_venue.coordinates]
        kind = "direct"
    else:
        points = [start_venue.coordinates, *path, end_venue.coordinates]
        kind = "pathway"

    return Route(kind=kind, points=points, total_distance_m=polyline_length_m(points))
