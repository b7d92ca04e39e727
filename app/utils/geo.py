# path: wits-campus-map/app/utils/geo.py

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple
import math


LngLat = Tuple[float, float]

EARTH_RADIUS_M = 6371000.0


def bbox_wgs84(points_lonlat: Iterable[Sequence[float]]) -> Dict[str, float]:
    points = list(points_lonlat)
    lons = [p[0] for p in points]
    lats = [p[1] for p in points]
    return {
        "min_lat": min(lats),
        "min_lon": min(lons),
        "max_lat": max(lats),
        "max_lon": max(lons),
    }


def haversine_m(a_lon: float, a_lat: float, b_lon: float, b_lat: float) -> float:
    # Great-circle distance on a sphere; plenty for a campus-sized map.
    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dphi = math.radians(b_lat - a_lat)
    dlmb = math.radians(b_lon - a_lon)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    # Rounding can push s just past 1 for near-antipodal points
    s = min(1.0, s)
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(s), math.sqrt(1 - s))


def polyline_length_m(points_lonlat: Sequence[Sequence[float]]) -> float:
    total = 0.0
    for i in range(1, len(points_lonlat)):
        a_lon, a_lat = points_lonlat[i - 1]
        b_lon, b_lat = points_lonlat[i]
        total += haversine_m(a_lon, a_lat, b_lon, b_lat)
    return total


def closest_point_on_segment(
    point: Sequence[float], seg_start: Sequence[float], seg_end: Sequence[float]
) -> LngLat:
    """
    Orthogonal projection of `point` onto the segment, clamped to the endpoints.

    Works in plain lng/lat space (planar), which is what the pathway snapping
    relies on. A zero-length segment projects onto its start.
    """
    x, y = point[0], point[1]
    x1, y1 = seg_start[0], seg_start[1]
    x2, y2 = seg_end[0], seg_end[1]

    l2 = (x2 - x1) ** 2 + (y2 - y1) ** 2
    if l2 == 0:
        return (x1, y1)

    t = ((x - x1) * (x2 - x1) + (y - y1) * (y2 - y1)) / l2
    t = max(0.0, min(1.0, t))
    return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def line_intersection(
    p1: Sequence[float], p2: Sequence[float], p3: Sequence[float], p4: Sequence[float]
) -> Optional[LngLat]:
    """
    Intersection of segments p1-p2 and p3-p4, or None.

    None when the segments are parallel (zero determinant) or when the
    crossing of their infinite lines falls outside either segment.
    """
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]
    x4, y4 = p4[0], p4[1]

    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denominator == 0:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator

    if 0 <= ua <= 1 and 0 <= ub <= 1:
        return (x1 + ua * (x2 - x1), y1 + ua * (y2 - y1))
    return None
