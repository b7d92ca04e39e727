# path: wits-campus-map/app/api/routes/venues.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_campus_map
from app.core.config import Settings, get_settings
from app.core.exceptions import VenueNotFoundError
from app.models.campus_models import CampusMap, Venue
from app.models.route_models import FeatureCollection, VenueDistance
from app.services.geojson import create_venues_geojson
from app.services.venue_registry import (
    distance_to_venue_m,
    find_venue_by_id,
    find_venue_by_name,
    get_venues_in_bounding_box,
    sort_venues_by_distance,
)

router = APIRouter(prefix="/venues", tags=["venues"])


@router.get("", response_model=List[Venue])
def list_venues(
    q: Optional[str] = Query(default=None, min_length=1, description="Case-insensitive name search"),
    campus: CampusMap = Depends(get_campus_map),
) -> List[Venue]:
    if q is None:
        return list(campus.venues)
    venue = find_venue_by_name(q, campus.venues)
    if venue is None:
        raise VenueNotFoundError(q, field="name")
    return [venue]


@router.get("/geojson", response_model=FeatureCollection)
def venues_geojson(campus: CampusMap = Depends(get_campus_map)) -> FeatureCollection:
    return create_venues_geojson(campus.venues)


@router.get("/nearby", response_model=List[VenueDistance])
def nearby_venues(
    lng: float = Query(ge=-180, le=180),
    lat: float = Query(ge=-90, le=90),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    campus: CampusMap = Depends(get_campus_map),
    config: Settings = Depends(get_settings),
) -> List[VenueDistance]:
    point = (lng, lat)
    ordered = sort_venues_by_distance(point, campus.venues)[: limit or config.NEARBY_DEFAULT_LIMIT]
    return [VenueDistance(venue=v, distance_m=distance_to_venue_m(point, v)) for v in ordered]


@router.get("/within", response_model=List[Venue])
def venues_within(
    sw_lng: float = Query(ge=-180, le=180),
    sw_lat: float = Query(ge=-90, le=90),
    ne_lng: float = Query(ge=-180, le=180),
    ne_lat: float = Query(ge=-90, le=90),
    campus: CampusMap = Depends(get_campus_map),
) -> List[Venue]:
    return get_venues_in_bounding_box((sw_lng, sw_lat), (ne_lng, ne_lat), campus.venues)


@router.get("/{venue_id}", response_model=Venue)
def get_venue(venue_id: str, campus: CampusMap = Depends(get_campus_map)) -> Venue:
    venue = find_venue_by_id(venue_id, campus.venues)
    if venue is None:
        raise VenueNotFoundError(venue_id)
    return venue
