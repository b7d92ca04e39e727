# path: wits-campus-map/app/services/venue_registry.py

from __future__ import annotations

from typing import List, Optional, Sequence

from app.models.campus_models import LngLat, Venue
from app.utils.geo import haversine_m


def find_venue_by_id(venue_id: str, venues: Sequence[Venue]) -> Optional[Venue]:
    for venue in venues:
        if venue.id == venue_id:
            return venue
    return None


def find_venue_by_name(name: str, venues: Sequence[Venue]) -> Optional[Venue]:
    # First case-insensitive substring hit, in registry order
    needle = name.lower()
    for venue in venues:
        if needle in venue.name.lower():
            return venue
    return None


def get_venues_in_bounding_box(sw: LngLat, ne: LngLat, venues: Sequence[Venue]) -> List[Venue]:
    return [
        v for v in venues
        if sw[0] <= v.coordinates[0] <= ne[0] and sw[1] <= v.coordinates[1] <= ne[1]
    ]


def distance_to_venue_m(point: LngLat, venue: Venue) -> float:
    return haversine_m(point[0], point[1], venue.coordinates[0], venue.coordinates[1])


def sort_venues_by_distance(point: LngLat, venues: Sequence[Venue]) -> List[Venue]:
    """Venues nearest-first from `point`; ties keep registry order."""
    return sorted(venues, key=lambda v: distance_to_venue_m(point, v))
