# path: wits-campus-map/app/utils/validation.py

from __future__ import annotations

from numbers import Real
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_valid_coordinate(coordinate: Any) -> bool:
    # Advisory only: geometry helpers never call this themselves.
    if not isinstance(coordinate, (list, tuple)) or len(coordinate) != 2:
        return False
    lng, lat = coordinate
    if not (_is_number(lng) and _is_number(lat)):
        return False
    return -180 <= lng <= 180 and -90 <= lat <= 90


def is_valid_venue(venue: Any) -> bool:
    if venue is None:
        return False
    if isinstance(venue, dict):
        venue_id = venue.get("id")
        name = venue.get("name")
        coordinates = venue.get("coordinates")
    else:
        venue_id = getattr(venue, "id", None)
        name = getattr(venue, "name", None)
        coordinates = getattr(venue, "coordinates", None)
    return (
        isinstance(venue_id, str)
        and isinstance(name, str)
        and is_valid_coordinate(coordinates)
    )
