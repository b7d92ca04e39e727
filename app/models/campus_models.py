# path: wits-campus-map/app/models/campus_models.py

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


LngLat = Tuple[float, float]


def check_lnglat(coord: LngLat) -> LngLat:
    lon, lat = coord
    if not (-180.0 <= lon <= 180.0):
        raise ValueError(f"lon out of range [-180,180]: {lon}")
    if not (-90.0 <= lat <= 90.0):
        raise ValueError(f"lat out of range [-90,90]: {lat}")
    return coord


class Venue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    coordinates: LngLat  # (lon, lat)

    @field_validator("coordinates")
    @classmethod
    def validate_coords(cls, coords: LngLat):
        return check_lnglat(coords)


class Pathway(BaseModel):
    """A named walkable polyline. Compared by identity when routing."""

    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: Tuple[LngLat, ...]

    @field_validator("coordinates")
    @classmethod
    def validate_coords(cls, coords: Tuple[LngLat, ...]):
        for c in coords:
            check_lnglat(c)
        return coords


class CampusMap(BaseModel):
    """Static registry handed to lookups and routing instead of module globals."""

    model_config = ConfigDict(frozen=True)

    center: LngLat
    venues: Tuple[Venue, ...] = ()
    pathways: Tuple[Pathway, ...] = ()

    @field_validator("center")
    @classmethod
    def validate_center(cls, center: LngLat):
        return check_lnglat(center)

    @model_validator(mode="after")
    def unique_venue_ids(self):
        seen = set()
        for venue in self.venues:
            if venue.id in seen:
                raise ValueError(f"Duplicate venue id: {venue.id}")
            seen.add(venue.id)
        return self
