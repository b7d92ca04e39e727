# path: wits-campus-map/app/models/route_models.py

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator

from app.models.campus_models import LngLat, Venue


RouteKind = Literal["pathway", "direct"]


class RouteRequest(BaseModel):
    start_venue_id: str = Field(min_length=1)
    end_venue_id: str = Field(min_length=1)


class Route(BaseModel):
    """Ephemeral route between two venues; recomputed on every request."""

    kind: RouteKind
    points: List[LngLat]
    total_distance_m: float = Field(ge=0)

    @model_validator(mode="after")
    def validate_points(self):
        if len(self.points) < 2:
            raise ValueError("Route must have at least 2 points")
        return self


class BBoxWGS84(BaseModel):
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[LngLat]


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: LngLat


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: Dict[str, Any] = Field(default_factory=dict)
    geometry: Union[PointGeometry, LineStringGeometry] = Field(discriminator="type")


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature]


class RouteResponse(BaseModel):
    route_id: str
    kind: RouteKind
    path_type: str
    start: Venue
    end: Venue
    points: List[LngLat]
    total_distance_m: float = Field(ge=0)
    distance_rounded_m: int = Field(ge=0)
    bbox_wgs84: BBoxWGS84
    steps: List[str]
    encoded_polyline: str
    geojson: Feature


class VenueDistance(BaseModel):
    venue: Venue
    distance_m: float = Field(ge=0)


class NearestPathwayPoint(BaseModel):
    query: LngLat
    snapped: LngLat
    pathway_name: Optional[str] = None
    distance_m: float = Field(ge=0)
