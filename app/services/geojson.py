# path: wits-campus-map/app/services/geojson.py

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from app.models.campus_models import Pathway, Venue
from app.models.route_models import (
    Feature,
    FeatureCollection,
    LineStringGeometry,
    PointGeometry,
)


def create_route_geojson(
    coordinates: Sequence[Sequence[float]], properties: Optional[Dict[str, Any]] = None
) -> Feature:
    return Feature(
        properties=dict(properties or {}),
        geometry=LineStringGeometry(coordinates=[tuple(c) for c in coordinates]),
    )


def create_pathways_geojson(pathways: Sequence[Pathway]) -> FeatureCollection:
    return FeatureCollection(
        features=[
            Feature(
                properties={"name": p.name},
                geometry=LineStringGeometry(coordinates=list(p.coordinates)),
            )
            for p in pathways
        ]
    )


def create_venues_geojson(venues: Sequence[Venue]) -> FeatureCollection:
    return FeatureCollection(
        features=[
            Feature(
                properties={"id": v.id, "name": v.name},
                geometry=PointGeometry(coordinates=v.coordinates),
            )
            for v in venues
        ]
    )
