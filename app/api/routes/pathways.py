# path: wits-campus-map/app/api/routes/pathways.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_campus_map
from app.models.campus_models import CampusMap, Pathway
from app.models.route_models import FeatureCollection, NearestPathwayPoint
from app.services.geojson import create_pathways_geojson
from app.services.route_planner import find_closest_pathway, find_nearest_pathway_point
from app.utils.geo import haversine_m

router = APIRouter(prefix="/pathways", tags=["pathways"])


@router.get("", response_model=List[Pathway])
def list_pathways(campus: CampusMap = Depends(get_campus_map)) -> List[Pathway]:
    return list(campus.pathways)


@router.get("/geojson", response_model=FeatureCollection)
def pathways_geojson(campus: CampusMap = Depends(get_campus_map)) -> FeatureCollection:
    return create_pathways_geojson(campus.pathways)


@router.get("/nearest", response_model=NearestPathwayPoint)
def nearest_pathway_point(
    lng: float = Query(ge=-180, le=180),
    lat: float = Query(ge=-90, le=90),
    campus: CampusMap = Depends(get_campus_map),
) -> NearestPathwayPoint:
    query = (lng, lat)
    snapped = find_nearest_pathway_point(query, campus.pathways)
    pathway = find_closest_pathway(query, campus.pathways)
    return NearestPathwayPoint(
        query=query,
        snapped=snapped,
        pathway_name=pathway.name if pathway is not None else None,
        distance_m=haversine_m(lng, lat, snapped[0], snapped[1]),
    )
