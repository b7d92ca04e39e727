# path: wits-campus-map/app/api/routes/routes.py

from __future__ import annotations

from fastapi import APIRouter, Depends
import uuid

from app.api.deps import get_campus_map
from app.models.campus_models import CampusMap
from app.models.route_models import RouteRequest, RouteResponse
from app.services.directions import get_directions

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("", response_model=RouteResponse)
def create_route(
    request: RouteRequest, campus: CampusMap = Depends(get_campus_map)
) -> RouteResponse:
    # Routes are ephemeral: computed per request, never stored.
    route_id = str(uuid.uuid4())
    return get_directions(route_id=route_id, request=request, campus=campus)
