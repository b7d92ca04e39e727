# path: wits-campus-map/app/api/deps.py

from __future__ import annotations

from functools import lru_cache

from app.core.config import settings
from app.data.campus import load_campus_map
from app.models.campus_models import CampusMap


@lru_cache(maxsize=1)
def get_campus_map() -> CampusMap:
    # Read-only after first load; override in tests via app.dependency_overrides
    return load_campus_map(settings.CAMPUS_DATA_PATH)
