# path: wits-campus-map/app/main.py

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_campus_map
from app.api.routes.pathways import router as pathways_router
from app.api.routes.routes import router as routes_router
from app.api.routes.venues import router as venues_router
from app.core.config import settings
from app.core.exceptions import CampusMapError
from app.core.logging_config import generate_request_id, get_logger, set_request_id, setup_logging

setup_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Bad campus data fails startup, not the first request
    campus = get_campus_map()
    logger.info(
        "Campus map ready: %d venues, %d pathways", len(campus.venues), len(campus.pathways)
    )
    yield


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)


@app.middleware("http")
async def request_context(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or generate_request_id()
    set_request_id(request_id)
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "HTTP %s %s - %d (%.2fms)",
        request.method, request.url.path, response.status_code, duration_ms,
        extra={"http_status": response.status_code, "duration_ms": duration_ms},
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(CampusMapError)
async def campus_map_error_handler(request: Request, exc: CampusMapError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Unhandled campus map error: %s", exc.message)
    else:
        logger.warning("%s: %s", exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok", "app": settings.APP_NAME}


app.include_router(venues_router)
app.include_router(pathways_router)
app.include_router(routes_router)
