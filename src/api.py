"""
HTTP surface: two read-only GET endpoints open to any origin.

    GET /api/availability?entityId=...&checkIn=YYYY-MM-DD[&checkOut=...][&label=...]
    GET /api/google-ratings?placeId=...
    GET /api/health

Handlers are plain functions, so the server runs each request on its
thread pool; the ratings cache is the only state they share.
"""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapters.factory import create_availability_gateway, create_ratings_gateway
from src.adapters.memory_cache_store import InMemoryCacheStore
from src.adapters.ports import AvailabilityGateway
from src.config import Settings, load_settings
from src.domain.errors import QueryValidationError
from src.domain.stay_dates import parse_stay
from src.ratings_provider import RatingsProvider

log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "Content-Type",
}

PREFLIGHT_PATHS = ("/api/availability", "/api/google-ratings")


def _single(request: Request, name: str) -> str | None:
    """The parameter's value if it was sent exactly once and is non-empty."""
    values = request.query_params.getlist(name)
    if len(values) != 1 or not values[0].strip():
        return None
    return values[0]


def create_app(
    settings: Settings | None = None,
    ratings: RatingsProvider | None = None,
    availability: AvailabilityGateway | None = None,
) -> FastAPI:
    """
    Build the application. Anything not passed in is created from settings,
    so every app instance owns a fresh, empty ratings cache.
    """
    settings = settings or load_settings()
    if ratings is None:
        ratings = RatingsProvider(
            gateway=create_ratings_gateway(settings),
            cache=InMemoryCacheStore(ttl_seconds=settings.ratings_cache_ttl_seconds),
        )
    if availability is None:
        availability = create_availability_gateway(settings)

    app = FastAPI(title="Campground operational data", docs_url=None, redoc_url=None)
    _configure_middleware(app)
    _handle_exceptions(app)

    @app.get("/api/availability")
    def get_availability(request: Request):
        entity_id = _single(request, "entityId")
        if entity_id is None:
            raise QueryValidationError(
                "Missing or invalid entityId parameter",
                "Please provide a valid entity ID as a query parameter: ?entityId=...",
            )
        check_in, check_out = parse_stay(
            _single(request, "checkIn"),
            _single(request, "checkOut"),
        )
        labels = [label for label in request.query_params.getlist("label") if label.strip()]

        record = availability.get_availability(
            entity_id, labels=labels or None, check_in=check_in, check_out=check_out
        )
        return record.to_dict()

    @app.get("/api/google-ratings")
    def get_google_ratings(request: Request):
        place_id = _single(request, "placeId")
        if place_id is None:
            raise QueryValidationError(
                "Missing or invalid placeId parameter",
                "Please provide a valid Google Place ID as a query parameter: ?placeId=...",
            )
        return ratings.fetch_ratings(place_id).to_dict()

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    return app


def _configure_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def cors_and_timing(request: Request, call_next):
        start = time.time()
        if request.method == "OPTIONS" and request.url.path in PREFLIGHT_PATHS:
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
        else:
            try:
                response = await call_next(request)
            except Exception as exc:
                log.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
                response = JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"error": "Internal server error"},
                )
        response.headers.update(CORS_HEADERS)
        log.info(
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.time() - start) * 1000,
        )
        return response


def _handle_exceptions(app: FastAPI) -> None:

    @app.exception_handler(QueryValidationError)
    async def validation_error_handler(request: Request, exc: QueryValidationError):
        log.info("rejected %s: %s", request.url.path, exc.error)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            content = {"error": "Method not allowed"}
        else:
            content = {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

