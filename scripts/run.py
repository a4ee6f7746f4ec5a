"""
Local server for the campground operational-data endpoints.

Usage:
    source .env && python scripts/run.py

Environment variables (all optional):
    GOOGLE_PLACES_API_KEY      - Places API key (unset: ratings degrade to cache/empty)
    RATINGS_PROVIDER           - "google" or "simulator" (default: google)
    RATINGS_CACHE_TTL_SECONDS  - fresh-read TTL (default: 86400)
    RATINGS_TIMEOUT_SECONDS    - per-request timeout (default: 5)
    AVAILABILITY_SOURCE        - "synthetic" (default: synthetic)
    HOST, PORT                 - bind address (default: 0.0.0.0:8000)
    LOG_LEVEL                  - default: INFO
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from src.api import create_app
from src.config import load_settings

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def main() -> None:
    if settings.ratings_provider == "google" and not settings.google_places_api_key:
        log.warning("GOOGLE_PLACES_API_KEY is not set — ratings will be empty until it is")

    app = create_app(settings)
    log.info(
        "Server starting — %s:%d  ratings=%s  availability=%s  cache_ttl=%ds",
        settings.host,
        settings.port,
        settings.ratings_provider,
        settings.availability_source,
        settings.ratings_cache_ttl_seconds,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
