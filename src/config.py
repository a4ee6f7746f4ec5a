"""
Runtime settings, read once from environment variables.

    GOOGLE_PLACES_API_KEY      - Places API key (unset: ratings degrade to cache/empty)
    RATINGS_PROVIDER           - "google" or "simulator" (default: google)
    RATINGS_CACHE_TTL_SECONDS  - fresh-read TTL (default: 86400)
    RATINGS_TIMEOUT_SECONDS    - per-request timeout, "0" or "none" for no timeout (default: 5)
    AVAILABILITY_SOURCE        - "synthetic" (default: synthetic)
    HOST, PORT                 - server bind (default: 0.0.0.0, 8000)
    LOG_LEVEL                  - root log level (default: INFO)
"""

import os
from dataclasses import dataclass
from typing import Mapping

from src.domain.cache_store import DEFAULT_TTL_SECONDS


@dataclass(frozen=True)
class Settings:
    google_places_api_key: str | None = None
    ratings_provider: str = "google"
    ratings_cache_ttl_seconds: int = DEFAULT_TTL_SECONDS
    ratings_timeout_seconds: float | None = 5.0
    availability_source: str = "synthetic"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def _timeout(raw: str) -> float | None:
    if raw.strip().lower() in ("", "0", "none"):
        return None
    return float(raw)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        google_places_api_key=env.get("GOOGLE_PLACES_API_KEY") or None,
        ratings_provider=env.get("RATINGS_PROVIDER", "google"),
        ratings_cache_ttl_seconds=int(
            env.get("RATINGS_CACHE_TTL_SECONDS", str(DEFAULT_TTL_SECONDS))
        ),
        ratings_timeout_seconds=_timeout(env.get("RATINGS_TIMEOUT_SECONDS", "5")),
        availability_source=env.get("AVAILABILITY_SOURCE", "synthetic"),
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "8000")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
