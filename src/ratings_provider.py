"""
Ratings with a 24h cache and graceful degradation.

Per call, exactly one of:
  cache_hit        fresh entry in the cache, no network
  upstream_success one gateway call, result cached
  stale_fallback   gateway failed, expired entry served
  empty_fallback   gateway failed and nothing was ever cached

fetch_ratings() never raises. A ratings outage must not break a page.
"""

import logging
from dataclasses import dataclass
from typing import Literal

from src.adapters.ports import RatingRecord, RatingsGateway
from src.domain.cache_store import CacheStore
from src.domain.errors import UpstreamFailure

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatingsLookup:
    record: RatingRecord
    outcome: Literal[
        "cache_hit",
        "upstream_success",
        "stale_fallback",
        "empty_fallback",
    ]


class RatingsProvider:

    def __init__(self, gateway: RatingsGateway, cache: CacheStore):
        self._gateway = gateway
        self._cache = cache

    def fetch_ratings(self, place_id: str) -> RatingRecord:
        return self.lookup(place_id).record

    def lookup(self, place_id: str) -> RatingsLookup:
        cached = self._cache.get(place_id)
        if cached is not None:
            log.debug("place=%s cache hit", place_id)
            return RatingsLookup(record=cached, outcome="cache_hit")

        log.info("place=%s cache miss, calling ratings provider", place_id)
        try:
            record = self._gateway.fetch_place_ratings(place_id)
        except UpstreamFailure as exc:
            log.warning("place=%s ratings provider failed: %s", place_id, exc)
        except Exception:
            log.exception("place=%s unexpected error from ratings provider", place_id)
        else:
            self._cache.set(place_id, record)
            return RatingsLookup(record=record, outcome="upstream_success")

        stale = self._cache.get_stale(place_id)
        if stale is not None:
            log.info("place=%s serving expired cache entry", place_id)
            return RatingsLookup(record=stale, outcome="stale_fallback")

        log.warning("place=%s no ratings available, returning empty record", place_id)
        return RatingsLookup(record=RatingRecord.empty(), outcome="empty_fallback")
