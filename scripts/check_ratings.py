"""
Fetch ratings for one Google place through the cached provider and print them.

Calls the provider twice to show the second read is served from the cache.

Usage:
    source .env && python scripts/check_ratings.py ChIJ96WqKniB3YgRVVsUtlDsTL0
"""

import json
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.adapters.factory import create_ratings_gateway
from src.adapters.memory_cache_store import InMemoryCacheStore
from src.config import load_settings
from src.ratings_provider import RatingsProvider

logging.basicConfig(level=logging.INFO, format="%(levelname)-7s  %(message)s")


def main() -> None:
    if len(sys.argv) != 2:
        print("Usage: python scripts/check_ratings.py <place_id>", file=sys.stderr)
        sys.exit(1)
    place_id = sys.argv[1]

    settings = load_settings()
    cache = InMemoryCacheStore(ttl_seconds=settings.ratings_cache_ttl_seconds)
    provider = RatingsProvider(create_ratings_gateway(settings), cache)

    first = provider.lookup(place_id)
    second = provider.lookup(place_id)

    print(f"first call:  {first.outcome}")
    print(f"second call: {second.outcome}")
    print(json.dumps(first.record.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
