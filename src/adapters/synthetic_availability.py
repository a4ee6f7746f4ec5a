"""
SyntheticAvailabilityGateway — stands in for the PMS until it is integrated.

Every value is derived from the entity id, so the same campground always
shows the same site types, prices and availability. No network, no cache.

Randomness comes from splitmix64 keyed by (seed, offset): the seed is the
sum of the entity id's code points, the offset separates independent draws.
"""

from datetime import date
from typing import Callable

from .ports import AvailabilityGateway, AvailabilityRecord, SiteType
from src.domain.stay_dates import resolve_stay

SITE_TYPE_POOL = (
    "RV Site (Full Hookup)",
    "RV Site (Water & Electric)",
    "Tent Site",
    "Cabin",
    "Glamping Tent",
    "RV Site (Electric Only)",
    "Primitive Camping",
)

_MASK64 = (1 << 64) - 1

# Offset bases for template mode. Each stream gets its own range so no
# two draws share an input.
_PICK_OFFSET = 1_000
_PRICE_OFFSET = 2_000
_AVAILABLE_OFFSET = 3_000

# A draw on [0, 100] above this is "available" (~70%).
_AVAILABLE_THRESHOLD = 30


def entity_seed(entity_id: str) -> int:
    return sum(ord(c) for c in entity_id)


def splitmix64(x: int) -> int:
    """One splitmix64 output for input x (Steele, Lea & Flood 2014)."""
    z = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return z ^ (z >> 31)


def draw(seed: int, lo: int, hi: int, offset: int = 0) -> int:
    """Deterministic integer in [lo, hi] for (seed, offset)."""
    span = hi - lo + 1
    return lo + ((splitmix64(seed + offset) * span) >> 64)


class SyntheticAvailabilityGateway(AvailabilityGateway):
    """
    Two modes:
      - template mode (no labels): 3-5 distinct names from SITE_TYPE_POOL
      - label mode: one entry per label from the content item, in order
    """

    def __init__(
        self,
        pool: tuple[str, ...] = SITE_TYPE_POOL,
        today: Callable[[], date] = date.today,
    ):
        self._pool = pool
        self._today = today

    def get_availability(
        self,
        entity_id: str,
        labels: list[str] | None = None,
        check_in: date | None = None,
        check_out: date | None = None,
    ) -> AvailabilityRecord:
        seed = entity_seed(entity_id)
        if labels:
            site_types = self._from_labels(seed, labels)
        else:
            site_types = self._from_template(seed)

        check_in, check_out = resolve_stay(check_in or self._today(), check_out)
        return AvailabilityRecord(
            site_types=tuple(site_types),
            check_in=check_in,
            check_out=check_out,
        )

    def _from_labels(self, seed: int, labels: list[str]) -> list[SiteType]:
        return [
            SiteType(
                name=label,
                price=draw(seed, 40, 150, offset=index * 100),
                available=draw(seed, 0, 100, offset=index * 200) > _AVAILABLE_THRESHOLD,
            )
            for index, label in enumerate(labels)
        ]

    def _from_template(self, seed: int) -> list[SiteType]:
        count = draw(seed, 3, 5)
        if count > len(self._pool):
            # Rejection sampling below could never finish.
            raise ValueError(
                f"cannot pick {count} distinct site types from a pool of {len(self._pool)}"
            )

        chosen: list[int] = []
        attempt = 0
        while len(chosen) < count:
            index = draw(seed, 0, len(self._pool) - 1, offset=_PICK_OFFSET + attempt)
            attempt += 1
            if index not in chosen:
                chosen.append(index)

        return [
            SiteType(
                name=self._pool[index],
                price=draw(seed, 30, 150, offset=_PRICE_OFFSET + i * 100),
                available=draw(seed, 0, 100, offset=_AVAILABLE_OFFSET + i * 100)
                > _AVAILABLE_THRESHOLD,
            )
            for i, index in enumerate(chosen)
        ]
