"""
CacheStore port — keyed time-to-live store with a stale-tolerant read.

RatingsProvider reads fresh entries first and only falls back to
get_stale() when the upstream call fails.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

DEFAULT_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class CacheEntry:
    """One stored value. Replaced on every set(), never mutated."""

    key: str
    value: Any
    stored_at: float  # epoch seconds


class CacheStore(ABC):
    """
    Port: where fetched values live between requests.

    Entries expire logically at read time; nothing runs in the background.
    A set() always makes the next get() for that key succeed.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the value if it is younger than the TTL, else None."""
        ...

    @abstractmethod
    def get_stale(self, key: str) -> Any | None:
        """Return the value regardless of age, or None if never stored."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, resetting its age to zero."""
        ...
