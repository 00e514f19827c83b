"""
Snapshot Cache

Single-slot in-memory cache for the latest validated Worlds snapshot.
Nothing is persisted; the slot starts empty on every process start.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached value with timestamp."""
    value: Any
    timestamp: float
    model: str
    hits: int = 0


class SnapshotCache:
    """
    One slot, TTL-gated reuse.

    Every replace overwrites the slot wholesale. There is no locking:
    concurrent refreshes are last-writer-wins.
    """

    DEFAULT_TTL = 86400  # 24 hours

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize the cache.

        Args:
            ttl_seconds: Maximum age of a snapshot that still counts as fresh
            clock: Source of the current time in seconds
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

    @property
    def snapshot(self) -> Optional[Any]:
        """The cached snapshot regardless of age, or None."""
        if self._entry is None:
            return None
        return self._entry.value

    def age(self) -> Optional[float]:
        """Seconds since the snapshot was stored, or None when empty."""
        if self._entry is None:
            return None
        return self._clock() - self._entry.timestamp

    def is_fresh(self) -> bool:
        """True iff a snapshot is held and is strictly younger than the TTL."""
        age = self.age()
        return age is not None and age < self.ttl_seconds

    def get_fresh(self) -> Optional[Any]:
        """Return the snapshot if fresh, counting the hit; otherwise None."""
        if not self.is_fresh():
            return None
        self._entry.hits += 1
        return self._entry.value

    def replace(self, snapshot: Any, model: str = "unknown"):
        """Store a new snapshot stamped with the current time."""
        self._entry = CacheEntry(
            value=snapshot,
            timestamp=self._clock(),
            model=model
        )
        logger.info("Worlds snapshot cached (model=%s)", model)

    def get_stats(self) -> dict:
        """Get cache statistics."""
        if self._entry is None:
            return {
                "cached": False,
                "fresh": False,
                "age_seconds": None,
                "ttl_seconds": self.ttl_seconds,
                "hits": 0,
                "model": None
            }

        return {
            "cached": True,
            "fresh": self.is_fresh(),
            "age_seconds": round(self.age(), 3),
            "ttl_seconds": self.ttl_seconds,
            "hits": self._entry.hits,
            "model": self._entry.model
        }
