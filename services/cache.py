"""Simple TTL-based in-memory cache implementation."""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, Optional

from config import CACHE_DEFAULT_TTL_MS

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ":"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


@dataclass
class CacheEntry:
    value: Any
    stored_at: float
    ttl: float

    def is_stale(self, now: float) -> bool:
        # Non-positive ttl is stale even when no time has elapsed
        if self.ttl <= 0:
            return True
        return now - self.stored_at > self.ttl


@dataclass
class CacheStats:
    size: int
    hits: int
    misses: int


class TTLCache:
    """A dictionary-based TTL cache with lazy expiry and substring invalidation.

    Times are in milliseconds. ``clock`` defaults to a monotonic clock; tests
    pass their own to simulate elapsed time.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None,
                 default_ttl_ms: float = CACHE_DEFAULT_TTL_MS):
        self._cache: Dict[str, CacheEntry] = {}
        self._clock = clock or _monotonic_ms
        self._lock = Lock()
        self.default_ttl_ms = default_ttl_ms
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        """Retrieve a value from the cache if it exists and hasn't expired.

        Reading a live entry never changes it or extends its ttl. Only the
        diagnostic hit/miss counters reported by ``stats()`` move.
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None
            if entry.is_stale(self._clock()):
                # Remove expired entry
                del self._cache[key]
                self._misses += 1
                logger.debug(f"Cache entry expired on read: {key}")
                return None
            self._hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None):
        """Store a value in the cache with a TTL (time-to-live) in milliseconds."""
        if ttl is None:
            ttl = self.default_ttl_ms
        with self._lock:
            self._cache[key] = CacheEntry(value=value, stored_at=self._clock(), ttl=ttl)

    def invalidate(self, pattern: Optional[str] = None) -> int:
        """Remove every entry whose key contains ``pattern``, or all entries if no pattern."""
        with self._lock:
            if pattern is None:
                removed = len(self._cache)
                self._cache.clear()
            else:
                matched = [key for key in self._cache if pattern in key]
                for key in matched:
                    del self._cache[key]
                removed = len(matched)
        if removed:
            logger.info(f"Invalidated {removed} cache entries (pattern={pattern!r})")
        return removed

    def clear(self):
        """Clear all entries from the cache."""
        self.invalidate()

    def size(self) -> int:
        """Number of entries physically present, stale ones included."""
        with self._lock:
            return len(self._cache)

    def cleanup(self) -> int:
        """Remove expired entries from the cache."""
        with self._lock:
            now = self._clock()
            expired_keys = [
                key for key, entry in self._cache.items()
                if entry.is_stale(now)
            ]
            for key in expired_keys:
                del self._cache[key]
        if expired_keys:
            logger.info(f"Swept {len(expired_keys)} expired cache entries")
        return len(expired_keys)

    def stats(self) -> CacheStats:
        """Snapshot of physical size and diagnostic hit/miss counters.

        The counters do not affect expiry or lookup results.
        """
        with self._lock:
            return CacheStats(size=len(self._cache), hits=self._hits, misses=self._misses)


def _check_field(field: Any) -> str:
    text = str(field)
    if not text or KEY_SEPARATOR in text:
        raise ValueError(f"Invalid cache key field: {text!r}")
    return text


def build_cache_key(tenant_id: str, branch_id: str, resource: str,
                    window: Optional[int] = None) -> str:
    """Build a composite key such as ``:tenant:branch:resource:window``.

    The leading separator lets ``cache_key_pattern`` anchor on whole fields.
    """
    fields = [tenant_id, branch_id, resource]
    if window is not None:
        fields.append(window)
    return KEY_SEPARATOR + KEY_SEPARATOR.join(_check_field(f) for f in fields)


def cache_key_pattern(*fields: Any) -> str:
    """Substring matching every key that starts with the given leading fields."""
    if not fields:
        raise ValueError("At least one field is required")
    return KEY_SEPARATOR + KEY_SEPARATOR.join(_check_field(f) for f in fields) + KEY_SEPARATOR
