"""Time-windowed cache keyed by a logical name and an identity (wallet address)."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 60


@dataclass
class CacheEntry(Generic[T]):
    """A cached value with its write time (epoch ms) and owning identity."""

    name: str
    identity: str
    data: T
    timestamp: int


class TimeWindowedCache:
    """
    In-memory cache whose entries expire after a fixed TTL.

    Entries are stored under "<name>_<identity>". A lookup only succeeds when the
    entry is younger than the TTL and was written for the same identity; anything
    else is evicted on the spot. The clock returns epoch seconds and can be
    replaced in tests.

    Safe to share between worker threads.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._ttl_ms = int(ttl_seconds * 1000)
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_ms / 1000

    @staticmethod
    def make_key(name: str, identity: str) -> str:
        return f"{name}_{identity}"

    def get(self, name: str, identity: str) -> Optional[Any]:
        """Return the cached value, or None if missing, expired or owned by another identity."""
        key = self.make_key(name, identity)
        with self._lock:
            entry = self._entries.get(key)

            if entry is None:
                # A new identity for this name: whatever was cached for the old one is stale.
                self._evict_other_identities(name, identity)
                return None

            if self._now_ms() - entry.timestamp >= self._ttl_ms:
                del self._entries[key]
                return None

            if entry.identity != identity or entry.name != name:
                del self._entries[key]
                return None

            return entry.data

    def set(self, name: str, identity: str, data: Any) -> None:
        """Store a value, overwriting any previous entry."""
        entry = CacheEntry(name=name, identity=identity, data=data, timestamp=self._now_ms())
        with self._lock:
            self._entries[self.make_key(name, identity)] = entry

    def clear(self, name: Optional[str] = None, identity: Optional[str] = None) -> None:
        """Remove one entry when both name and identity are given, otherwise everything."""
        with self._lock:
            if name and identity:
                self._entries.pop(self.make_key(name, identity), None)
            else:
                self._entries.clear()

    def clear_identity(self, identity: str) -> None:
        """Remove every entry written for an identity."""
        with self._lock:
            for key in [k for k, e in self._entries.items() if e.identity == identity]:
                del self._entries[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_other_identities(self, name: str, identity: str) -> None:
        stale = [
            key
            for key, entry in self._entries.items()
            if entry.name == name and entry.identity != identity
        ]
        for key in stale:
            del self._entries[key]

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)
