"""Time-bounded quote cache."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from dlmm.constants import QUOTE_CACHE_TTL
from dlmm.models.quote import Quote


# Tuple keys keep pairs like ("A-B", "C") and ("A", "B-C") apart
CacheKey: TypeAlias = tuple[str, str, int]


@dataclass(frozen=True)
class CacheEntry:
    quote: Quote
    timestamp: float


class QuoteCache:
    """Quotes keyed by (token_in, token_out, amount_in) with lazy TTL expiry.

    An entry is fresh while ``now - timestamp < ttl``. Expired entries are
    dropped when next read. Safe to share between threads: each put replaces
    the whole entry, last writer wins.

    Args:
        ttl: Seconds an entry stays fresh
        clock: Monotonic time source in seconds (injectable for tests)
    """

    def __init__(
        self,
        ttl: float = QUOTE_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_key(token_in: str, token_out: str, amount_in: int) -> CacheKey:
        return (token_in, token_out, amount_in)

    def get(self, token_in: str, token_out: str, amount_in: int) -> Quote | None:
        """Get a fresh cached quote, or None."""
        key = self.make_key(token_in, token_out, amount_in)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp >= self.ttl:
                del self._entries[key]
                return None
            return entry.quote

    def put(self, token_in: str, token_out: str, amount_in: int, quote: Quote) -> None:
        """Store a quote, replacing any existing entry for the key."""
        key = self.make_key(token_in, token_out, amount_in)
        entry = CacheEntry(quote=quote, timestamp=self._clock())
        with self._lock:
            self._entries[key] = entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        """Number of stored entries, expired ones included until read."""
        with self._lock:
            return len(self._entries)


__all__ = ["CacheEntry", "CacheKey", "QuoteCache"]
