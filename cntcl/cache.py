"""
Per-thread memoizing cache for is_prime.

Responsibility: latency only. A cached verdict is always identical to
is_prime(n); dropping the cache never changes a result.

Each thread sees its own bounded store (threading.local), so reads and
writes need no lock. Eviction is FIFO by insertion: a hit does not
refresh an entry, the oldest inserted entry is dropped first.
"""

import threading
from typing import NamedTuple

from .arithmetic import check_integral
from .primality import is_prime

DEFAULT_CAPACITY = 1000


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    maxsize: int
    currsize: int


class PrimeCache:
    """
    Bounded FIFO cache of (n, is_prime(n)) pairs, one store per thread.

    Parameters
    ----------
    capacity : int
        Maximum entries held by any one thread (default 1000).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        capacity = check_integral("capacity", capacity)
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._local = threading.local()

    def _store(self) -> dict:
        # Insertion-ordered dict; first key is the oldest entry
        local = self._local
        if not hasattr(local, "entries"):
            local.entries = {}
            local.hits = 0
            local.misses = 0
        return local.entries

    def is_prime(self, n: int) -> bool:
        """Memoized is_prime for the calling thread."""
        n = check_integral("n", n)
        entries = self._store()
        if n in entries:
            self._local.hits += 1
            return entries[n]

        self._local.misses += 1
        result = is_prime(n)
        if len(entries) >= self.capacity:
            del entries[next(iter(entries))]
        entries[n] = result
        return result

    def __contains__(self, n) -> bool:
        return n in self._store()

    def __len__(self) -> int:
        return len(self._store())

    def clear(self):
        """Drop the calling thread's entries and reset its counters."""
        self._store()
        self._local.entries = {}
        self._local.hits = 0
        self._local.misses = 0

    def cache_info(self) -> CacheInfo:
        """Hit/miss statistics for the calling thread."""
        entries = self._store()
        return CacheInfo(self._local.hits, self._local.misses,
                         self.capacity, len(entries))


_default_cache = PrimeCache()


def is_prime_cached(n: int) -> bool:
    """is_prime(n), memoized in a store private to the calling thread."""
    return _default_cache.is_prime(n)


def default_cache() -> PrimeCache:
    """The process-wide PrimeCache behind is_prime_cached."""
    return _default_cache
