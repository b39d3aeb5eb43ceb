"""
Concurrent prime counting over an inclusive range.

Responsibility: split [start, end] into static chunks, count each chunk
on its own thread and sum the results.

Each call spawns a fresh batch of threads and joins them before
returning. Workers share nothing except the AtomicCounter they add
their local count to, once. Because partitioning is static and addition
commutes, the total does not depend on scheduling.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from multiprocessing import cpu_count
from typing import List, NamedTuple, Optional

from .arithmetic import check_integral
from .cache import is_prime_cached
from .primality import JIT_MAX, count_primes_in_chunk, is_prime

KERNELS = ("jit", "python", "cached")


class Chunk(NamedTuple):
    """Inclusive sub-range [start, end]; empty when end < start."""
    start: int
    end: int

    def __len__(self):
        return max(self.end - self.start + 1, 0)


def partition_range(start: int, end: int, thread_count: int) -> List[Chunk]:
    """
    Split [start, end] into thread_count contiguous chunks.

    chunk_size = (end - start + 1) // thread_count. Chunk i covers
    [start + i*chunk_size, start + (i+1)*chunk_size - 1]; the last chunk
    is stretched to `end` to absorb the remainder. With more workers than
    integers all but the last chunk are empty.

    Parameters
    ----------
    start, end : int
        Inclusive bounds, 0 <= start <= end.
    thread_count : int
        Number of chunks, >= 1.

    Returns
    -------
    list of Chunk
        Exactly thread_count chunks covering [start, end] once.
    """
    start = check_integral("start", start)
    end = check_integral("end", end)
    thread_count = check_integral("thread_count", thread_count)
    if thread_count < 1:
        raise ValueError(f"thread_count must be >= 1, got {thread_count}")
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")
    if start > end:
        raise ValueError(f"start ({start}) must be <= end ({end})")

    chunk_size = (end - start + 1) // thread_count
    chunks = []
    for i in range(thread_count):
        chunk_start = start + i * chunk_size
        if i == thread_count - 1:
            chunk_end = end
        else:
            chunk_end = chunk_start + chunk_size - 1
        chunks.append(Chunk(chunk_start, chunk_end))
    return chunks


class AtomicCounter:
    """Integer accumulator with an atomic fetch_add."""

    def __init__(self, value: int = 0):
        self._value = value
        self._lock = threading.Lock()

    def fetch_add(self, delta: int) -> int:
        """Add delta and return the previous value."""
        with self._lock:
            previous = self._value
            self._value = previous + delta
        return previous

    def load(self) -> int:
        return self._value


def _count_python(chunk: Chunk) -> int:
    return sum(1 for n in range(chunk.start, chunk.end + 1) if is_prime(n))


def _count_cached(chunk: Chunk) -> int:
    return sum(1 for n in range(chunk.start, chunk.end + 1) if is_prime_cached(n))


def _count_jit(chunk: Chunk) -> int:
    return int(count_primes_in_chunk(chunk.start, chunk.end))


_CHUNK_COUNTERS = {
    "jit": _count_jit,
    "python": _count_python,
    "cached": _count_cached,
}


class ConcurrentPrimeCounter:
    """
    Count primes in a range with one worker thread per chunk.

    Parameters
    ----------
    kernel : str
        Per-chunk counting routine:
        - "jit": numba count_primes_in_chunk (releases the GIL, int64 only)
        - "python": is_prime on every integer
        - "cached": is_prime_cached, each worker using its own thread's cache
    verbose : bool
        Print progress lines.
    """

    def __init__(self, kernel: str = "jit", verbose: bool = False):
        if kernel not in _CHUNK_COUNTERS:
            raise ValueError(f"Unknown kernel {kernel!r}, expected one of {KERNELS}")
        self.kernel = kernel
        self.verbose = verbose
        self.last_chunks: List[Chunk] = []

    def count_primes(self, start: int, end: int,
                     thread_count: Optional[int] = None) -> int:
        """
        Count primes in [start, end] using thread_count worker threads.

        thread_count defaults to the CPU count. Blocks until every worker
        has finished. Any exception raised by a worker is re-raised here.
        """
        if thread_count is None:
            thread_count = cpu_count()
        chunks = partition_range(start, end, thread_count)
        if self.kernel == "jit" and end > JIT_MAX:
            raise ValueError(f"end ({end}) exceeds the jit kernel's int64 limit "
                             f"{JIT_MAX}; use kernel='python'")
        self.last_chunks = chunks

        total = AtomicCounter()
        count_chunk = _CHUNK_COUNTERS[self.kernel]

        def worker(chunk: Chunk):
            local_count = count_chunk(chunk)
            total.fetch_add(local_count)

        if self.verbose:
            print(f"    Processing {len(chunks)} chunks with {len(chunks)} workers "
                  f"({self.kernel} kernel)...")

        with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            futures = [executor.submit(worker, chunk) for chunk in chunks]
            # result() re-raises a worker's exception in this thread
            for future in futures:
                future.result()

        return total.load()


def count_primes(start: int, end: int, thread_count: Optional[int] = None,
                 kernel: str = "jit") -> int:
    """Count primes in [start, end]; see ConcurrentPrimeCounter."""
    return ConcurrentPrimeCounter(kernel).count_primes(start, end, thread_count)
