"""
Sieve of Eratosthenes over odd numbers.

Responsibility: bulk prime enumeration only.

Index mapping for the composite array:
- index i  ->  2i + 1   (index 0 is the number 1)
- odd n    ->  (n - 1) // 2

Only odd numbers are stored, so the array has (limit + 1) // 2 entries.
Multiples of p are odd when stepping by 2p, which is a stride of p in
index space. The marking is a numpy slice assignment.
"""

import numpy as np

from .arithmetic import check_integral


def _odd_composite_flags(limit: int) -> np.ndarray:
    """
    Composite flags for odd numbers 1, 3, 5, ... <= limit.

    is_composite[i] is True iff 2i + 1 is not prime. Index 0 (the
    number 1) is marked composite.
    """
    size = (limit + 1) // 2
    is_composite = np.zeros(size, dtype=bool)
    is_composite[0] = True

    i = 3
    while i * i <= limit:
        if not is_composite[(i - 1) // 2]:
            # i*i is odd, and so is every i*i + 2ki
            is_composite[(i * i - 1) // 2::i] = True
        i += 2
    return is_composite


def sieve(limit: int) -> np.ndarray:
    """
    Return all primes <= limit in ascending order.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive). Anything below 2 gives an empty array.

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    limit = check_integral("limit", limit)
    if limit < 2:
        return np.array([], dtype=np.int64)

    is_composite = _odd_composite_flags(limit)
    odd_primes = 2 * np.flatnonzero(~is_composite).astype(np.int64) + 1
    return np.concatenate([np.array([2], dtype=np.int64), odd_primes])


def prime_flags_upto(limit: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length limit + 1 (empty for limit < 0).
    """
    limit = check_integral("limit", limit)
    flags = np.zeros(max(limit + 1, 0), dtype=bool)
    flags[sieve(limit)] = True
    return flags


def count_primes_upto(limit: int) -> int:
    """Number of primes <= limit (pi(limit))."""
    return len(sieve(limit))
