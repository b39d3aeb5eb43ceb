"""
Primality testing and factorization.

Responsibility: the trial-division engine every other module is built on.
No sieve logic and no caching here.

Two flavours of the same algorithm live in this file:
- is_prime / prime_factors: pure Python, any int.
- is_prime_jit / count_primes_in_chunk: numba-compiled, int64 domain,
  compiled with nogil=True so worker threads can run them in parallel.
"""

from typing import Dict, List

from numba import njit

from .arithmetic import check_integral


def is_prime(n: int) -> bool:
    """
    Deterministic trial-division primality test.

    Divides by 2, 3 and then every 6k±1 candidate up to sqrt(n).

    Parameters
    ----------
    n : int
        Integer to test. Values <= 1 are never prime.

    Returns
    -------
    bool
        True iff n is prime.
    """
    n = check_integral("n", n)
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def prime_factors(n: int) -> List[int]:
    """
    Factor n into primes, with multiplicity, in ascending order.

    Parameters
    ----------
    n : int
        Integer to factor, must be >= 1. prime_factors(1) == [].

    Returns
    -------
    list of int
        Prime factors; their product equals n.
    """
    n = check_integral("n", n)
    if n < 1:
        raise ValueError(f"n must be >= 1 to factor, got {n}")

    factors = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2

    i = 3
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 2

    # Whatever is left has no factor <= its square root
    if n > 2:
        factors.append(n)
    return factors


def factorize(n: int) -> Dict[int, int]:
    """Return {prime: exponent} for n, ordered by prime."""
    result = {}
    for p in prime_factors(n):
        result[p] = result.get(p, 0) + 1
    return result


# Largest value the compiled kernels accept (int64)
JIT_MAX = 2**63 - 1


@njit(nogil=True)
def is_prime_jit(n: int) -> bool:
    """Compiled twin of is_prime for int64 values."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    # i * i wraps for n near JIT_MAX
    while i <= n // i:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


@njit(nogil=True)
def count_primes_in_chunk(lo: int, hi: int) -> int:
    """
    Count primes in the inclusive range [lo, hi].

    An empty range (hi < lo) counts 0. Releases the GIL while running.
    Both bounds must be within [0, JIT_MAX].
    """
    count = 0
    if hi < lo:
        return count
    # hi + 1 overflows when hi == JIT_MAX
    n = lo
    while True:
        if is_prime_jit(n):
            count += 1
        if n == hi:
            break
        n += 1
    return count
