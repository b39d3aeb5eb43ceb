"""
cntcl: concurrent number-theory core library.

Trial-division primality and factorization, an odd-only sieve, lazy
Fibonacci/prime producers, a per-thread memoizing cache and a
multi-threaded range counter.
"""

from .arithmetic import gcd, lcm, modpow, extended_gcd, mod_inverse
from .primality import is_prime, prime_factors, factorize
from .sieve import sieve, prime_flags_upto, count_primes_upto
from .generators import (
    FibonacciGenerator,
    PrimeGenerator,
    fibonacci_sequence,
    generate_primes,
)
from .cache import PrimeCache, is_prime_cached
from .counter import (
    Chunk,
    partition_range,
    AtomicCounter,
    ConcurrentPrimeCounter,
    count_primes,
)

__version__ = "0.1.0"
