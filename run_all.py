#!/usr/bin/env python3
"""
Full self-check suite.

Runs every library component against known values and prints timings
for the cache and the concurrent counter.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import time

import yaml

from cntcl import (
    gcd, lcm, modpow, extended_gcd, mod_inverse,
    prime_factors, is_prime, sieve,
    fibonacci_sequence, generate_primes,
    PrimeCache, ConcurrentPrimeCounter,
)


def load_config(path: str) -> dict:
    with open(path) as f:
        return yaml.safe_load(f)


class Checker:
    """Collects pass/fail results and prints one line per check."""

    def __init__(self):
        self.failures = []

    def check(self, label: str, ok: bool, detail: str = ""):
        status = "✓" if ok else "✗"
        suffix = f"  ({detail})" if detail else ""
        print(f"  {status} {label}{suffix}")
        if not ok:
            self.failures.append(label)


def section(title: str):
    print("-" * 60)
    print(title)
    print("-" * 60)


def check_arithmetic(c: Checker):
    c.check("gcd(56, 98) == 14", gcd(56, 98) == 14)
    c.check("lcm(12, 18) == 36", lcm(12, 18) == 36)
    c.check("modpow(4, 13, 497) == 445", modpow(4, 13, 497) == 445)
    x, y = extended_gcd(120, 23)
    c.check("120x + 23y == 1", 120 * x + 23 * y == 1, f"x={x}, y={y}")
    c.check("mod_inverse(3, 11) * 3 % 11 == 1", mod_inverse(3, 11) * 3 % 11 == 1)
    c.check("is_prime(997)", is_prime(997))
    c.check("not is_prime(999)", not is_prime(999))


def check_factorization_and_sieve(c: Checker, config: dict):
    c.check("prime_factors(840)", prime_factors(840) == [2, 2, 2, 3, 5, 7])

    factors = prime_factors(1234567890)
    product = 1
    for p in factors:
        product *= p
    c.check("prime_factors(1234567890) multiplies back", product == 1234567890,
            " ".join(str(p) for p in factors))

    c.check("sieve(30)", sieve(30).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])

    limit = config['stress_limit']
    t0 = time.time()
    primes = sieve(limit)
    elapsed = time.time() - t0
    c.check(f"sieve({limit:,}) size", len(primes) == config['stress_expected_count'],
            f"{len(primes):,} primes in {elapsed:.3f}s")


def check_generators(c: Checker, config: dict):
    n = config['generator_items']
    fib = fibonacci_sequence(n)
    fibs = []
    while not fib.done():
        fibs.append(fib.next())

    expected_fibs = []
    a, b = 0, 1
    for _ in range(n):
        expected_fibs.append(a)
        a, b = b, a + b
    c.check(f"first {n} Fibonacci numbers", fibs == expected_fibs, str(fibs))

    primes = list(generate_primes(n))
    expected_primes = []
    k = 2
    while len(expected_primes) < n:
        if is_prime(k):
            expected_primes.append(k)
        k += 1
    c.check(f"first {n} primes", primes == expected_primes, str(primes))


def check_cache(c: Checker, config: dict):
    cache = PrimeCache()
    probe = config['cache_probe']
    repeats = config['cache_repeats']

    t0 = time.time()
    for _ in range(repeats):
        is_prime(probe)
    t_uncached = time.time() - t0

    t0 = time.time()
    for _ in range(repeats):
        cache.is_prime(probe)
    t_cached = time.time() - t0

    print(f"  Uncached: {t_uncached * 1000:.2f}ms")
    print(f"  Cached:   {t_cached * 1000:.2f}ms")
    if t_cached > 0:
        print(f"  Speedup:  {t_uncached / t_cached:.1f}x")

    info = cache.cache_info()
    c.check("cache verdict matches is_prime", cache.is_prime(probe) == is_prime(probe))
    c.check("one miss, rest hits", info.misses == 1 and info.hits == repeats - 1,
            f"hits={info.hits}, misses={info.misses}")


def check_counter(c: Checker, config: dict):
    counter = ConcurrentPrimeCounter(kernel=config['kernel'], verbose=True)
    limit = config['count_limit']
    expected = config['expected_count']

    timings = {}
    for k in config['thread_counts']:
        t0 = time.time()
        got = counter.count_primes(1, limit, k)
        timings[k] = time.time() - t0
        c.check(f"count_primes(1, {limit:,}, {k})", got == expected,
                f"{got:,} in {timings[k]:.2f}s")

    base = timings.get(1)
    if base:
        for k, t in timings.items():
            if k != 1 and t > 0:
                print(f"  Speedup with {k} threads: {base / t:.2f}x")

    stress = config['stress_limit']
    t0 = time.time()
    got = counter.count_primes(1, stress)
    c.check(f"count_primes(1, {stress:,}) default threads",
            got == config['stress_expected_count'],
            f"{got:,} in {time.time() - t0:.2f}s")


def main():
    parser = argparse.ArgumentParser(description='Run the cntcl self-check suite')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    config = load_config(args.config)

    print("=" * 60)
    print("cntcl - Self-Check Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  count_limit = {config['count_limit']:,}")
    print(f"  stress_limit = {config['stress_limit']:,}")
    print(f"  thread_counts = {config['thread_counts']}")
    print(f"  kernel = {config['kernel']}")
    print()

    c = Checker()
    total_start = time.time()

    steps = [
        ("1. Arithmetic primitives", lambda: check_arithmetic(c)),
        ("2. Factorization and sieve", lambda: check_factorization_and_sieve(c, config)),
        ("3. Lazy generators", lambda: check_generators(c, config)),
        ("4. Per-thread cache", lambda: check_cache(c, config)),
        ("5. Concurrent counter", lambda: check_counter(c, config)),
    ]
    for title, step in steps:
        section(title)
        start = time.time()
        step()
        print(f"   Completed in {time.time() - start:.2f}s")
        print()

    print("=" * 60)
    if c.failures:
        print(f"FAILED ({len(c.failures)})")
        print("=" * 60)
        for label in c.failures:
            print(f"  - {label}")
    else:
        print("COMPLETE")
        print("=" * 60)
    print(f"\nTotal runtime: {time.time() - total_start:.1f}s")

    return 1 if c.failures else 0


if __name__ == '__main__':
    sys.exit(main())
