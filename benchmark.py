#!/usr/bin/env python3
"""
Benchmark the concurrent prime counter.

Compares every counting kernel (jit / python / cached) at each thread
count, plus a sieve baseline, and saves the timings as a CSV.

Usage:
    python benchmark.py --limit 1e5 --threads 1 2 4 8
"""

import argparse
import time
from pathlib import Path

import pandas as pd

from cntcl import ConcurrentPrimeCounter, count_primes_upto
from cntcl.counter import KERNELS


def benchmark(limit: int, thread_counts: list, kernels: list) -> pd.DataFrame:
    """Time count_primes(1, limit, k) for each kernel and thread count."""
    # One row per (kernel, threads); repeated thread counts are dropped
    thread_counts = list(dict.fromkeys(thread_counts))
    kernels = list(dict.fromkeys(kernels))

    print("=" * 60)
    print(f"Concurrent counter benchmark: limit = {limit:,}")
    print("=" * 60)

    print("Sieve baseline...", end=" ", flush=True)
    t0 = time.time()
    expected = count_primes_upto(limit)
    t_sieve = time.time() - t0
    print(f"{t_sieve:.3f}s ({expected:,} primes)")
    print()

    rows = [{'kernel': 'sieve', 'threads': 1, 'count': expected,
             'seconds': t_sieve, 'correct': True}]

    for kernel in kernels:
        print("-" * 60)
        print(f"Kernel: {kernel}")
        print("-" * 60)
        counter = ConcurrentPrimeCounter(kernel=kernel)

        if kernel == "jit":
            # Compile outside the timed region
            counter.count_primes(1, 10, 1)

        for k in thread_counts:
            t0 = time.time()
            got = counter.count_primes(1, limit, k)
            elapsed = time.time() - t0
            status = "✓" if got == expected else f"✗ (expected {expected:,})"
            print(f"  threads={k}: {elapsed:.3f}s  count={got:,} {status}")
            rows.append({'kernel': kernel, 'threads': k, 'count': got,
                         'seconds': elapsed, 'correct': got == expected})
        print()

    df = pd.DataFrame(rows)
    single = df[df['threads'] == 1].set_index('kernel')['seconds']
    df['speedup'] = [
        single[kernel] / s if kernel in single and s > 0 else float('nan')
        for kernel, s in zip(df['kernel'], df['seconds'])
    ]
    return df


def main():
    parser = argparse.ArgumentParser(description='Benchmark the concurrent prime counter')
    parser.add_argument('--limit', type=float, default=1e5, help='Count primes in [1, limit]')
    parser.add_argument('--threads', type=int, nargs='+', default=[1, 2, 4, 8],
                        help='Thread counts to time')
    parser.add_argument('--kernels', type=str, nargs='+', default=list(KERNELS),
                        choices=KERNELS, help='Counting kernels to time')
    parser.add_argument('--out', type=str, default='data/results',
                        help='Directory for benchmark.csv')
    args = parser.parse_args()

    df = benchmark(int(args.limit), args.threads, args.kernels)

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(df.to_string(index=False))

    output_dir = Path(args.out)
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / 'benchmark.csv'
    df.to_csv(out_path, index=False)
    print(f"\nSaved: {out_path}")


if __name__ == '__main__':
    main()
