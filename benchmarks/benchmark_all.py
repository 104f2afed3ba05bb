"""
Mixed-Radix FFT Benchmark Suite

Times the mixed-radix FFT against NumPy (pocketfft) over power-of-two,
smooth and prime lengths, plus the O(N^2) direct DFT for small sizes.

Usage:
    python benchmarks/benchmark_all.py
    python benchmarks/benchmark_all.py --max-size 100000 --runs 20

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""
import argparse
import os
import sys
from datetime import datetime

import numpy as np

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cfft_cpu import dft_direct, fft_mixed
from cfft_factor import factorize, radices_of
from cfft_utils import (
    benchmark_function,
    compute_fft_metrics,
    generate_test_signal,
    print_comparison_table,
    save_benchmark_results,
    smooth_sizes,
)

DIRECT_DFT_LIMIT = 2048
PRIME_SIZES = [17, 101, 1009, 10007]


def default_sizes(max_size: int) -> list:
    """Powers of two, a spread of 2-3-5-7 smooth lengths and some primes."""
    powers = [2**k for k in range(4, 21) if 2**k <= max_size]
    smooth = smooth_sizes(max_size)
    spread = smooth[::max(len(smooth) // 12, 1)]
    primes = [p for p in PRIME_SIZES if p <= max_size]
    return sorted((set(powers) | set(spread) | set(primes)) - {1})


def benchmark_implementation(
    name: str,
    fft_func,
    sizes: list,
    num_warmup: int = 2,
    num_runs: int = 10,
    max_size: int = None
) -> dict:
    """
    Benchmark an FFT implementation across multiple sizes.

    Args:
        name: Implementation name
        fft_func: FFT function to benchmark
        sizes: List of FFT sizes
        num_warmup: Warmup runs
        num_runs: Timed runs
        max_size: Skip sizes above this (recorded as None)

    Returns:
        Dictionary with benchmark results
    """
    results = {
        'name': name,
        'sizes': sizes,
        'times_ms': [],
        'gflops': [],
        'bandwidth_gb_s': []
    }

    for N in sizes:
        if max_size is not None and N > max_size:
            results['times_ms'].append(None)
            results['gflops'].append(None)
            results['bandwidth_gb_s'].append(None)
            continue

        x = generate_test_signal(N, 'random', seed=N)
        stats = benchmark_function(fft_func, (x,), num_warmup=num_warmup, num_runs=num_runs)
        metrics = compute_fft_metrics(N, stats['median_ms'])

        results['times_ms'].append(stats['median_ms'])
        results['gflops'].append(metrics['gflops'])
        results['bandwidth_gb_s'].append(metrics['bandwidth_gb_s'])

    return results


def run_benchmarks(sizes: list, num_runs: int) -> dict:
    """Run benchmarks for all implementations."""
    print("=" * 70)
    print("Mixed-Radix FFT Benchmark Suite")
    print("=" * 70)
    print(f"Sizes: {len(sizes)} lengths from {sizes[0]:,} to {sizes[-1]:,}")
    print(f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 70)

    all_results = {
        'timestamp': datetime.now().isoformat(),
        'sizes': sizes,
        'radices': {N: radices_of(factorize(N)) for N in sizes},
        'implementations': {}
    }

    print("\n[1/3] Benchmarking NumPy FFT (reference)...")
    all_results['implementations']['numpy'] = benchmark_implementation(
        "NumPy", np.fft.fft, sizes, num_runs=num_runs
    )

    print("[2/3] Benchmarking mixed-radix FFT...")
    all_results['implementations']['mixed'] = benchmark_implementation(
        "Mixed-radix", fft_mixed, sizes, num_runs=num_runs
    )

    print("[3/3] Benchmarking direct DFT...")
    all_results['implementations']['direct'] = benchmark_implementation(
        "Direct DFT", dft_direct, sizes, num_warmup=1, num_runs=3,
        max_size=DIRECT_DFT_LIMIT
    )

    return all_results


def print_results(results: dict):
    """Print timing and GFLOPS tables plus the radix plan per size."""
    sizes = results['sizes']
    impls = results['implementations']

    print("\n" + "=" * 70)
    print_comparison_table(
        {impl['name']: impl['times_ms'] for impl in impls.values()},
        sizes,
        metric="Execution Time (ms)"
    )
    print("\n" + "=" * 70)
    print_comparison_table(
        {impl['name']: impl['gflops'] for impl in impls.values()},
        sizes,
        metric="Performance (GFLOPS)"
    )

    print("\n" + "=" * 70)
    print("Mixed-radix slowdown vs NumPy:")
    print("-" * 70)
    for i, N in enumerate(sizes):
        numpy_time = impls['numpy']['times_ms'][i]
        mixed_time = impls['mixed']['times_ms'][i]
        radices = 'x'.join(str(r) for r in results['radices'][N])
        print(f"  N={N:>10,} [{radices}]: {mixed_time / numpy_time:.1f}x")
    print("=" * 70)


def main():
    """Main benchmark runner."""
    parser = argparse.ArgumentParser(description="Benchmark the mixed-radix FFT")
    parser.add_argument('--max-size', type=int, default=2**16,
                        help="largest transform length to time")
    parser.add_argument('--runs', type=int, default=10,
                        help="timed runs per size")
    parser.add_argument('--output', default=os.path.join(
        os.path.dirname(__file__), 'results', 'mixed_benchmark.json'),
        help="where to write the JSON results")
    args = parser.parse_args()

    sizes = default_sizes(args.max_size)
    results = run_benchmarks(sizes, args.runs)
    print_results(results)

    save_benchmark_results(results, args.output, {
        'hardware': 'CPU',
        'python_version': sys.version
    })
    print(f"\nResults saved to: {args.output}")


if __name__ == "__main__":
    main()
