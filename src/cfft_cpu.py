"""
Mixed-Radix FFT on Complex NumPy Arrays

Convenience layer over the transform core in cfft_driver. It owns buffer
allocation and caches one (factors, twiddles) plan per length, so that
callers can transform ordinary complex128 arrays of any length:

    X = fft_mixed(x)
    x = ifft_mixed(X)

Also provides an O(N^2) direct DFT used as the validation reference, and
a quick benchmark against NumPy.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import functools
import logging
import os
import time
from typing import Tuple

import numpy as np

from cfft_driver import BACKWARD, FORWARD, initialize, transform

logger = logging.getLogger(__name__)

def plan_cache_size_from_env(default: int = 64) -> int:
    """Plan cache capacity from CFFT_PLAN_CACHE_SIZE, a non-negative integer."""
    raw = os.environ.get("CFFT_PLAN_CACHE_SIZE")
    if raw is None:
        return default
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(
            f"CFFT_PLAN_CACHE_SIZE must be an integer, got {raw!r}"
        ) from None
    if size < 0:
        raise ValueError(f"CFFT_PLAN_CACHE_SIZE must be >= 0, got {size}")
    return size


PLAN_CACHE_SIZE = plan_cache_size_from_env()


@functools.lru_cache(maxsize=PLAN_CACHE_SIZE)
def get_plan(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Factor list and twiddle table for length n, computed once per length.

    The arrays are read-only, so sharing them between calls is safe.
    """
    logger.debug(f"Plan cache miss for n={n}")
    return initialize(n)


def _as_sequence(x: np.ndarray) -> np.ndarray:
    """Copy x into a fresh contiguous complex128 array."""
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"Input must be 1-D, got shape {x.shape}")
    if x.shape[0] == 0:
        raise ValueError("Input must not be empty")
    return np.array(x, dtype=np.complex128, order='C', copy=True)


def _run(x: np.ndarray, direction: int) -> np.ndarray:
    data = _as_sequence(x)
    n = data.shape[0]
    factors, twiddles = get_plan(n)

    # complex128 viewed as float64 is the interleaved (re, im) layout
    sequence = data.view(np.float64)
    scratch = np.empty(2 * n, dtype=np.float64)
    transform(direction, n, sequence, scratch, factors, twiddles)
    return data


def fft_mixed(x: np.ndarray) -> np.ndarray:
    """
    Forward DFT of arbitrary length using the mixed-radix decomposition.

    X[k] = sum_j x[j] * exp(-2*pi*i*j*k/N)

    Args:
        x: 1-D input array (any length >= 1)

    Returns:
        New complex128 array with the spectrum
    """
    return _run(x, FORWARD)


def ifft_mixed(X: np.ndarray, normalize: bool = True) -> np.ndarray:
    """
    Inverse DFT using the backward mixed-radix transform.

    x[j] = (1/N) * sum_k X[k] * exp(2*pi*i*j*k/N)

    Args:
        X: 1-D input spectrum
        normalize: Scale by 1/N; False returns the raw backward transform

    Returns:
        New complex128 array (time domain signal)
    """
    x = _run(X, BACKWARD)
    if normalize:
        x /= x.shape[0]
    return x


def dft_direct(x: np.ndarray, sign: int = -1) -> np.ndarray:
    """
    O(N^2) reference DFT by explicit matrix product.

    Args:
        x: 1-D input array
        sign: -1 for the forward kernel exp(-i...), +1 for the backward one

    Returns:
        Unnormalized transform of x
    """
    x = np.asarray(x, dtype=np.complex128)
    N = x.shape[0]
    jk = np.outer(np.arange(N), np.arange(N))
    W = np.exp(sign * 2j * np.pi * jk / N)
    return W @ x


def benchmark_mixed_fft(sizes: list, num_runs: int = 10) -> dict:
    """
    Time fft_mixed against numpy.fft.fft.

    Args:
        sizes: List of FFT sizes to test
        num_runs: Number of runs for the median

    Returns:
        Dictionary with benchmark results
    """
    results = {
        'sizes': sizes,
        'mixed_ms': [],
        'numpy_ms': [],
        'max_error': []
    }

    for N in sizes:
        print(f"Benchmarking N = {N:,}...")
        x = np.random.randn(N) + 1j * np.random.randn(N)

        # First call compiles the kernels and builds the plan
        X = fft_mixed(x)
        results['max_error'].append(float(np.max(np.abs(X - np.fft.fft(x)))))

        times = []
        for _ in range(num_runs):
            start = time.perf_counter()
            fft_mixed(x)
            times.append(time.perf_counter() - start)
        results['mixed_ms'].append(np.median(times) * 1000)

        times = []
        for _ in range(num_runs):
            start = time.perf_counter()
            np.fft.fft(x)
            times.append(time.perf_counter() - start)
        results['numpy_ms'].append(np.median(times) * 1000)

    return results


def print_benchmark_results(results: dict) -> None:
    """Print results of benchmark_mixed_fft() as a table."""
    print("\n" + "=" * 70)
    print("Mixed-Radix FFT Benchmark Results")
    print("=" * 70)
    print(f"{'Size':>10} {'Mixed (ms)':>12} {'NumPy (ms)':>12} {'Ratio':>10} {'Max error':>12}")
    print("-" * 70)

    for i, N in enumerate(results['sizes']):
        mixed_ms = results['mixed_ms'][i]
        np_ms = results['numpy_ms'][i]
        ratio = mixed_ms / np_ms if np_ms > 0 else float('inf')
        print(f"{N:>10,} {mixed_ms:>12.3f} {np_ms:>12.3f} {ratio:>9.1f}x {results['max_error'][i]:>12.2e}")

    print("-" * 70)


if __name__ == "__main__":
    print("Mixed-Radix FFT - Quick Test")
    print("-" * 40)

    for N in [8, 12, 30, 49, 17]:
        x = np.random.randn(N) + 1j * np.random.randn(N)
        X = fft_mixed(x)
        print(f"N={N:>3}: vs NumPy {np.max(np.abs(X - np.fft.fft(x))):.2e}, "
              f"vs direct DFT {np.max(np.abs(X - dft_direct(x))):.2e}, "
              f"round trip {np.max(np.abs(ifft_mixed(X) - x)):.2e}")

    print("\n" + "=" * 40)
    print("Running benchmarks...")
    sizes = [64, 100, 360, 1000, 1024, 4096, 10007]
    results = benchmark_mixed_fft(sizes, num_runs=5)
    print_benchmark_results(results)
