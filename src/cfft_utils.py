"""
Utility Functions for the Mixed-Radix FFT

Common helpers for validation, timing, test signals and benchmark
result files.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import json
import os
import time
from datetime import datetime
from typing import Any, Callable, Dict, List

import numpy as np


def smooth_sizes(limit: int, primes: tuple = (2, 3, 5, 7)) -> List[int]:
    """
    All lengths <= limit whose prime factors are drawn from `primes`.

    Example:
        smooth_sizes(10) = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        smooth_sizes(20, (2, 3)) = [1, 2, 3, 4, 6, 8, 9, 12, 16, 18]
    """
    sizes = {1}
    frontier = [1]
    while frontier:
        m = frontier.pop()
        for p in primes:
            q = m * p
            if q <= limit and q not in sizes:
                sizes.add(q)
                frontier.append(q)
    return sorted(sizes)


def validate_fft_result(
    result: np.ndarray,
    expected: np.ndarray,
    tolerance: float = 1e-10
) -> Dict[str, Any]:
    """
    Validate FFT result against expected output.

    The error is measured relative to the largest expected magnitude, so
    the same tolerance works for short and long transforms.

    Returns:
        Dictionary with validation metrics
    """
    abs_diff = np.abs(result - expected)
    scale = max(float(np.max(np.abs(expected))), 1.0)

    return {
        'max_error': float(np.max(abs_diff)),
        'mean_error': float(np.mean(abs_diff)),
        'rms_error': float(np.sqrt(np.mean(abs_diff**2))),
        'relative_error': float(np.max(abs_diff)) / scale,
        'passed': float(np.max(abs_diff)) / scale < tolerance,
        'tolerance': tolerance
    }


def benchmark_function(
    func: Callable,
    args: tuple = (),
    kwargs: dict = None,
    num_warmup: int = 3,
    num_runs: int = 10
) -> Dict[str, float]:
    """
    Median-oriented timing of func(*args, **kwargs).

    The warmup calls absorb numba compilation and plan construction, so
    only steady-state calls are timed.

    Returns:
        Dictionary of millisecond statistics over num_runs calls
    """
    kwargs = kwargs or {}

    for _ in range(num_warmup):
        func(*args, **kwargs)

    times_ms = np.empty(num_runs)
    for r in range(num_runs):
        start = time.perf_counter()
        func(*args, **kwargs)
        times_ms[r] = (time.perf_counter() - start) * 1e3

    return {
        'min_ms': float(times_ms.min()),
        'max_ms': float(times_ms.max()),
        'mean_ms': float(times_ms.mean()),
        'median_ms': float(np.median(times_ms)),
        'std_ms': float(times_ms.std()),
        'num_runs': num_runs
    }


def compute_fft_metrics(N: int, time_ms: float) -> Dict[str, float]:
    """
    Compute FFT performance metrics.

    Uses the conventional 5*N*log2(N) flop count for every length, so
    figures for non-power-of-two sizes are comparable across implementations
    rather than exact operation counts.

    Args:
        N: FFT size
        time_ms: Execution time in milliseconds

    Returns:
        Dictionary with performance metrics
    """
    flops = 5 * N * np.log2(N) if N > 1 else 0.0

    # Read and write N complex values of 16 bytes each
    bytes_accessed = 2 * N * 16

    time_s = time_ms / 1000

    return {
        'N': N,
        'time_ms': time_ms,
        'gflops': float(flops / (time_s * 1e9)),
        'bandwidth_gb_s': bytes_accessed / (time_s * 1e9),
        'throughput_mfft_s': 1 / (time_s * 1e6)
    }


def _random_signal(N, seed=None):
    rng = np.random.default_rng(seed)
    return rng.standard_normal(N) + 1j * rng.standard_normal(N)


def _impulse(N, position=0):
    x = np.zeros(N, dtype=np.complex128)
    x[position] = 1
    return x


def _chirp(N, f0=0, f1=None):
    # Linear sweep from bin f0 to bin f1 over the whole record
    if f1 is None:
        f1 = max(N // 4, 1)
    t = np.arange(N) / N
    return np.exp(2j * np.pi * N * (f0 * t + 0.5 * (f1 - f0) * t**2))


def _tones(N, bins=(1, 3, 5), amps=None):
    # Sum of complex exponentials landing exactly on the given DFT bins
    if amps is None:
        amps = np.ones(len(bins))
    phase = 2 * np.pi * np.outer(bins, np.arange(N)) / N
    return np.asarray(amps, dtype=np.complex128) @ np.exp(1j * phase)


SIGNAL_GENERATORS = {
    'random': _random_signal,
    'impulse': _impulse,
    'chirp': _chirp,
    'tones': _tones,
}


def generate_test_signal(
    N: int,
    signal_type: str = 'random',
    **kwargs
) -> np.ndarray:
    """
    Generate a complex test signal of length N.

    Args:
        N: Signal length
        signal_type: A key of SIGNAL_GENERATORS
        **kwargs: Passed to the generator (seed, position, f0, f1, bins, amps)

    Returns:
        Complex numpy array
    """
    try:
        generator = SIGNAL_GENERATORS[signal_type]
    except KeyError:
        raise ValueError(f"Unknown signal type: {signal_type}") from None
    return generator(N, **kwargs)


def _json_default(obj):
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def save_benchmark_results(
    results: Dict[str, Any],
    filename: str,
    metadata: Dict[str, Any] = None
):
    """Write results and metadata as JSON, creating the parent directory."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    document = {
        'timestamp': datetime.now().isoformat(),
        'metadata': metadata or {},
        'results': results
    }
    with open(filename, 'w') as f:
        json.dump(document, f, indent=2, default=_json_default)


def load_benchmark_results(filename: str) -> Dict[str, Any]:
    with open(filename) as f:
        return json.load(f)


def print_comparison_table(
    implementations: Dict[str, List[float]],
    sizes: List[int],
    metric: str = "Time (ms)"
):
    """
    Print one row per size and one column per implementation; missing
    values (None) print as N/A.
    """
    width = max([14] + [len(name) for name in implementations])
    cells = [f"{'Size':>12}"] + [f"{name:>{width}}" for name in implementations]
    header = " ".join(cells)

    print(metric)
    print(header)
    print("-" * len(header))
    for i, N in enumerate(sizes):
        values = [column[i] for column in implementations.values()]
        row = [f"{N:>12,}"]
        row += [f"{'N/A':>{width}}" if v is None else f"{v:>{width}.3f}" for v in values]
        print(" ".join(row))
