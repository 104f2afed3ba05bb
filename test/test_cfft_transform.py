"""
Mixed-Radix FFT Validation Tests

End-to-end tests of initialize/transform and the complex-array wrappers:
agreement with NumPy and the direct DFT, round trip, linearity, impulse
response, table reuse and buffer handling.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import os
import sys
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cfft_cpu import (
    benchmark_mixed_fft,
    dft_direct,
    fft_mixed,
    get_plan,
    ifft_mixed,
    plan_cache_size_from_env,
    print_benchmark_results,
)
from cfft_driver import BACKWARD, FORWARD, initialize, transform
from cfft_factor import FACTOR_SLOTS
from cfft_utils import generate_test_signal, validate_fft_result

TOLERANCE = 1e-9

# Exercises every kernel path: fixed radices with and without rotation,
# the generic kernel in both loop nestings and both buffer outcomes.
SIZES = (
    list(range(1, 65))
    + [77, 96, 100, 121, 143, 169, 196, 210, 256, 343, 360, 1000,
       1001, 1009, 1024, 2310, 3136, 4096]
)


def forward(x, plan=None):
    n = x.shape[0]
    factors, twiddles = plan or initialize(n)
    data = np.array(x, dtype=np.complex128)
    transform(FORWARD, n, data.view(np.float64), np.empty(2 * n), factors, twiddles)
    return data


def backward(X, plan=None):
    n = X.shape[0]
    factors, twiddles = plan or initialize(n)
    data = np.array(X, dtype=np.complex128)
    transform(BACKWARD, n, data.view(np.float64), np.empty(2 * n), factors, twiddles)
    return data


def relative_error(result, expected):
    return np.max(np.abs(result - expected)) / max(np.max(np.abs(expected)), 1.0)


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 8, 12, 15, 30, 17])
def test_matches_direct_dft(n):
    x = generate_test_signal(n, 'random', seed=n)
    assert relative_error(forward(x), dft_direct(x)) < TOLERANCE
    assert relative_error(backward(x), dft_direct(x, sign=1)) < TOLERANCE


@pytest.mark.parametrize("n", SIZES)
def test_matches_numpy(n):
    x = generate_test_signal(n, 'random', seed=n)
    metrics = validate_fft_result(forward(x), np.fft.fft(x), tolerance=TOLERANCE)
    assert metrics['passed'], f"N={n}: relative_error = {metrics['relative_error']:.2e}"


@pytest.mark.parametrize("n", SIZES)
def test_round_trip_scales_by_n(n):
    x = generate_test_signal(n, 'random', seed=n + 1)
    assert relative_error(backward(forward(x)), n * x) < TOLERANCE


@pytest.mark.parametrize("n", [6, 35, 49, 64, 360, 1001])
def test_linearity(n):
    x = generate_test_signal(n, 'random', seed=1)
    y = generate_test_signal(n, 'random', seed=2)
    a, b = 2.5 - 1.0j, -0.75 + 0.5j
    expected = a * forward(x) + b * forward(y)
    assert relative_error(forward(a * x + b * y), expected) < TOLERANCE


@pytest.mark.parametrize("n", list(range(1, 41)) + [49, 77, 3136])
def test_impulse_gives_flat_spectrum(n):
    X = forward(generate_test_signal(n, 'impulse'))
    np.testing.assert_allclose(X.real, np.ones(n), atol=1e-12)
    np.testing.assert_allclose(X.imag, np.zeros(n), atol=1e-12)


@pytest.mark.parametrize("n, freq", [(64, 5), (100, 7), (343, 20)])
def test_complex_exponential_hits_single_bin(n, freq):
    X = forward(generate_test_signal(n, 'tones', bins=[freq]))
    expected = np.zeros(n, dtype=np.complex128)
    expected[freq] = n
    np.testing.assert_allclose(X, expected, atol=1e-9)


def test_length_one_is_noop():
    factors, twiddles = initialize(1)
    assert factors[1] == 0
    sequence = np.array([3.5, -1.25])
    scratch = np.array([7.0, 7.0])
    transform(FORWARD, 1, sequence, scratch, factors, twiddles)
    np.testing.assert_array_equal(sequence, [3.5, -1.25])
    transform(BACKWARD, 1, sequence, scratch, factors, twiddles)
    np.testing.assert_array_equal(sequence, [3.5, -1.25])


@pytest.mark.parametrize("n", [16, 30, 49, 1001])
def test_tables_are_reusable(n):
    plan = initialize(n)
    for seed in range(4):
        x = generate_test_signal(n, 'random', seed=seed)
        np.testing.assert_array_equal(forward(x, plan), forward(x))
        np.testing.assert_array_equal(backward(x, plan), backward(x))


def test_shared_tables_across_threads():
    n = 980
    plan = initialize(n)
    signals = [generate_test_signal(n, 'random', seed=s) for s in range(8)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda x: forward(x, plan), signals))

    for x, X in zip(signals, results):
        np.testing.assert_array_equal(X, forward(x))


@pytest.mark.parametrize("radices", [[7, 4, 7], [4, 7, 7], [7, 7, 4], [2, 7, 2, 7], [7, 2, 2, 7]])
def test_any_radix_order_gives_same_spectrum(radices):
    from cfft_twiddle import build_twiddles

    n = 196
    factors = np.zeros(FACTOR_SLOTS, dtype=np.int64)
    factors[0] = n
    factors[1] = len(radices)
    factors[2:2 + len(radices)] = radices
    plan = (factors, build_twiddles(n, factors))

    x = generate_test_signal(n, 'random', seed=196)
    assert relative_error(forward(x, plan), np.fft.fft(x)) < TOLERANCE
    assert relative_error(backward(x, plan), n * np.fft.ifft(x)) < TOLERANCE


def test_buffers_with_extra_capacity():
    n = 12
    factors, twiddles = initialize(n)
    x = generate_test_signal(n, 'random', seed=12)

    sequence = np.full(2 * n + 6, 99.0)
    sequence[:2 * n] = x.view(np.float64)
    scratch = np.zeros(2 * n + 10)
    transform(FORWARD, n, sequence, scratch, factors, twiddles)

    assert relative_error(sequence[:2 * n].view(np.complex128), np.fft.fft(x)) < TOLERANCE
    np.testing.assert_array_equal(sequence[2 * n:], 99.0)


def test_undersized_scratch_is_rejected():
    n = 12
    factors, twiddles = initialize(n)
    with pytest.raises(ValueError):
        transform(FORWARD, n, np.zeros(2 * n), np.zeros(n), factors, twiddles)


def test_unknown_direction_is_rejected():
    factors, twiddles = initialize(8)
    with pytest.raises(ValueError):
        transform(0, 8, np.zeros(16), np.zeros(16), factors, twiddles)


# =============================================================================
# Complex-array wrappers
# =============================================================================

@pytest.mark.parametrize("n", [1, 5, 48, 210, 1009])
def test_fft_mixed_matches_numpy(n):
    x = generate_test_signal(n, 'chirp')
    original = x.copy()
    assert relative_error(fft_mixed(x), np.fft.fft(x)) < TOLERANCE
    np.testing.assert_array_equal(x, original)


@pytest.mark.parametrize("n", [1, 5, 48, 210, 1009])
def test_ifft_mixed_inverts_fft_mixed(n):
    x = generate_test_signal(n, 'random', seed=n)
    np.testing.assert_allclose(ifft_mixed(fft_mixed(x)), x, atol=1e-12)
    np.testing.assert_allclose(ifft_mixed(x), np.fft.ifft(x), atol=1e-12)
    np.testing.assert_allclose(ifft_mixed(x, normalize=False), n * np.fft.ifft(x), atol=1e-9)


def test_fft_mixed_accepts_real_and_list_input():
    x = [1.0, 2.0, 0.0, -1.0, 3.0, 0.5]
    np.testing.assert_allclose(fft_mixed(x), np.fft.fft(x), atol=1e-12)
    np.testing.assert_allclose(fft_mixed(np.arange(10)), np.fft.fft(np.arange(10)), atol=1e-12)


def test_fft_mixed_rejects_bad_shapes():
    with pytest.raises(ValueError):
        fft_mixed(np.zeros((4, 4)))
    with pytest.raises(ValueError):
        fft_mixed(np.zeros(0))


def test_plan_cache_returns_same_tables():
    p1 = get_plan(360)
    p2 = get_plan(360)
    assert p1[0] is p2[0] and p1[1] is p2[1]


def test_parseval():
    n = 1000
    x = generate_test_signal(n, 'random', seed=3)
    X = fft_mixed(x)
    energy_time = np.sum(np.abs(x)**2)
    energy_freq = np.sum(np.abs(X)**2) / n
    assert abs(energy_time - energy_freq) / energy_time < 1e-10


def test_plan_cache_size_from_env(monkeypatch):
    monkeypatch.delenv("CFFT_PLAN_CACHE_SIZE", raising=False)
    assert plan_cache_size_from_env() == 64
    monkeypatch.setenv("CFFT_PLAN_CACHE_SIZE", "8")
    assert plan_cache_size_from_env() == 8
    monkeypatch.setenv("CFFT_PLAN_CACHE_SIZE", "lots")
    with pytest.raises(ValueError, match="CFFT_PLAN_CACHE_SIZE"):
        plan_cache_size_from_env()
    monkeypatch.setenv("CFFT_PLAN_CACHE_SIZE", "-1")
    with pytest.raises(ValueError, match="CFFT_PLAN_CACHE_SIZE"):
        plan_cache_size_from_env()


def test_quick_benchmark_runs_and_prints(capsys):
    results = benchmark_mixed_fft([12, 17], num_runs=2)
    assert results['sizes'] == [12, 17]
    assert len(results['mixed_ms']) == len(results['numpy_ms']) == 2
    assert max(results['max_error']) < 1e-9

    print_benchmark_results(results)
    out = capsys.readouterr().out
    assert "Mixed-Radix FFT Benchmark Results" in out
    assert any(line.split()[:1] == ['17'] for line in out.splitlines())
