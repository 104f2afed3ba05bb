"""
Utility and Strided View Tests

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import os
import sys

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cfft_utils import (
    benchmark_function,
    compute_fft_metrics,
    generate_test_signal,
    load_benchmark_results,
    print_comparison_table,
    save_benchmark_results,
    smooth_sizes,
    validate_fft_result,
)
from cfft_views import view1d, view2d, view3d


# =============================================================================
# Strided views
# =============================================================================

def test_views_share_memory():
    buf = np.arange(24, dtype=np.float64)
    v = view3d(buf, 2, 3, 4)
    assert v.shape == (2, 3, 4)
    assert np.shares_memory(v, buf)
    assert v[1, 2, 3] == 23.0

    v[0, 1, 0] = -1.0
    assert buf[4] == -1.0


def test_views_with_offset():
    buf = np.arange(20, dtype=np.float64)
    assert list(view1d(buf, 3, offset=5)) == [5.0, 6.0, 7.0]
    m = view2d(buf, 2, 4, offset=10)
    assert m[1, 0] == 14.0
    assert view3d(buf, 1, 2, 2, offset=16)[0, 1, 1] == 19.0


def test_view_overrun_is_rejected():
    buf = np.zeros(10)
    with pytest.raises(ValueError):
        view2d(buf, 3, 4)
    with pytest.raises(ValueError):
        view1d(buf, 4, offset=8)


def test_view_requires_contiguous_buffer():
    buf = np.zeros(20)[::2]
    with pytest.raises(ValueError):
        view1d(buf, 4)


# =============================================================================
# Utilities
# =============================================================================

def test_smooth_sizes():
    assert smooth_sizes(10) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert smooth_sizes(20, (2, 3)) == [1, 2, 3, 4, 6, 8, 9, 12, 16, 18]
    assert 11 not in smooth_sizes(100)
    assert 2 * 3 * 5 * 7 in smooth_sizes(210)


def test_validate_fft_result():
    expected = np.array([10.0, 0.0, -10.0], dtype=np.complex128)
    ok = validate_fft_result(expected + 1e-12, expected, tolerance=1e-10)
    assert ok['passed']
    bad = validate_fft_result(expected + 1e-3, expected, tolerance=1e-10)
    assert not bad['passed']
    assert bad['max_error'] == pytest.approx(1e-3)
    assert bad['relative_error'] == pytest.approx(1e-4)


@pytest.mark.parametrize("signal_type", ['random', 'impulse', 'chirp', 'tones'])
def test_generate_test_signal(signal_type):
    x = generate_test_signal(30, signal_type)
    assert x.shape == (30,)
    assert np.iscomplexobj(x)


def test_generate_test_signal_is_seedable():
    a = generate_test_signal(16, 'random', seed=5)
    b = generate_test_signal(16, 'random', seed=5)
    np.testing.assert_array_equal(a, b)
    with pytest.raises(ValueError):
        generate_test_signal(16, 'square')


def test_tones_and_impulse_shapes():
    x = generate_test_signal(8, 'tones', bins=[0, 2], amps=[1.0, 0.5])
    n = np.arange(8)
    np.testing.assert_allclose(x, 1.0 + 0.5 * np.exp(2j * np.pi * 2 * n / 8), atol=1e-12)

    x = generate_test_signal(8, 'impulse', position=3)
    assert x[3] == 1 and np.count_nonzero(x) == 1

    x = generate_test_signal(64, 'chirp', f0=2, f1=2)
    np.testing.assert_allclose(x, np.exp(2j * np.pi * 2 * np.arange(64) / 64), atol=1e-12)


def test_compute_fft_metrics():
    metrics = compute_fft_metrics(1024, 1.0)
    assert metrics['gflops'] == pytest.approx(5 * 1024 * 10 / 1e6)
    assert metrics['bandwidth_gb_s'] == pytest.approx(2 * 1024 * 16 / 1e6)


def test_benchmark_function():
    calls = []
    stats = benchmark_function(calls.append, (1,), num_warmup=2, num_runs=3)
    assert len(calls) == 5
    assert stats['num_runs'] == 3
    assert 0 <= stats['min_ms'] <= stats['median_ms'] <= stats['max_ms']


def test_save_and_load_results(tmp_path):
    path = tmp_path / "results" / "bench.json"
    save_benchmark_results(
        {'sizes': np.array([8, 12]), 'times_ms': [np.float64(0.5), None], 'n': np.int64(7)},
        str(path),
        {'hardware': 'test'}
    )
    loaded = load_benchmark_results(str(path))
    assert loaded['results'] == {'sizes': [8, 12], 'times_ms': [0.5, None], 'n': 7}
    assert loaded['metadata'] == {'hardware': 'test'}


def test_print_comparison_table(capsys):
    print_comparison_table({'numpy': [0.25, 1.5], 'direct_dft': [3.0, None]}, [8, 4096], "GFLOPS")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "GFLOPS"
    assert lines[1].split() == ['Size', 'numpy', 'direct_dft']
    assert lines[3].split() == ['8', '0.250', '3.000']
    assert lines[4].split() == ['4,096', '1.500', 'N/A']
