"""
FFT Benchmark Visualization

Creates performance comparison charts from the JSON written by
benchmark_all.py.

Usage:
    python benchmarks/plot_results.py [results.json]

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import os
import sys

import matplotlib.pyplot as plt
import numpy as np

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cfft_utils import load_benchmark_results

COLORS = {
    'numpy': '#2ecc71',
    'mixed': '#3498db',
    'direct': '#e74c3c',
}
MARKERS = {
    'numpy': 'o-',
    'mixed': 'D-',
    'direct': 's--',
}


def size_label(N: int) -> str:
    if N >= 1024 and N % 1024 == 0:
        return f"{N // 1024}K"
    return str(N)


def plot_results(results: dict, output_path: str):
    """Draw time, GFLOPS and slowdown-vs-NumPy panels and save them."""
    sizes = results['sizes']
    impls = results['implementations']
    x = np.arange(len(sizes))
    labels = [size_label(N) for N in sizes]

    plt.style.use('seaborn-v0_8-whitegrid')
    fig = plt.figure(figsize=(16, 10))

    # =========================================================================
    # Plot 1: Execution Time Comparison (Log Scale)
    # =========================================================================
    ax1 = fig.add_subplot(2, 2, 1)
    for key, impl in impls.items():
        mask = [t is not None for t in impl['times_ms']]
        ax1.semilogy(x[mask], [t for t in impl['times_ms'] if t is not None],
                     MARKERS.get(key, 'o-'), linewidth=2, markersize=6,
                     label=impl['name'], color=COLORS.get(key))
    ax1.set_xlabel('FFT Size', fontsize=12)
    ax1.set_ylabel('Execution Time (ms)', fontsize=12)
    ax1.set_title('FFT Execution Time Comparison', fontsize=14, fontweight='bold')
    ax1.set_xticks(x)
    ax1.set_xticklabels(labels, rotation=60, fontsize=8)
    ax1.legend(loc='upper left', fontsize=10)
    ax1.grid(True, alpha=0.3)

    # =========================================================================
    # Plot 2: GFLOPS Performance
    # =========================================================================
    ax2 = fig.add_subplot(2, 2, 2)
    for key, impl in impls.items():
        mask = [g is not None for g in impl['gflops']]
        ax2.plot(x[mask], [g for g in impl['gflops'] if g is not None],
                 MARKERS.get(key, 'o-'), linewidth=2, markersize=6,
                 label=impl['name'], color=COLORS.get(key))
    ax2.set_xlabel('FFT Size', fontsize=12)
    ax2.set_ylabel('Performance (GFLOPS)', fontsize=12)
    ax2.set_title('FFT Performance (GFLOPS)', fontsize=14, fontweight='bold')
    ax2.set_xticks(x)
    ax2.set_xticklabels(labels, rotation=60, fontsize=8)
    ax2.legend(loc='upper left', fontsize=10)
    ax2.grid(True, alpha=0.3)

    # =========================================================================
    # Plot 3: Slowdown vs NumPy
    # =========================================================================
    ax3 = fig.add_subplot(2, 1, 2)
    ratio = [m / n for m, n in zip(impls['mixed']['times_ms'], impls['numpy']['times_ms'])]
    radices = results.get('radices', {})
    # Lengths with a generic (> 5) radix stage are highlighted
    colors = [
        '#e67e22' if any(r > 5 for r in radices.get(str(N), [])) else '#3498db'
        for N in sizes
    ]
    ax3.bar(x, ratio, color=colors, alpha=0.8, edgecolor='black', linewidth=0.5)
    ax3.axhline(y=1.0, color='black', linestyle='-', linewidth=1)
    ax3.set_xlabel('FFT Size', fontsize=12)
    ax3.set_ylabel('Time ratio (Mixed / NumPy)', fontsize=12)
    ax3.set_title('Mixed-Radix FFT vs NumPy (orange: generic radix stage)',
                  fontsize=14, fontweight='bold')
    ax3.set_xticks(x)
    ax3.set_xticklabels(labels, rotation=60, fontsize=8)
    ax3.grid(True, alpha=0.3, axis='y')

    plt.suptitle('Mixed-Radix FFT - Performance Analysis', fontsize=16, fontweight='bold', y=1.02)
    plt.tight_layout()

    os.makedirs(os.path.dirname(output_path) or '.', exist_ok=True)
    plt.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white', edgecolor='none')
    print(f"Chart saved to: {output_path}")


if __name__ == "__main__":
    results_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'results')
    input_path = sys.argv[1] if len(sys.argv) > 1 else os.path.join(results_dir, 'mixed_benchmark.json')

    saved = load_benchmark_results(input_path)
    plot_results(saved['results'], os.path.join(results_dir, 'fft_benchmark_results.png'))
    plt.show()
