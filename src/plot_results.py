"""
FFT Benchmark Visualization

Creates performance comparison charts from benchmark JSON files and
magnitude plots of computed spectra.

Project: Radix-2 FFT on split real/imaginary arrays
"""

import numpy as np
import matplotlib.pyplot as plt
import os
import sys

from utils import format_size, load_benchmark_results

# One colour/marker per implementation key written by benchmark_all.py
STYLES = {
    'numpy': ('o-', '#2ecc71'),
    'radix2': ('s--', '#e74c3c'),
    'jit': ('^-', '#3498db'),
}
DEFAULT_STYLE = ('D-', '#9b59b6')


def _valid_points(values: list):
    """Indices and values of the entries that are not None."""
    idx = [i for i, v in enumerate(values) if v is not None]
    return np.array(idx, dtype=int), [values[i] for i in idx]


def plot_benchmark_results(results: dict, output_path: str = None, title: str = None):
    """
    Plot execution time and GFLOPS for every benchmarked implementation.

    Args:
        results: Dictionary from run_benchmarks() (or the 'results'
                 entry of a saved JSON file)
        output_path: Where to save the PNG (not saved if None)
        title: Figure title

    Returns:
        The matplotlib Figure
    """
    sizes = results['sizes']
    impls = results['implementations']
    size_labels = [format_size(n) for n in sizes]
    x = np.arange(len(sizes))

    plt.style.use('seaborn-v0_8-whitegrid')
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))

    # =========================================================================
    # Plot 1: Execution Time Comparison (Log Scale)
    # =========================================================================
    for key, impl in impls.items():
        marker, color = STYLES.get(key, DEFAULT_STYLE)
        idx, times = _valid_points(impl['times_ms'])
        if len(idx) == 0:
            continue
        ax1.semilogy(x[idx], times, marker, linewidth=2, markersize=8,
                     label=impl['name'], color=color)

    ax1.set_xlabel('FFT Size', fontsize=12)
    ax1.set_ylabel('Execution Time (ms)', fontsize=12)
    ax1.set_title('FFT Execution Time Comparison', fontsize=14, fontweight='bold')
    ax1.set_xticks(x)
    ax1.set_xticklabels(size_labels)
    ax1.legend(loc='upper left', fontsize=10)
    ax1.grid(True, alpha=0.3)

    # =========================================================================
    # Plot 2: GFLOPS Performance
    # =========================================================================
    for key, impl in impls.items():
        marker, color = STYLES.get(key, DEFAULT_STYLE)
        idx, gflops = _valid_points(impl['gflops'])
        if len(idx) == 0:
            continue
        ax2.plot(x[idx], gflops, marker, linewidth=2, markersize=8,
                 label=impl['name'], color=color)

    ax2.set_xlabel('FFT Size', fontsize=12)
    ax2.set_ylabel('Performance (GFLOPS)', fontsize=12)
    ax2.set_title('FFT Performance (GFLOPS)', fontsize=14, fontweight='bold')
    ax2.set_xticks(x)
    ax2.set_xticklabels(size_labels)
    ax2.legend(loc='upper left', fontsize=10)
    ax2.grid(True, alpha=0.3)

    fig.suptitle(title or 'Radix-2 FFT - Performance Analysis',
                 fontsize=16, fontweight='bold')
    fig.tight_layout()

    if output_path:
        _save(fig, output_path)

    return fig


def plot_spectrum(real: np.ndarray, imag: np.ndarray, output_path: str = None,
                  title: str = 'FFT Magnitude Spectrum'):
    """
    Stem plot of |X[k]| for a spectrum in natural bin order.

    Returns:
        The matplotlib Figure
    """
    magnitude = np.hypot(np.asarray(real, dtype=np.float64),
                         np.asarray(imag, dtype=np.float64))
    bins = np.arange(len(magnitude))

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.stem(bins, magnitude)
    ax.set_xlabel('Bin', fontsize=12)
    ax.set_ylabel('|X[k]| (unnormalized)', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if output_path:
        _save(fig, output_path)

    return fig


def _save(fig, output_path: str):
    directory = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(directory, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white', edgecolor='none')
    print(f"Chart saved to: {output_path}")


if __name__ == "__main__":
    default_path = os.path.join(
        os.path.dirname(os.path.abspath(__file__)),
        '..', 'benchmarks', 'results', 'benchmark.json'
    )
    results_file = sys.argv[1] if len(sys.argv) > 1 else default_path

    data = load_benchmark_results(results_file)
    output_path = os.path.splitext(results_file)[0] + '.png'
    plot_benchmark_results(data['results'], output_path)

    plt.show()
