"""
Comprehensive FFT Benchmark Suite

Compares all FFT implementations:
- Radix-2 recursive (NumPy butterflies)
- Radix-2 recursive (Numba JIT kernels)
- NumPy (reference)

Project: Radix-2 FFT on split real/imaginary arrays
"""

import numpy as np
import sys
import os
from datetime import datetime

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from radix2_fft import fft_complex
from fft_jit import fft_jit
from utils import (
    benchmark_function,
    compute_fft_metrics,
    generate_test_signal,
    save_benchmark_results,
    signal_energy,
    validate_fft_result,
)


IMPLEMENTATIONS = {
    'numpy': ("NumPy", np.fft.fft),
    'radix2': ("Radix-2 NumPy", fft_complex),
    'jit': ("Radix-2 JIT", fft_jit),
}


def benchmark_implementation(
    name: str,
    fft_func,
    sizes: list,
    num_warmup: int = 3,
    num_runs: int = 10
) -> dict:
    """
    Benchmark an FFT implementation across multiple sizes.

    Args:
        name: Implementation name
        fft_func: FFT function to benchmark (complex array in, complex out)
        sizes: List of FFT sizes
        num_warmup: Warmup runs (the first one compiles JIT kernels)
        num_runs: Timed runs

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
        real, imag = generate_test_signal(N, 'random', dtype=np.float64)
        x = real + 1j * imag

        try:
            stats = benchmark_function(
                fft_func, args=(x,), num_warmup=num_warmup, num_runs=num_runs
            )
        except Exception as e:
            print(f"  Warning: {name} failed for N={N}: {e}")
            results['times_ms'].append(None)
            results['gflops'].append(None)
            results['bandwidth_gb_s'].append(None)
            continue

        median_time_ms = stats['median_ms']
        metrics = compute_fft_metrics(N, median_time_ms)

        results['times_ms'].append(median_time_ms)
        results['gflops'].append(metrics['gflops'])
        results['bandwidth_gb_s'].append(metrics['bandwidth_gb_s'])

    return results


def validate_implementations(sizes: list, tolerance: float = 1e-2) -> bool:
    """
    Check every implementation against np.fft.fft before timing it.

    The radix-2 versions compute in float32, so the tolerance is loose.
    """
    print("Validating implementations against NumPy...")
    print("-" * 70)

    all_passed = True
    for N in sizes:
        real, imag = generate_test_signal(N, 'random', dtype=np.float64)
        x = real + 1j * imag
        expected = np.fft.fft(x)
        energy = signal_energy(real, imag)

        for key, (name, fft_func) in IMPLEMENTATIONS.items():
            if key == 'numpy':
                continue
            result = fft_func(x)
            # Scale tolerance with the magnitude of the spectrum
            check = validate_fft_result(result, expected, tolerance * np.sqrt(N))
            # Parseval: unnormalized spectrum carries N times the energy
            energy_error = abs(signal_energy(result.real, result.imag) / N - energy) / energy
            passed = check['passed'] and energy_error < tolerance
            status = "PASS" if passed else "FAIL"
            print(f"  {name:>14} N={N:>7,}: max_error = {check['max_error']:.2e}"
                  f" energy_error = {energy_error:.2e} [{status}]")
            all_passed = all_passed and passed

    print("-" * 70)
    return all_passed


def run_benchmarks(sizes: list = None, num_runs: int = 10) -> dict:
    """Run benchmarks for all implementations."""

    if sizes is None:
        sizes = [2**k for k in range(8, 17)]  # 256 to 64K

    print("=" * 80)
    print("Radix-2 FFT Benchmark Suite")
    print("=" * 80)
    print(f"Sizes: {sizes[0]:,} to {sizes[-1]:,}")
    print(f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 80)

    all_results = {
        'timestamp': datetime.now().isoformat(),
        'sizes': sizes,
        'implementations': {}
    }

    total = len(IMPLEMENTATIONS)
    for i, (key, (name, fft_func)) in enumerate(IMPLEMENTATIONS.items(), start=1):
        print(f"[{i}/{total}] Benchmarking {name}...")
        all_results['implementations'][key] = benchmark_implementation(
            name, fft_func, sizes, num_runs=num_runs
        )

    return all_results


def print_results_table(results: dict):
    """Print benchmark results in formatted tables."""

    sizes = results['sizes']
    impls = results['implementations']

    for title, field, fmt in (
        ("EXECUTION TIME (ms)", 'times_ms', '.3f'),
        ("PERFORMANCE (GFLOPS)", 'gflops', '.3f'),
    ):
        print("\n" + "=" * 80)
        print(title)
        print("=" * 80)

        header = f"{'Size':>12}"
        for impl in impls.values():
            header += f" {impl['name']:>16}"
        print(header)
        print("-" * 80)

        for i, N in enumerate(sizes):
            row = f"{N:>12,}"
            for impl in impls.values():
                v = impl[field][i]
                if v is not None:
                    row += f" {v:>16{fmt}}"
                else:
                    row += f" {'N/A':>16}"
            print(row)

        print("=" * 80)


def main():
    """Main benchmark runner."""

    quick = '--quick' in sys.argv[1:]
    sizes = [2**k for k in range(4, 11)] if quick else [2**k for k in range(8, 17)]

    if not validate_implementations(sizes[:4]):
        print("\nValidation failed. Stopping.")
        sys.exit(1)

    results = run_benchmarks(sizes, num_runs=3 if quick else 10)
    print_results_table(results)

    output_file = os.path.join(
        os.path.dirname(__file__),
        'results',
        'benchmark.json'
    )
    save_benchmark_results(results, output_file, {
        'hardware': 'CPU',
        'python_version': sys.version
    })
    print(f"\nResults saved to: {output_file}")


if __name__ == "__main__":
    main()
