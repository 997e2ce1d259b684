"""
Utility Functions for FFT Project

Common utilities for validation, timing, and test signals.

Project: Radix-2 FFT on split real/imaginary arrays
"""

import numpy as np
import time
from typing import Callable, Dict, Any, Tuple
import json
import os
from datetime import datetime


def validate_fft_result(
    result: np.ndarray,
    expected: np.ndarray,
    tolerance: float = 1e-10
) -> Dict[str, Any]:
    """
    Validate FFT result against expected output.

    Returns:
        Dictionary with validation metrics
    """
    abs_diff = np.abs(result - expected)

    return {
        'max_error': float(np.max(abs_diff)),
        'mean_error': float(np.mean(abs_diff)),
        'rms_error': float(np.sqrt(np.mean(abs_diff**2))),
        'passed': bool(np.max(abs_diff) < tolerance),
        'tolerance': tolerance
    }


def signal_energy(real: np.ndarray, imag: np.ndarray) -> float:
    """Sum of squared magnitudes of a split complex signal."""
    real = np.asarray(real, dtype=np.float64)
    imag = np.asarray(imag, dtype=np.float64)
    return float(np.sum(real**2 + imag**2))


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, name: str = ""):
        self.name = name
        self.elapsed = 0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start

    @property
    def ms(self) -> float:
        return self.elapsed * 1000

    @property
    def us(self) -> float:
        return self.elapsed * 1e6


def benchmark_function(
    func: Callable,
    args: tuple = (),
    kwargs: dict = None,
    num_warmup: int = 5,
    num_runs: int = 20
) -> Dict[str, float]:
    """
    Benchmark a function with warmup and multiple runs.

    Args:
        func: Function to benchmark
        args: Positional arguments
        kwargs: Keyword arguments
        num_warmup: Number of warmup runs (also triggers JIT compilation)
        num_runs: Number of timed runs

    Returns:
        Dictionary with timing statistics
    """
    kwargs = kwargs or {}

    # Warmup
    for _ in range(num_warmup):
        func(*args, **kwargs)

    # Timed runs
    times = []
    for _ in range(num_runs):
        with Timer() as t:
            func(*args, **kwargs)
        times.append(t.elapsed)

    times = np.array(times) * 1000  # Convert to ms

    return {
        'min_ms': float(np.min(times)),
        'max_ms': float(np.max(times)),
        'mean_ms': float(np.mean(times)),
        'median_ms': float(np.median(times)),
        'std_ms': float(np.std(times)),
        'num_runs': num_runs
    }


def compute_fft_metrics(N: int, time_ms: float) -> Dict[str, float]:
    """
    Compute FFT performance metrics.

    Args:
        N: FFT size
        time_ms: Execution time in milliseconds

    Returns:
        Dictionary with performance metrics
    """
    # FFT has 5N*log2(N) floating point operations (approx)
    flops = 5 * N * np.log2(N)

    # Memory: read and write N complex values as two float32 arrays
    bytes_accessed = 2 * N * 8

    time_s = time_ms / 1000

    return {
        'N': N,
        'time_ms': time_ms,
        'gflops': float(flops / (time_s * 1e9)),
        'bandwidth_gb_s': float(bytes_accessed / (time_s * 1e9)),
        'throughput_mfft_s': float(1 / (time_s * 1e6))  # Million FFTs per second
    }


def generate_test_signal(
    N: int,
    signal_type: str = 'random',
    dtype=np.float32,
    **kwargs
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate split real/imaginary test signals for FFT testing.

    Args:
        N: Signal length
        signal_type: One of 'random', 'sine', 'cosine', 'impulse',
                     'square', 'chirp', 'mixed'
        dtype: Floating dtype of the returned arrays
        **kwargs: Additional parameters for signal generation

    Returns:
        (real, imag) arrays of length N
    """
    n = np.arange(N)

    if signal_type == 'random':
        seed = kwargs.get('seed')
        rng = np.random.default_rng(seed)
        x = rng.standard_normal(N) + 1j * rng.standard_normal(N)

    elif signal_type == 'sine':
        freq = kwargs.get('freq', 8)
        x = np.sin(2 * np.pi * freq * n / N).astype(np.complex128)

    elif signal_type == 'cosine':
        freq = kwargs.get('freq', 8)
        x = np.cos(2 * np.pi * freq * n / N).astype(np.complex128)

    elif signal_type == 'impulse':
        position = kwargs.get('position', 0)
        x = np.zeros(N, dtype=np.complex128)
        x[position] = 1

    elif signal_type == 'square':
        # [1, 1, -1, -1] for N=4: first half high, second half low
        x = np.where(n < N // 2, 1.0, -1.0).astype(np.complex128)

    elif signal_type == 'chirp':
        # Frequency sweep from f0 to f1
        f0 = kwargs.get('f0', 0)
        f1 = kwargs.get('f1', N // 4)
        phase = 2 * np.pi * (f0 * n / N + (f1 - f0) * n**2 / (2 * N**2))
        x = np.exp(1j * phase)

    elif signal_type == 'mixed':
        # Sum of multiple sinusoids
        freqs = kwargs.get('freqs', [4, 16, 32])
        amps = kwargs.get('amps', [1.0] * len(freqs))
        x = np.zeros(N, dtype=np.complex128)
        for f, a in zip(freqs, amps):
            x += a * np.exp(2j * np.pi * f * n / N)

    else:
        raise ValueError(f"Unknown signal type: {signal_type}")

    return x.real.astype(dtype), x.imag.astype(dtype)


def save_benchmark_results(
    results: Dict[str, Any],
    filename: str,
    metadata: Dict[str, Any] = None
):
    """Save benchmark results to JSON file."""
    output = {
        'timestamp': datetime.now().isoformat(),
        'metadata': metadata or {},
        'results': results
    }

    # Convert numpy types to Python types
    def convert(obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, dict):
            return {k: convert(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [convert(v) for v in obj]
        return obj

    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w') as f:
        json.dump(convert(output), f, indent=2)


def load_benchmark_results(filename: str) -> Dict[str, Any]:
    """Load benchmark results from JSON file."""
    with open(filename, 'r') as f:
        return json.load(f)


def format_size(n: int) -> str:
    """Short label for an FFT size: 1024 -> '1K', 1048576 -> '1M'."""
    if n >= 1 << 20 and n % (1 << 20) == 0:
        return f"{n >> 20}M"
    elif n >= 1 << 10 and n % (1 << 10) == 0:
        return f"{n >> 10}K"
    return str(n)
