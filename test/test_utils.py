"""
Utility Function Tests
"""

import os
import sys
import time

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from radix2_fft import fft
from utils import (
    Timer,
    benchmark_function,
    compute_fft_metrics,
    format_size,
    generate_test_signal,
    load_benchmark_results,
    save_benchmark_results,
    signal_energy,
    validate_fft_result,
)


def test_validate_fft_result():
    expected = np.array([1 + 1j, 2 - 1j, 0j, 4j])
    result = expected + np.array([0, 1e-12, 0, 0])

    check = validate_fft_result(result, expected, tolerance=1e-10)

    assert check['passed']
    assert check['max_error'] == pytest.approx(1e-12)
    assert check['tolerance'] == 1e-10

    check = validate_fft_result(result + 1.0, expected, tolerance=1e-10)
    assert not check['passed']


def test_signal_energy_scales_by_n():
    real, imag = generate_test_signal(64, 'random', seed=11)
    xr, xi = fft(real, imag, dtype=np.float64)

    assert signal_energy(xr, xi) == pytest.approx(64 * signal_energy(real, imag), rel=1e-5)


def test_timer():
    with Timer("sleep") as t:
        time.sleep(0.01)

    assert t.name == "sleep"
    assert t.elapsed >= 0.005
    assert t.ms == pytest.approx(t.elapsed * 1000)
    assert t.us == pytest.approx(t.elapsed * 1e6)


def test_benchmark_function():
    calls = []
    stats = benchmark_function(calls.append, args=(1,), num_warmup=2, num_runs=5)

    assert len(calls) == 7
    assert stats['num_runs'] == 5
    assert stats['min_ms'] <= stats['median_ms'] <= stats['max_ms']


def test_compute_fft_metrics():
    metrics = compute_fft_metrics(1024, 1.0)

    assert metrics['N'] == 1024
    assert metrics['gflops'] == pytest.approx(5 * 1024 * 10 / 1e6)
    assert metrics['throughput_mfft_s'] == pytest.approx(1e-3)


class TestGenerateTestSignal:

    @pytest.mark.parametrize("signal_type", [
        'random', 'sine', 'cosine', 'impulse', 'square', 'chirp', 'mixed',
    ])
    def test_shapes_and_dtype(self, signal_type):
        real, imag = generate_test_signal(128, signal_type)

        assert real.shape == imag.shape == (128,)
        assert real.dtype == imag.dtype == np.float32

    def test_square_is_the_demo_vector(self):
        real, imag = generate_test_signal(4, 'square')

        np.testing.assert_array_equal(real, [1.0, 1.0, -1.0, -1.0])
        np.testing.assert_array_equal(imag, np.zeros(4))

    def test_impulse_position(self):
        real, imag = generate_test_signal(16, 'impulse', position=3)
        assert np.argmax(real) == 3 and real.sum() == 1.0

    def test_seeded_random_is_reproducible(self):
        a = generate_test_signal(32, 'random', seed=1)
        b = generate_test_signal(32, 'random', seed=1)
        np.testing.assert_array_equal(a[0], b[0])

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            generate_test_signal(16, 'sawtooth')


def test_save_and_load_benchmark_results(tmp_path):
    filename = tmp_path / 'nested' / 'results.json'
    results = {
        'sizes': np.array([8, 16]),
        'times_ms': [np.float64(0.5), None],
        'count': np.int64(3),
        'ok': np.bool_(True),
    }

    save_benchmark_results(results, str(filename), {'hardware': 'test'})
    data = load_benchmark_results(str(filename))

    assert data['metadata'] == {'hardware': 'test'}
    assert data['results'] == {
        'sizes': [8, 16],
        'times_ms': [0.5, None],
        'count': 3,
        'ok': True,
    }
    assert 'timestamp' in data


@pytest.mark.parametrize("n,label", [
    (256, '256'), (1024, '1K'), (65536, '64K'), (1 << 20, '1M'), (1536, '1536'),
])
def test_format_size(n, label):
    assert format_size(n) == label
