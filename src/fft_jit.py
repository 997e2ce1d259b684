"""
JIT-Compiled Radix-2 FFT (Numba)

Same recursive DIF transform as radix2_fft, with the butterfly and the
bit-reversal permutation compiled to machine code by numba.njit.
Kernels work on separate real and imaginary arrays, one scalar
butterfly per loop iteration.

The recursion itself stays on the host side and launches one butterfly
kernel per block, on views of the caller's arrays.

Project: Radix-2 FFT on split real/imaginary arrays
"""

import math

import numpy as np
from numba import njit

from radix2_fft import InvalidSize, check_array, is_power_of_two, validate_signal


# =============================================================================
# Numba Kernels
# =============================================================================

@njit
def butterfly_kernel(real, imag, n, n_half):
    """
    Butterfly level kernel.

    For each k in [0, n_half):
        d = x[k] - x[n_half + k]
        x[k] = x[k] + x[n_half + k]
        x[n_half + k] = d * W

    Where W = exp(-2*pi*i*k/n) is the twiddle factor.

    Args:
        real: Real components (modified in-place)
        imag: Imaginary components (modified in-place)
        n: Block size
        n_half: Half block size
    """
    for k in range(n_half):
        # Twiddle factor: W = cos(angle) + i * wi, wi = -sin(angle)
        angle = 2.0 * math.pi * k / n
        wr = math.cos(angle)
        wi = -math.sin(angle)

        diff_r = real[k] - real[n_half + k]
        diff_i = imag[k] - imag[n_half + k]

        real[k] += real[n_half + k]
        imag[k] += imag[n_half + k]

        # Complex multiplication: (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        real[n_half + k] = diff_r * wr - diff_i * wi
        imag[n_half + k] = diff_i * wr + diff_r * wi


@njit
def bit_reverse_kernel(data):
    """
    In-place bit-reversal permutation kernel.

    i tracks the bit-reversal of j and is advanced by XOR with a
    descending mask. Each pair is swapped once (when j < i).
    """
    N = data.shape[0]
    i = 0
    for j in range(1, N - 1):
        k = N >> 1
        i ^= k
        while k > i:
            k >>= 1
            i ^= k

        if j < i:
            tmp = data[i]
            data[i] = data[j]
            data[j] = tmp


# =============================================================================
# Host Functions
# =============================================================================

def _transform_blocks(n: int, real: np.ndarray, imag: np.ndarray) -> None:
    if n <= 1:
        return

    n_half = n // 2
    butterfly_kernel(real, imag, n, n_half)
    _transform_blocks(n_half, real[:n_half], imag[:n_half])
    _transform_blocks(n_half, real[n_half:n], imag[n_half:n])


def transform_jit(n: int, real: np.ndarray, imag: np.ndarray) -> None:
    """
    In-place recursive DIF FFT using the compiled butterfly kernel.

    Output is left in bit-reversed order, as with radix2_fft.transform().

    Raises:
        InvalidSize: n is 0 or not a power of 2
        LengthMismatch: array lengths differ or do not equal n
    """
    validate_signal(n, real, imag)
    _transform_blocks(n, real, imag)


def bit_reverse_permute_jit(data: np.ndarray) -> None:
    """In-place bit-reversal permutation using the compiled kernel."""
    check_array("data", data)
    N = len(data)
    if N >= 2 and not is_power_of_two(N):
        raise InvalidSize(N)
    bit_reverse_kernel(data)


def fft_jit(x: np.ndarray, dtype=np.float32) -> np.ndarray:
    """
    JIT FFT of a complex array.

    Performs radix-2 DIF FFT using:
    1. One butterfly kernel call per block (N - 1 calls)
    2. One bit-reversal kernel call per component

    Args:
        x: Input array (complex, length must be power of 2)
        dtype: Floating dtype of the split arrays

    Returns:
        Complex spectrum in natural order (unnormalized)
    """
    x = np.asarray(x, dtype=np.complex128)
    N = len(x)

    # Separate real and imaginary parts
    x_real = np.ascontiguousarray(x.real.astype(dtype))
    x_imag = np.ascontiguousarray(x.imag.astype(dtype))

    transform_jit(N, x_real, x_imag)
    bit_reverse_kernel(x_real)
    bit_reverse_kernel(x_imag)

    return x_real.astype(np.float64) + 1j * x_imag.astype(np.float64)


def ifft_jit(X: np.ndarray, dtype=np.float32) -> np.ndarray:
    """
    Inverse FFT using the forward FFT.

    IFFT(X) = (1/N) * conj(FFT(conj(X)))
    """
    N = len(X)
    return np.conj(fft_jit(np.conj(X), dtype=dtype)) / N


def validate_jit_fft(sizes: list = None, tolerance: float = 1e-8) -> bool:
    """
    Validate the JIT FFT against NumPy.

    Args:
        sizes: List of sizes to test
        tolerance: Maximum allowed error (float64 arithmetic is used)

    Returns:
        True if all tests pass
    """
    if sizes is None:
        sizes = [8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096]

    print("Validating JIT FFT implementation...")
    print("-" * 50)

    all_passed = True

    for N in sizes:
        x = np.random.randn(N) + 1j * np.random.randn(N)

        jit_result = fft_jit(x, dtype=np.float64)
        numpy_result = np.fft.fft(x)

        max_error = np.max(np.abs(jit_result - numpy_result))
        passed = max_error < tolerance

        status = "PASS" if passed else "FAIL"
        print(f"  N={N:>6}: max_error = {max_error:.2e} [{status}]")

        if not passed:
            all_passed = False

    print("-" * 50)
    if all_passed:
        print("All validation tests PASSED")
    else:
        print("Some validation tests FAILED")

    return all_passed


if __name__ == "__main__":
    print("=" * 70)
    print("Radix-2 FFT - JIT (Numba)")
    print("=" * 70)

    if not validate_jit_fft():
        print("\nValidation failed.")
        exit(1)
