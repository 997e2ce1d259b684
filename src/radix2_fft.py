"""
Recursive Radix-2 FFT on Split Real/Imaginary Arrays

This module provides the NumPy reference implementation of the radix-2
Decimation-in-Frequency (DIF) Fast Fourier Transform. The signal is held
as two float arrays (real and imaginary parts) that are transformed in
place; a bit-reversal permutation restores natural bin order afterwards.

Output is unnormalized: callers divide by N if they need to.

Project: Radix-2 FFT on split real/imaginary arrays
"""

import logging
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class FFTError(ValueError):
    """Base class for transform precondition violations."""


class InvalidSize(FFTError):
    """Transform size is zero or not an exact power of two."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"FFT size {n} must be a power of 2")


class LengthMismatch(FFTError):
    """Real/imaginary arrays disagree with each other or with n."""

    def __init__(self, n: int, real_len: int, imag_len: int):
        self.n = n
        self.real_len = real_len
        self.imag_len = imag_len
        super().__init__(
            f"Signal lengths real={real_len}, imag={imag_len} do not match n={n}"
        )


def is_power_of_two(n: int) -> bool:
    """Check if n is a power of 2."""
    return n > 0 and (n & (n - 1)) == 0


def check_array(name: str, data) -> None:
    if not isinstance(data, np.ndarray) or data.ndim != 1:
        raise TypeError(f"{name} must be a 1-D numpy array, got {type(data).__name__}")


def validate_signal(n: int, real: np.ndarray, imag: np.ndarray) -> None:
    """
    Check the transform preconditions.

    The size depends only on n, so it is checked before the arrays.

    Raises:
        InvalidSize: n is not a positive power of two
        TypeError: real or imag is not a 1-D floating point numpy array
        LengthMismatch: len(real) != len(imag), or either differs from n
    """
    if not is_power_of_two(n):
        raise InvalidSize(n)

    for name, data in (("real", real), ("imag", imag)):
        check_array(name, data)
        if not np.issubdtype(data.dtype, np.floating):
            raise TypeError(f"{name} must have a floating dtype, got {data.dtype}")

    if len(real) != n or len(imag) != n:
        raise LengthMismatch(n, len(real), len(imag))


# =============================================================================
# Butterfly Stage
# =============================================================================

def butterfly_stage(real: np.ndarray, imag: np.ndarray, n: int, n_half: int) -> None:
    """
    One DIF butterfly level over a block of size n, in place.

    For every k in [0, n_half):
        d            = x[k] - x[n_half + k]
        x[k]         = x[k] + x[n_half + k]
        x[n_half + k] = d * W,    W = exp(-2*pi*i*k/n)

    All k of the level are evaluated at once as array expressions.

    Args:
        real: Real components of the block (modified in-place)
        imag: Imaginary components of the block (modified in-place)
        n: Block size
        n_half: n // 2
    """
    k = np.arange(n_half)
    angle = 2.0 * np.pi * k / n
    wr = np.cos(angle)
    wi = -np.sin(angle)

    top_r, bot_r = real[:n_half], real[n_half:n]
    top_i, bot_i = imag[:n_half], imag[n_half:n]

    # a - b
    diff_r = top_r - bot_r
    diff_i = top_i - bot_i

    # a + b
    top_r += bot_r
    top_i += bot_i

    # W(a - b)
    bot_r[:] = diff_r * wr - diff_i * wi
    bot_i[:] = diff_i * wr + diff_r * wi


# =============================================================================
# Recursive Transform Driver
# =============================================================================

def _transform_recursive(n: int, real: np.ndarray, imag: np.ndarray, trace: bool) -> None:
    if trace:
        logger.debug("size n=%d real=%s imag=%s", n, real, imag)

    if n <= 1:
        return

    n_half = n // 2
    butterfly_stage(real, imag, n, n_half)

    # Slices are views, so each half is transformed in place
    _transform_recursive(n_half, real[:n_half], imag[:n_half], trace)
    _transform_recursive(n_half, real[n_half:n], imag[n_half:n], trace)


def transform(n: int, real: np.ndarray, imag: np.ndarray, trace: bool = False) -> None:
    """
    Recursive radix-2 DIF FFT, in place.

    Applies the butterfly to the whole block and then recurses on the
    first and second halves. The result is left in bit-reversed order:
    apply bit_reverse_permute() to both arrays to get natural bin order.

    Args:
        n: Transform size (power of 2)
        real: Real components, length n (modified in-place)
        imag: Imaginary components, length n (modified in-place)
        trace: Log the block contents at every recursion level (DEBUG)

    Raises:
        InvalidSize: n is 0 or not a power of 2
        LengthMismatch: array lengths differ or do not equal n
    """
    validate_signal(n, real, imag)
    _transform_recursive(n, real, imag, trace)


# =============================================================================
# Reorder Stage
# =============================================================================

def bit_reverse_permute(data: np.ndarray) -> None:
    """
    In-place bit-reversal permutation of one sequence.

    Walks j = 1 .. N-2 while keeping i equal to the bit-reversal of j,
    advanced by XOR-ing a descending mask (the reversed-increment trick),
    and swaps data[i] and data[j] once per pair.

    Example:
        [1, 2, 3, 4] -> [1, 3, 2, 4]

    Args:
        data: Sequence of length N (power of 2), modified in-place

    Raises:
        InvalidSize: len(data) >= 2 and not a power of 2
    """
    check_array("data", data)
    N = len(data)

    if N < 2:
        return

    if not is_power_of_two(N):
        raise InvalidSize(N)

    i = 0
    for j in range(1, N - 1):
        k = N >> 1
        i ^= k
        while k > i:
            k >>= 1
            i ^= k

        if j < i:
            data[i], data[j] = data[j], data[i]


# =============================================================================
# Convenience Wrappers
# =============================================================================

def fft(
    real,
    imag=None,
    dtype=np.float32,
    trace: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Out-of-place FFT in natural bin order.

    Copies the input into new arrays, runs transform() and then
    bit_reverse_permute() on both parts.

    Args:
        real: Real components (array-like, length must be power of 2)
        imag: Imaginary components; zeros if omitted
        dtype: Floating dtype used for the computation
        trace: Forwarded to transform()

    Returns:
        (real, imag) of the unnormalized spectrum

    Raises:
        TypeError: real or imag is complex (use fft_complex() instead)
    """
    for name, data in (("real", real), ("imag", imag)):
        if data is not None and np.iscomplexobj(data):
            raise TypeError(f"{name} is complex; pass complex input to fft_complex()")

    xr = np.array(real, dtype=dtype).ravel()
    if imag is None:
        xi = np.zeros_like(xr)
    else:
        xi = np.array(imag, dtype=dtype).ravel()

    transform(len(xr), xr, xi, trace=trace)
    bit_reverse_permute(xr)
    bit_reverse_permute(xi)
    return xr, xi


def ifft(
    real,
    imag,
    dtype=np.float32
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Inverse FFT using the forward FFT.

    IFFT(X) = (1/N) * conj(FFT(conj(X)))

    Args:
        real: Real components of the spectrum
        imag: Imaginary components of the spectrum

    Returns:
        (real, imag) of the time domain signal
    """
    xr, xi = fft(real, -np.asarray(imag), dtype=dtype)
    N = len(xr)
    return xr / N, -xi / N


def fft_complex(x: np.ndarray, dtype=np.float64) -> np.ndarray:
    """
    FFT of a complex array, for comparison with np.fft.fft.

    Args:
        x: Input array (length must be power of 2)
        dtype: Floating dtype used for the split arrays

    Returns:
        Complex spectrum in natural order
    """
    x = np.asarray(x, dtype=np.complex128)
    xr, xi = fft(x.real, x.imag, dtype=dtype)
    return xr.astype(np.float64) + 1j * xi.astype(np.float64)


def ifft_complex(X: np.ndarray, dtype=np.float64) -> np.ndarray:
    """Inverse of fft_complex()."""
    X = np.asarray(X, dtype=np.complex128)
    N = len(X)
    return np.conj(fft_complex(np.conj(X), dtype=dtype)) / N


if __name__ == "__main__":
    # Quick validation
    print("Radix-2 FFT - Quick Test")
    print("-" * 40)

    n = 4
    xr = np.array([1.0, 1.0, -1.0, -1.0], dtype=np.float32)
    xi = np.zeros(n, dtype=np.float32)

    transform(n, xr, xi)
    bit_reverse_permute(xr)
    bit_reverse_permute(xi)

    print("FFT result (without normalization):")
    for r, i in zip(xr, xi):
        print(f"  {r:+.4f} {i:+.4f}i")

    print()
    for N in (8, 64, 1024):
        x = np.random.randn(N) + 1j * np.random.randn(N)
        error = np.max(np.abs(fft_complex(x) - np.fft.fft(x)))
        print(f"N={N:>5}: max error vs NumPy = {error:.2e}")
