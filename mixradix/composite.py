"""Mixed-radix (2, 3, 5, 7) Cooley-Tukey discrete Fourier transform of real samples."""

from __future__ import annotations

import cmath
import math
from collections.abc import Callable, Sequence
from itertools import islice

RADICES = (2, 3, 5, 7)


def _strided(samples: Sequence[float], stride: int, offset: int, length: int) -> list[float]:
    taken = list(islice(samples, offset, offset + stride * length, stride))
    if len(taken) != length:
        raise IndexError(
            f"need {length} samples from offset {offset} with stride {stride}, "
            f"only {len(taken)} available"
        )
    return taken


def radix_n_fft(
    samples: Sequence[float], stride: int, offset: int, k: int, length: int
) -> complex:
    """Return bin ``k`` of the ``length``-point DFT of ``samples[offset::stride]``."""
    if length <= 0:
        raise ValueError(f"transform length must be positive, got {length}")
    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")
    angle = -2.0 * math.pi * k / length
    return sum(
        (
            value * cmath.exp(1j * angle * i)
            for i, value in enumerate(_strided(samples, stride, offset, length))
        ),
        0j,
    )


def radix_2_fft(samples: Sequence[float], stride: int, offset: int, k: int) -> complex:
    """Two-point DFT kernel evaluated at bin ``k``."""
    return radix_n_fft(samples, stride, offset, k, 2)


def radix_3_fft(samples: Sequence[float], stride: int, offset: int, k: int) -> complex:
    """Three-point DFT kernel evaluated at bin ``k``."""
    return radix_n_fft(samples, stride, offset, k, 3)


def radix_5_fft(samples: Sequence[float], stride: int, offset: int, k: int) -> complex:
    """Five-point DFT kernel evaluated at bin ``k``."""
    return radix_n_fft(samples, stride, offset, k, 5)


def radix_7_fft(samples: Sequence[float], stride: int, offset: int, k: int) -> complex:
    """Seven-point DFT kernel evaluated at bin ``k``."""
    return radix_n_fft(samples, stride, offset, k, 7)


_KERNELS: dict[int, Callable[[Sequence[float], int, int, int], complex]] = {
    2: radix_2_fft,
    3: radix_3_fft,
    5: radix_5_fft,
    7: radix_7_fft,
}


def _bin(samples: Sequence[float], length: int, stride: int, offset: int, k: int) -> complex:
    kernel = _KERNELS.get(length)
    if kernel is not None:
        return kernel(samples, stride, offset, k)
    radix = next((r for r in RADICES if length % r == 0), None)
    if radix is None:
        return radix_n_fft(samples, stride, offset, k, length)
    sub_length = length // radix
    return sum(
        (
            cmath.exp(-2j * math.pi * i * k / length)
            * _bin(samples, sub_length, stride * radix, offset + i * stride, k)
            for i in range(radix)
        ),
        0j,
    )


def fft(samples: Sequence[float]) -> list[complex]:
    """Return the full DFT of ``samples`` using mixed-radix decomposition."""
    values = list(samples)
    length = len(values)
    return [_bin(values, length, 1, 0, k) for k in range(length)]