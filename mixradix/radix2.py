"""Radix-2 decimation-in-time FFT, a direct DFT and a 10-point transform built from 5-point kernels."""

from __future__ import annotations

import argparse
import cmath
import math
import sys
from collections.abc import Sequence
from pathlib import Path


def split_even(samples: Sequence[float]) -> list[float]:
    """Return the even-indexed samples, ``len(samples) // 2`` of them."""
    return list(samples[::2][: len(samples) // 2])


def split_odd(samples: Sequence[float]) -> list[float]:
    """Return the odd-indexed samples, ``len(samples) // 2`` of them."""
    return list(samples[1::2][: len(samples) // 2])


def dft(samples: Sequence[complex]) -> list[complex]:
    """Return the discrete Fourier transform computed directly from its definition."""
    values = list(samples)
    n = len(values)
    return [
        sum(
            (x * cmath.exp(-2j * math.pi * k * j / n) for j, x in enumerate(values)),
            0j,
        )
        for k in range(n)
    ]


def butterfly(
    even: Sequence[complex], odd: Sequence[complex], length: int
) -> list[complex]:
    """Combine the transforms of the even and odd halves into a ``length``-point transform."""
    if length <= 0 or length % 2:
        raise ValueError(f"butterfly length must be a positive even number, got {length}")
    half = length // 2
    if len(even) < half or len(odd) < half:
        raise ValueError(f"each half needs at least {half} values")
    twiddled = [
        cmath.exp(-2j * math.pi * i / length) * value
        for i, value in enumerate(odd[:half])
    ]
    first = [e + t for e, t in zip(even, twiddled)]
    second = [e - t for e, t in zip(even, twiddled)]
    return first + second


def radix5_fft(samples: Sequence[float]) -> list[complex]:
    """Return the 5-point DFT of five real samples using the symmetric closed form."""
    if len(samples) != 5:
        raise ValueError(f"radix-5 transform needs exactly 5 samples, got {len(samples)}")
    y0, y1, y2, y3, y4 = samples
    frac = -math.pi / 5
    cos2, cos4 = math.cos(2 * frac), math.cos(4 * frac)
    sin2, sin4 = math.sin(2 * frac), math.sin(4 * frac)

    dc = y0 + y1 + y2 + y3 + y4
    real1 = y0 + (y1 + y4) * cos2 + (y2 + y3) * cos4
    imag1 = (y1 - y4) * sin2 + (y2 - y3) * sin4
    real2 = y0 + (y1 + y4) * cos4 + (y2 + y3) * cos2
    imag2 = (y1 - y4) * sin4 - (y2 - y3) * sin2
    return [
        complex(dc, 0.0),
        complex(real1, imag1),
        complex(real2, imag2),
        complex(real2, -imag2),
        complex(real1, -imag1),
    ]


def point10_fft(samples: Sequence[float]) -> list[complex]:
    """Return the 10-point DFT from two 5-point transforms and one radix-2 stage."""
    if len(samples) != 10:
        raise ValueError(f"10-point transform needs exactly 10 samples, got {len(samples)}")
    return butterfly(
        radix5_fft(split_even(samples)), radix5_fft(split_odd(samples)), 10
    )


def cooley_tukey(samples: Sequence[complex]) -> list[complex]:
    """Return the DFT of a power-of-two number of samples by recursive radix-2 splitting."""
    n = len(samples)
    if n == 0 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")
    if n == 1:
        return [complex(samples[0])]
    return butterfly(
        cooley_tukey(split_even(samples)), cooley_tukey(split_odd(samples)), n
    )


def _read_samples(text: str) -> list[float]:
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    count = int(tokens[0])
    values = [float(token) for token in tokens[1 : 1 + count]]
    if count < 0 or len(values) != count:
        raise ValueError(f"expected {count} samples, found {len(values)}")
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read a sample count and samples, then print their 10-point transform."""
    parser = argparse.ArgumentParser(
        prog="mixradix-radix2",
        description="Print the 10-point Fourier transform of the samples in a file.",
    )
    parser.add_argument(
        "input", nargs="?", default="-", help="file holding the count and samples (default: stdin)"
    )
    parser.add_argument("-o", "--output", default="-", help="output file (default: stdout)")
    args = parser.parse_args(argv)

    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
        spectrum = point10_fft(_read_samples(text))
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    lines = [f"[{value.real:f}, {value.imag:f} j, ]" for value in spectrum]
    report = "\n".join(lines) + "\n\n"
    if args.output == "-":
        sys.stdout.write(report)
    else:
        Path(args.output).write_text(report)
    return 0