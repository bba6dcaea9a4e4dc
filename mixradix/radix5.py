"""Radix-5 transforms: split-and-combine recursion, bin-by-bin recursion and an in-place form."""

from __future__ import annotations

import argparse
import cmath
import math
import random
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from mixradix.composite import radix_5_fft

_ROOTS_OF_FIVE = tuple(cmath.exp(-2j * math.pi * m / 5) for m in range(5))


def _require_power_of_five(length: int) -> None:
    reduced = length
    while reduced > 1 and reduced % 5 == 0:
        reduced //= 5
    if length < 5 or reduced != 1:
        raise ValueError(f"length must be a power of five, got {length}")


def split_mod5(samples: Sequence[float], remainder: int) -> list[float]:
    """Return the ``len(samples) // 5`` samples whose index is ``remainder`` modulo 5."""
    if not 0 <= remainder < 5:
        raise ValueError(f"remainder must be in 0..4, got {remainder}")
    values = list(samples)
    return values[remainder::5][: len(values) // 5]


def radix5_kernel(values: Sequence[complex]) -> list[complex]:
    """Return the 5-point DFT of five values."""
    taps = list(values)
    if len(taps) != 5:
        raise ValueError(f"radix-5 kernel needs exactly 5 values, got {len(taps)}")
    return [
        sum((v * _ROOTS_OF_FIVE[(j * k) % 5] for j, v in enumerate(taps)), 0j)
        for k in range(5)
    ]


def five_point_twiddle(inputs: Sequence[complex], index: int, length: int) -> complex:
    """Combine five sub-transform values into output bin ``index`` of a ``length``-point DFT."""
    taps = list(inputs)
    if len(taps) != 5:
        raise ValueError(f"need exactly 5 inputs, got {len(taps)}")
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    return sum(
        (v * cmath.exp(-2j * math.pi * index * j / length) for j, v in enumerate(taps)),
        0j,
    )


def twiddle_multiply(
    values: Sequence[complex], stride: int, length: int, radix: int
) -> list[complex]:
    """Return a copy of ``values`` whose strided positions hold the twiddled mix of the first ``radix`` taps.

    Position ``i * stride`` for ``i < length`` receives
    ``sum(values[j * stride] * exp(-2*pi*i*j/length) for j < radix)``; other positions are kept.
    """
    if stride <= 0 or length <= 0 or radix <= 0:
        raise ValueError("stride, length and radix must be positive")
    buffer = [complex(v) for v in values]
    if (max(length, radix) - 1) * stride >= len(buffer):
        raise ValueError(
            f"{len(buffer)} values are too few for length {length}, "
            f"radix {radix} and stride {stride}"
        )
    taps = buffer[: radix * stride : stride]
    buffer[: length * stride : stride] = [
        sum((t * cmath.exp(-2j * math.pi * i * j / length) for j, t in enumerate(taps)), 0j)
        for i in range(length)
    ]
    return buffer


def _digit_reverse(index: int, digits: int) -> int:
    result = 0
    for _ in range(digits):
        index, digit = divmod(index, 5)
        result = result * 5 + digit
    return result


def in_place_fft(samples: Sequence[complex]) -> list[complex]:
    """Return the DFT of a power-of-five number of samples, computed in one working buffer."""
    values = list(samples)
    n = len(values)
    _require_power_of_five(n)
    digits = round(math.log(n, 5))
    buffer = [complex(values[_digit_reverse(i, digits)]) for i in range(n)]

    span = 1
    while span < n:
        block = span * 5
        for start in range(0, n, block):
            for k in range(span):
                taps = [
                    buffer[start + k + r * span] * cmath.exp(-2j * math.pi * r * k / block)
                    for r in range(5)
                ]
                buffer[start + k : start + block : span] = radix5_kernel(taps)
        span = block
    return buffer


def _bin(samples: Sequence[float], length: int, stride: int, offset: int, k: int) -> complex:
    if length == 5:
        return radix_5_fft(samples, stride, offset, k)
    return sum(
        (
            cmath.exp(-2j * math.pi * i * k / length)
            * _bin(samples, length // 5, stride * 5, offset + i * stride, k)
            for i in range(5)
        ),
        0j,
    )


def fft(samples: Sequence[float]) -> list[complex]:
    """Return the DFT of a power-of-five number of real samples, one bin at a time."""
    values = list(samples)
    n = len(values)
    _require_power_of_five(n)
    return [_bin(values, n, 1, 0, k) for k in range(n)]


def cooley_tukey(samples: Sequence[complex]) -> list[complex]:
    """Return the DFT of a power-of-five number of samples by splitting on index modulo 5."""
    values = list(samples)
    n = len(values)
    _require_power_of_five(n)
    if n == 5:
        return radix5_kernel(values)
    parts = [cooley_tukey(split_mod5(values, r)) for r in range(5)]
    sub = n // 5
    return [
        five_point_twiddle([part[i % sub] for part in parts], i, n) for i in range(n)
    ]


_METHODS: dict[str, Callable[[Sequence[float]], list[complex]]] = {
    "fft": fft,
    "cooley-tukey": cooley_tukey,
    "in-place": in_place_fft,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a length, draw that many samples in 0..9 and print their radix-5 spectrum."""
    parser = argparse.ArgumentParser(
        prog="mixradix-radix5",
        description="Transform random samples whose power-of-five count is read from a file.",
    )
    parser.add_argument(
        "input", nargs="?", default="input.txt", help="file whose first token is the length"
    )
    parser.add_argument(
        "--method", choices=sorted(_METHODS), default="fft", help="transform to use"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the sample generator")
    args = parser.parse_args(argv)

    try:
        tokens = Path(args.input).read_text().split()
        if not tokens:
            raise ValueError("input is empty")
        length = int(tokens[0])
        _require_power_of_five(length)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    samples = [float(rng.randrange(10)) for _ in range(length)]
    spectrum = _METHODS[args.method](samples)

    print(f"length: {length}")
    print("[ " + "".join(f"{v:.0f}, " for v in samples) + "]")
    for value in spectrum:
        print(f"{value.real:f},\t{value.imag:f}j")
    return 0