"""Sine-wave synthesis, half-spectrum analysis, a closed-form 5-point DFT and twiddle tables."""

from __future__ import annotations

import argparse
import cmath
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


def generate_wave(
    frequencies: Sequence[float],
    amplitudes: Sequence[float],
    sample_count: int,
    sampling_frequency: float,
) -> list[float]:
    """Return ``sample_count`` samples of a sum of sines taken at ``sampling_frequency``."""
    tones = list(zip(frequencies, amplitudes))
    if len(frequencies) != len(amplitudes):
        raise ValueError(
            f"{len(frequencies)} frequencies given but {len(amplitudes)} amplitudes"
        )
    if sampling_frequency <= 0:
        raise ValueError(f"sampling frequency must be positive, got {sampling_frequency}")
    if sample_count < 0:
        raise ValueError(f"sample count must not be negative, got {sample_count}")
    step = 1.0 / sampling_frequency
    return [
        sum(
            (amp * math.sin(2 * math.pi * (j * step) * freq) for freq, amp in tones),
            0.0,
        )
        for j in range(sample_count)
    ]


def half_spectrum(samples: Sequence[float]) -> list[complex]:
    """Return the first ``len(samples) // 2`` bins of the DFT of ``samples``."""
    values = list(samples)
    n = len(values)
    return [
        sum(
            (y * cmath.exp(-2j * math.pi * k * j / n) for j, y in enumerate(values)),
            0j,
        )
        for k in range(n // 2)
    ]


def five_point_dft(samples: Sequence[float]) -> list[complex]:
    """Return the 5-point DFT of five real samples, using conjugate symmetry for bins 3 and 4."""
    values = list(samples)
    if len(values) != 5:
        raise ValueError(f"5-point transform needs exactly 5 samples, got {len(values)}")

    def bin_at(k: int) -> complex:
        return sum(
            (y * cmath.exp(-2j * math.pi * j * k / 5) for j, y in enumerate(values)), 0j
        )

    first, second = bin_at(1), bin_at(2)
    return [
        complex(sum(values), 0.0),
        first,
        second,
        second.conjugate(),
        first.conjugate(),
    ]


def twiddle_table(radix: int) -> list[list[complex]]:
    """Return the ``radix`` x ``radix`` table of factors ``exp(-2*pi*i*row*col/radix)``."""
    if radix <= 0:
        raise ValueError(f"radix must be positive, got {radix}")
    return [
        [cmath.exp(-2j * math.pi * row * col / radix) for col in range(radix)]
        for row in range(radix)
    ]


@dataclass(frozen=True)
class _WaveSpec:
    sampling_frequency: int
    sample_count: int
    frequencies: list[int]
    amplitudes: list[float]


def _read_spec(text: str) -> _WaveSpec:
    tokens = text.split()
    if len(tokens) < 3:
        raise ValueError("expected sampling frequency, sample count and number of frequencies")
    sampling_frequency, sample_count, tone_count = (int(token) for token in tokens[:3])
    if tone_count < 0:
        raise ValueError(f"number of frequencies must not be negative, got {tone_count}")
    rest = tokens[3:]
    if len(rest) < 2 * tone_count:
        raise ValueError(f"expected {tone_count} frequencies and {tone_count} amplitudes")
    frequencies = [int(token) for token in rest[:tone_count]]
    amplitudes = [float(token) for token in rest[tone_count : 2 * tone_count]]
    return _WaveSpec(sampling_frequency, sample_count, frequencies, amplitudes)


def _twiddle_report(radix: int) -> str:
    parts = []
    for row, factors in enumerate(twiddle_table(radix)):
        cosines = "".join(f"cos[{row * col}]: {w.real:f}, " for col, w in enumerate(factors))
        sines = "".join(f"sin[{row * col}]: {w.imag:f}, " for col, w in enumerate(factors))
        parts.append(f"\n[{cosines}]\n[{sines}]\n")
    return "".join(parts)


def _spectrum_report(spec: _WaveSpec) -> str:
    lines = [
        f"sampling frequency: {spec.sampling_frequency} \n"
        f" No of samples:{spec.sample_count} \n"
        f" No of frequencies:{len(spec.frequencies)}"
    ]
    lines.extend(
        f"freq[{number}]: {freq}, amplitude[{number}]:{amp:f}"
        for number, (freq, amp) in enumerate(zip(spec.frequencies, spec.amplitudes), start=1)
    )
    samples = generate_wave(
        spec.frequencies, spec.amplitudes, spec.sample_count, spec.sampling_frequency
    )
    scale = spec.sample_count / 2
    for index, value in enumerate(half_spectrum(samples)):
        amplitude = abs(value) / scale
        phase = math.degrees(cmath.phase(value))
        lines.append(
            f"frequency: {index}, frequency amp: {amplitude:f}, "
            f"frequency phase(degree): {phase:f}"
        )
    return "\n".join(lines) + "\n\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Synthesise a wave from a description file and print its half spectrum."""
    parser = argparse.ArgumentParser(
        prog="mixradix-waves",
        description="Print the spectrum of a synthesised sum of sines, or a twiddle table.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file with sampling frequency, sample count, tone count, "
        "frequencies and amplitudes (default: stdin)",
    )
    parser.add_argument("-o", "--output", default="-", help="output file (default: stdout)")
    parser.add_argument(
        "--twiddle", type=int, metavar="RADIX", help="print the twiddle table of RADIX instead"
    )
    args = parser.parse_args(argv)

    try:
        if args.twiddle is not None:
            report = _twiddle_report(args.twiddle)
        else:
            text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
            report = _spectrum_report(_read_spec(text))
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if args.output == "-":
        sys.stdout.write(report)
    else:
        Path(args.output).write_text(report)
    return 0