"""Command that transforms random integer samples of a length read from a file."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from mixradix.composite import fft


def main(argv: Sequence[str] | None = None) -> int:
    """Read a length, draw that many samples in 0..9 and print their spectrum."""
    parser = argparse.ArgumentParser(
        prog="mixradix",
        description="Transform random samples whose count is read from a file.",
    )
    parser.add_argument(
        "input", nargs="?", default="input.txt", help="file whose first token is the length"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the sample generator")
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text()
    except OSError:
        print("Error opening file.", file=sys.stderr)
        return 1

    tokens = text.split()
    raw = tokens[0] if tokens else ""
    try:
        length = int(raw)
    except ValueError:
        print(f"Invalid length: {raw}", file=sys.stderr)
        return 1
    print(f"Input length: {length}")
    if length <= 0:
        print(f"Invalid length: {length}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    samples = [float(rng.randrange(10)) for _ in range(length)]

    print(f"Input length: {length}")
    print("Input values: [ " + ", ".join(f"{v:g}" for v in samples) + " ]")
    spectrum = fft(samples)
    print(f"length: {length}")
    print("[ " + "".join(f"{v:.0f}, " for v in samples) + "]")
    for value in spectrum:
        print(f"{value.real:f},\t{value.imag:f}j")
    return 0