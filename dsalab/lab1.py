"""Array exercises: mean of non-zero digits and compaction outside a range."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Iterable, Optional, Sequence

from dsalab.array import Array


def random_digits(count: int, rng: Optional[random.Random] = None) -> Array:
    """Return an array of ``count`` random digits from 0 to 9."""
    rng = rng if rng is not None else random.Random()
    digits = Array(count)
    for position in range(count):
        digits[position] = rng.randrange(10)
    return digits


def mean_of_nonzero(values: Iterable[float]) -> float:
    """Return the mean of the non-zero values, or NaN if there are none."""
    nonzero = [value for value in values if value != 0]
    if not nonzero:
        return math.nan
    return sum(nonzero) / len(nonzero)


def compact_outside(values: Sequence[int], low: int, high: int) -> list[int]:
    """Keep values outside ``[low, high]`` in order, padding with zeros."""
    kept = [value for value in values if value < low or value > high]
    return kept + [0] * (len(values) - len(kept))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the two array sizes and the range bounds from stdin and run both tasks."""
    parser = argparse.ArgumentParser(description="Random array exercises.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        first_size = int(next(tokens))
        rng = random.Random(args.seed)
        print(f"{mean_of_nonzero(random_digits(first_size, rng)):g}")
        second_size = int(next(tokens))
        low = int(next(tokens))
        high = int(next(tokens))
    except StopIteration:
        print("not enough input", file=sys.stderr)
        return 1

    compacted = compact_outside(list(random_digits(second_size, rng)), low, high)
    print("".join(f"{value} " for value in compacted), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())