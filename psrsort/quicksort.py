"""Single-threaded baseline: shuffle a range and time a plain sort."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence

from psrsort.psrs import format_elapsed

USAGE = "Command requires the number of array elements"


def swap_shuffled_range(n: int, rng: random.Random | None = None) -> list[int]:
    """Return 0 .. n-1 mixed by swapping each position with a random one."""
    if n < 0:
        raise ValueError("size must not be negative")
    rng = rng or random.Random()
    numbers = list(range(n))
    for index in range(n):
        other = rng.randrange(n)
        numbers[index], numbers[other] = numbers[other], numbers[index]
    return numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a shuffled array, sort it and report the total time."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        n = int(args[0])
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1

    start = time.perf_counter()
    try:
        numbers = swap_shuffled_range(n)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    numbers.sort()
    print(f"Total execution time: {format_elapsed(time.perf_counter() - start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())