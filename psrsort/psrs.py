"""Parallel sorting by regular sampling (PSRS) with a timing command."""

from __future__ import annotations

import random
import sys
import time
from bisect import bisect_right
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

USAGE = "Command requires the number of array elements, and the number of processors (threads)"


def format_elapsed(seconds: float) -> str:
    """Render a duration as whole seconds plus leftover microseconds."""
    total_us = max(0, round(seconds * 1_000_000))
    whole, micro = divmod(total_us, 1_000_000)
    return f"{whole} seconds and {micro} microseconds"


def split_blocks(values: Sequence[int], p: int) -> list[list[int]]:
    """Split values into p contiguous blocks; the first len % p blocks get one extra item."""
    if p < 1:
        raise ValueError("number of blocks must be at least 1")
    base, remainder = divmod(len(values), p)
    blocks = []
    start = 0
    for index in range(p):
        size = base + (1 if index < remainder else 0)
        blocks.append(list(values[start:start + size]))
        start += size
    return blocks


def regular_samples(block: Sequence[int], w: int, p: int) -> list[int]:
    """Take p samples from a sorted block at local indices 0, w, 2w, ..., (p-1)w."""
    if p < 1:
        raise ValueError("number of samples must be at least 1")
    if w < 0:
        raise ValueError("sample stride must not be negative")
    if not block or (p - 1) * w >= len(block):
        raise ValueError("block is too small to take the requested samples")
    return [block[i * w] for i in range(p)]


def choose_pivots(samples: Sequence[int], p: int) -> list[int]:
    """Pick p - 1 pivots from the p * p regular samples."""
    if p < 1:
        raise ValueError("number of processors must be at least 1")
    if len(samples) != p * p:
        raise ValueError(f"expected {p * p} samples, got {len(samples)}")
    ordered = sorted(samples)
    rho = p // 2
    return [ordered[p * mult + rho - 1] for mult in range(1, p)]


def partition_block(block: Sequence[int], pivots: Sequence[int]) -> list[list[int]]:
    """Cut a sorted block into len(pivots) + 1 pieces at the pivots (pivot values go left)."""
    pieces = []
    start = 0
    for pivot in pivots:
        end = max(start, bisect_right(block, pivot, lo=start))
        pieces.append(list(block[start:end]))
        start = end
    pieces.append(list(block[start:]))
    return pieces


def _sort_and_sample(block: list[int], w: int, p: int) -> tuple[list[int], list[int]]:
    ordered = sorted(block)
    return ordered, regular_samples(ordered, w, p)


def _psrs_timed(values: Sequence[int], p: int) -> tuple[list[int], float, float]:
    """Sort values and return the result with the phase 2 and phase 3/4 durations."""
    if p < 1:
        raise ValueError("number of processors must be at least 1")
    n = len(values)
    if n < p:
        raise ValueError("need at least as many elements as processors")
    w = n // (p * p)
    blocks = split_blocks(values, p)

    with ThreadPoolExecutor(max_workers=p) as pool:
        phase_one = [pool.submit(_sort_and_sample, block, w, p) for block in blocks]

        started = time.perf_counter()
        sorted_blocks = []
        samples = []
        for future in phase_one:
            ordered, block_samples = future.result()
            sorted_blocks.append(ordered)
            samples.extend(block_samples)
        pivots = choose_pivots(samples, p)
        phase_two = time.perf_counter() - started

        started = time.perf_counter()
        partitions = list(pool.map(lambda b: partition_block(b, pivots), sorted_blocks))

        def merge(owner: int) -> list[int]:
            gathered = [item for pieces in partitions for item in pieces[owner]]
            gathered.sort()
            return gathered

        result = [item for part in pool.map(merge, range(p)) for item in part]
        phase_three_four = time.perf_counter() - started

    return result, phase_two, phase_three_four


def psrs_sort(values: Sequence[int], p: int) -> list[int]:
    """Sort values with PSRS using p worker threads."""
    result, _, _ = _psrs_timed(values, p)
    return result


def shuffled_range(n: int, rng: random.Random | None = None) -> list[int]:
    """Return 0 .. n-1 in a random order."""
    if n < 0:
        raise ValueError("size must not be negative")
    numbers = list(range(n))
    (rng or random.Random()).shuffle(numbers)
    return numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a shuffled array, sort it with PSRS and report phase timings."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        n, p = int(args[0]), int(args[1])
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1

    start = time.perf_counter()
    try:
        numbers = shuffled_range(n)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Setup execution time: {format_elapsed(time.perf_counter() - start)}")

    try:
        _, phase_two, phase_three_four = _psrs_timed(numbers, p)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Phases 2 execution time {format_elapsed(phase_two)}")
    print(f"Phases 3/4 execution time {format_elapsed(phase_three_four)}")
    print(f"Total execution time: {format_elapsed(time.perf_counter() - start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())