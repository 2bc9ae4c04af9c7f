# psrsort

A small benchmark of **Parallel Sorting by Regular Sampling (PSRS)**, with a
plain sequential sort as a baseline.

PSRS sorts a list with `p` workers in four phases:

1. Split the input into `p` nearly equal blocks (the first `len % p` blocks get
   one extra item), sort each one and take `p` regular samples from every
   block at local indices `0, w, 2w, ..., (p-1)w`, where `w = n // (p * p)`.
2. Sort the `p * p` samples and choose `p - 1` pivots from them.
3. Cut every sorted block into `p` partitions at the pivots (values equal to a
   pivot go to the left piece), so that worker `i` receives partition `i` from
   every block.
4. Each worker sorts what it received; joining the results in worker order gives
   the sorted list.

The workers are threads from a `concurrent.futures.ThreadPoolExecutor`.

## Installation

```
pip install .
```

## Command line

Sort a shuffled list of the numbers `0 .. n-1` with `p` workers and report the
time spent in each phase:

```
psrs 1000000 4
```

The output has this shape (the numbers vary from run to run):

```
Setup execution time: 0 seconds and 412345 microseconds
Phases 2 execution time 0 seconds and 53 microseconds
Phases 3/4 execution time 1 seconds and 2040 microseconds
Total execution time: 2 seconds and 80512 microseconds
```

The sequential baseline takes only the list size, shuffles `0 .. n-1` by
swapping each position with a random one, sorts it and reports the total time:

```
psrs-qs 1000000
```

Both commands need exactly the right number of integer arguments; otherwise
they print a usage message to standard error and exit with status 1. `psrs`
also exits with status 1 and a message on standard error when the size is
negative, when `p` is less than 1, or when there are fewer elements than
workers.

## Library use

```python
import random
from psrsort.psrs import psrs_sort, shuffled_range

data = shuffled_range(10_000, random.Random(7))
assert psrs_sort(data, 4) == sorted(data)
```

The phases are also available on their own in `psrsort.psrs`:
`split_blocks(values, p)`, `regular_samples(block, w, p)`,
`choose_pivots(samples, p)` and `partition_block(block, pivots)`.
`format_elapsed(seconds)` renders a duration the way the commands print it.
`swap_shuffled_range(n, rng)` in `psrsort.quicksort` builds the baseline's
input. Invalid arguments raise `ValueError`.

## Limitations

The benchmark only sorts generated lists of `0 .. n-1`; it does not read input
from files and does not write the sorted result anywhere. Because the workers
are Python threads, the parallel phases share one interpreter and are not
expected to run faster than a single sort.

## Tests

```
pip install .[test]
pytest
```