"""Parallel Sorting by Regular Sampling benchmark with a sequential sort baseline."""

__version__ = "0.1.0"
__all__ = ["psrs", "quicksort"]