import random

import pytest

from psrsort.quicksort import main, swap_shuffled_range


@pytest.mark.parametrize("n", [1, 2, 17, 500])
def test_swap_shuffled_range_is_permutation(n):
    assert sorted(swap_shuffled_range(n, random.Random(n))) == list(range(n))


def test_swap_shuffled_range_deterministic_with_seed():
    first = swap_shuffled_range(100, random.Random(4))
    second = swap_shuffled_range(100, random.Random(4))
    assert first == second
    assert sorted(first) == list(range(100))
    assert len(first) == 100
    assert first != list(range(100))


def test_swap_shuffled_range_empty():
    assert swap_shuffled_range(0) == []


def test_swap_shuffled_range_negative():
    with pytest.raises(ValueError):
        swap_shuffled_range(-3)


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "number of array elements" in capsys.readouterr().err


def test_main_non_numeric(capsys):
    assert main(["many"]) == 1
    assert "number of array elements" in capsys.readouterr().err


def test_main_reports_total_time(capsys):
    assert main(["1000"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("Total execution time: ")
    assert out.endswith(" microseconds")