import numpy as np

from seqalgs.algo.utility import max as sa_max
from seqalgs.algo.utility import min as sa_min
from seqalgs.algo.utility import swap
from seqalgs.core.cursor import begin


class _Tagged:
    """Compares by value but keeps a distinct identity."""

    def __init__(self, value, tag):
        self.value = value
        self.tag = tag

    def __lt__(self, other):
        return self.value < other.value

    def __gt__(self, other):
        return self.value > other.value


def test_max_and_min_pick_expected_values():
    assert sa_max(5, 10) == 10
    assert sa_min(5, 10) == 5
    assert sa_max(100, 10) == 100
    assert sa_min(100, 10) == 10
    assert sa_max("z", "a") == "z"
    assert sa_min("z", "a") == "a"


def test_max_and_min_ties_return_second_argument():
    first = _Tagged(1, "first")
    second = _Tagged(1, "second")

    assert sa_max(first, second) is second
    assert sa_min(first, second) is second
    assert sa_max(3, 3) == 3
    assert sa_min(3, 3) == 3


def test_swap_integers():
    pair = [69, 420]

    swap(begin(pair), begin(pair) + 1)

    assert pair == [420, 69]


def test_swap_characters():
    letters = ["u", "v"]

    swap(begin(letters), begin(letters) + 1)

    assert letters == ["v", "u"]


def test_swap_across_containers():
    left = ["a"]
    right = ["b"]

    swap(begin(left), begin(right))

    assert left == ["b"]
    assert right == ["a"]


def test_self_swap_is_noop():
    values = [7, 8]

    swap(begin(values), begin(values))

    assert values == [7, 8]


def test_swap_numpy_rows_through_temporary():
    grid = np.array([[1, 2], [3, 4]])

    swap(begin(grid), begin(grid) + 1)

    assert grid.tolist() == [[3, 4], [1, 2]]
