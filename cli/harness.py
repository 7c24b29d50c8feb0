from __future__ import annotations

import bisect
import functools
import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, MutableSequence, Sequence, Tuple

import numpy as np
from numpy.random import Generator, default_rng

from seqalgs import algo
from seqalgs import config as sa_config
from seqalgs.core.cursor import back_inserter, begin, distance, end, stream_range
from seqalgs.logging import get_logger

LOGGER = get_logger("harness")


def is_even(x: Any) -> bool:
    return x % 2 == 0


def is_odd(x: Any) -> bool:
    return x % 2 != 0


@dataclass(frozen=True)
class Fixtures:
    """Sequences rebuilt for every check."""

    v1: MutableSequence[Any]
    v2: MutableSequence[Any]
    v3: MutableSequence[Any]
    v4: MutableSequence[Any]
    v5: MutableSequence[Any]
    v6: MutableSequence[Any]
    backend: str

    def container(self, values: Iterable[Any]) -> MutableSequence[Any]:
        return _as_container(list(values), self.backend)

    def blank(self, size: int) -> MutableSequence[Any]:
        return self.container([0] * size)


@dataclass(frozen=True)
class CheckResult:
    name: str
    label: str
    passed: bool
    detail: str = ""


def _as_container(values: List[Any], backend: str) -> MutableSequence[Any]:
    if backend == "numpy":
        return np.asarray(values, dtype=np.int64)
    return values


def _to_list(seq: Sequence[Any]) -> List[Any]:
    if isinstance(seq, np.ndarray):
        return seq.tolist()
    return list(seq)


def build_fixtures(backend: str) -> Fixtures:
    v1: List[int] = []
    v2: List[int] = []
    v3: List[int] = []
    v4: List[int] = []
    v5: List[int] = []
    v6: List[int] = []
    for i in range(21):
        if i < 10:
            v1.append(i)
            v2.append(i)
            v3.append(10 - i)
        if is_odd(i):
            v4.append(i)
        else:
            v5.append(i)
        v6.append(0)
    return Fixtures(
        v1=_as_container(v1, backend),
        v2=_as_container(v2, backend),
        v3=_as_container(v3, backend),
        v4=_as_container(v4, backend),
        v5=_as_container(v5, backend),
        v6=_as_container(v6, backend),
        backend=backend,
    )


def _expect(condition: Any, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _index(seq: Sequence[Any], cursor: Any) -> int:
    return distance(begin(seq), cursor)


# Reference implementations used for cross-checking.


def _reference_find_if(seq: Sequence[Any], p: Callable[[Any], bool]) -> int:
    return next((idx for idx, value in enumerate(_to_list(seq)) if p(value)), len(seq))


def _reference_search(haystack: Sequence[Any], needle: Sequence[Any]) -> int:
    hay = _to_list(haystack)
    pattern = _to_list(needle)
    if not pattern:
        return 0
    for start in range(len(hay) - len(pattern) + 1):
        if hay[start : start + len(pattern)] == pattern:
            return start
    return len(hay)


def _reference_binary_search(seq: Sequence[Any], x: Any) -> bool:
    values = _to_list(seq)
    idx = bisect.bisect_left(values, x)
    return idx < len(values) and values[idx] == x


def _cross_check(actual: Any, reference: Any, what: str) -> None:
    if not sa_config.runtime_config().cross_check:
        return
    _expect(actual == reference, f"{what}: got {actual!r}, reference gives {reference!r}")


def check_equal(fx: Fixtures) -> None:
    res = algo.equal(begin(fx.v1), end(fx.v1), begin(fx.v2))
    _expect(res is True, "equal sequences compared unequal")
    _cross_check(res, _to_list(fx.v1) == _to_list(fx.v2), "equal(v1, v2)")
    res = algo.equal(begin(fx.v1), end(fx.v1), begin(fx.v3))
    _expect(res is False, "distinct sequences compared equal")
    _cross_check(res, _to_list(fx.v1) == _to_list(fx.v3)[: len(fx.v1)], "equal(v1, v3)")


def _check_find_variant(fx: Fixtures, finder: Callable[[Any, Any, Any], Any]) -> None:
    hit = finder(begin(fx.v1), end(fx.v1), 3)
    _expect(hit == begin(fx.v1) + 3, f"target 3 found at {_index(fx.v1, hit)}")
    _cross_check(_index(fx.v1, hit), _to_list(fx.v1).index(3), "find(v1, 3)")
    miss = finder(begin(fx.v1), end(fx.v1), 13)
    _expect(miss == end(fx.v1), "absent target did not return end")


def check_find(fx: Fixtures) -> None:
    _check_find_variant(fx, algo.find)


def check_rfind(fx: Fixtures) -> None:
    _check_find_variant(fx, algo.rfind)
    _expect(
        algo.rfind(begin(fx.v1), end(fx.v1), 9) == algo.find(begin(fx.v1), end(fx.v1), 9),
        "rfind and find disagree on the last element",
    )


def check_find_if(fx: Fixtures) -> None:
    hit = algo.find_if(begin(fx.v1), end(fx.v1), is_even)
    _expect(hit == begin(fx.v1), "first even element of v1 is not at 0")
    _cross_check(_index(fx.v1, hit), _reference_find_if(fx.v1, is_even), "find_if(v1, even)")
    hit = algo.find_if(begin(fx.v4), end(fx.v4), is_even)
    _expect(hit == end(fx.v4), "found an even element among odd numbers")
    _cross_check(_index(fx.v4, hit), _reference_find_if(fx.v4, is_even), "find_if(v4, even)")


def check_search(fx: Fixtures) -> None:
    needle = fx.container([4, 5, 6])
    hit = algo.search(begin(fx.v1), end(fx.v1), begin(needle), end(needle))
    _expect(hit == begin(fx.v1) + 4, f"needle found at {_index(fx.v1, hit)}")
    _cross_check(_index(fx.v1, hit), _reference_search(fx.v1, needle), "search(v1, 4..6)")
    empty = fx.container([])
    hit = algo.search(begin(fx.v1), end(fx.v1), begin(empty), end(empty))
    _expect(hit == begin(fx.v1), "empty needle did not match at begin")
    tail = fx.container([8, 9, 10])
    hit = algo.search(begin(fx.v1), end(fx.v1), begin(tail), end(tail))
    _expect(hit == end(fx.v1), "needle running past the haystack matched")


def check_copy(fx: Fixtures) -> None:
    dest = fx.blank(len(fx.v1))
    out = algo.copy(begin(fx.v1), end(fx.v1), begin(dest))
    _expect(out == end(dest), "copy did not fill the destination")
    _cross_check(_to_list(dest), _to_list(fx.v1), "copy(v1)")
    collected: List[Any] = []
    src_begin, src_end = stream_range(_to_list(fx.v3))
    algo.copy(src_begin, src_end, back_inserter(collected))
    _expect(collected == _to_list(fx.v3), "streamed copy lost elements")
    empty = fx.container([])
    untouched = fx.container([7, 7])
    out = algo.copy(begin(empty), end(empty), begin(untouched))
    _expect(out == begin(untouched), "empty copy moved the destination")
    _expect(_to_list(untouched) == [7, 7], "empty copy wrote to the destination")


def check_remove_copy(fx: Fixtures) -> None:
    dest = fx.blank(len(fx.v6))
    out = algo.remove_copy(begin(fx.v1), end(fx.v1), begin(dest), 3)
    _expect(_index(dest, out) == 9, f"remove_copy wrote {_index(dest, out)} elements")
    _cross_check(_to_list(dest)[:9], [v for v in _to_list(fx.v1) if v != 3], "remove_copy(v1, 3)")
    out = algo.remove_copy(begin(fx.v6), end(fx.v6), begin(dest), 0)
    _expect(out == begin(dest), "remove_copy of an all-target range wrote elements")


def check_remove_copy_if(fx: Fixtures) -> None:
    dest = fx.blank(len(fx.v1))
    out = algo.remove_copy_if(begin(fx.v1), end(fx.v1), begin(dest), is_even)
    kept = _to_list(dest)[: _index(dest, out)]
    _expect(kept == [1, 3, 5, 7, 9], f"remove_copy_if kept {kept}")
    _cross_check(kept, [v for v in _to_list(fx.v1) if not is_even(v)], "remove_copy_if(v1, even)")
    out = algo.remove_copy_if(begin(fx.v4), end(fx.v4), begin(dest), is_odd)
    _expect(out == begin(dest), "remove_copy_if of an all-odd range wrote elements")


def check_remove(fx: Fixtures) -> None:
    new_end = algo.remove(begin(fx.v1), end(fx.v1), 3)
    kept = _to_list(fx.v1)[: _index(fx.v1, new_end)]
    _expect(kept == [0, 1, 2, 4, 5, 6, 7, 8, 9], f"remove kept {kept}")
    new_end = algo.remove(begin(fx.v2), end(fx.v2), 42)
    _expect(new_end == end(fx.v2), "removing an absent value shortened the range")


def check_remove_if(fx: Fixtures) -> None:
    new_end = algo.remove_if(begin(fx.v1), end(fx.v1), is_odd)
    kept = _to_list(fx.v1)[: _index(fx.v1, new_end)]
    _expect(kept == [0, 2, 4, 6, 8], f"remove_if kept {kept}")
    new_end = algo.remove_if(begin(fx.v5), end(fx.v5), is_even)
    _expect(new_end == begin(fx.v5), "remove_if on an all-even range kept elements")


def check_replace(fx: Fixtures) -> None:
    algo.replace(begin(fx.v6), end(fx.v6), 0, 7)
    _expect(_to_list(fx.v6) == [7] * 21, "replace missed elements")
    algo.replace(begin(fx.v1), end(fx.v1), 42, 7)
    _expect(_to_list(fx.v1) == _to_list(fx.v2), "replace of an absent value changed the range")


def check_partition(fx: Fixtures) -> None:
    before = sorted(_to_list(fx.v1))
    split = algo.partition(begin(fx.v1), end(fx.v1), is_even)
    values = _to_list(fx.v1)
    pivot = _index(fx.v1, split)
    _expect(pivot == 5, f"partition point at {pivot}")
    _expect(all(is_even(v) for v in values[:pivot]), "odd element before partition point")
    _expect(not any(is_even(v) for v in values[pivot:]), "even element after partition point")
    _expect(sorted(values) == before, "partition changed the elements")
    split = algo.partition(begin(fx.v5), end(fx.v5), is_even)
    _expect(split == end(fx.v5), "all-true partition did not return end")


def check_reverse(fx: Fixtures) -> None:
    algo.reverse(begin(fx.v1), end(fx.v1))
    _cross_check(_to_list(fx.v1), _to_list(fx.v2)[::-1], "reverse(v1)")
    algo.reverse(begin(fx.v1), end(fx.v1))
    _expect(_to_list(fx.v1) == _to_list(fx.v2), "double reverse is not the identity")
    single = fx.container([5])
    algo.reverse(begin(single), end(single))
    _expect(_to_list(single) == [5], "single element reverse changed the range")


def check_accumulate(fx: Fixtures) -> None:
    total = algo.accumulate(begin(fx.v1), end(fx.v1), 0)
    _expect(total == 45, f"sum of 0..9 is {total}")
    _cross_check(total, functools.reduce(operator.add, _to_list(fx.v1), 0), "accumulate(v1)")
    empty = fx.container([])
    _expect(algo.accumulate(begin(empty), end(empty), 17) == 17, "empty fold lost the seed")


def check_for_each(fx: Fixtures) -> None:
    doubled: List[Any] = []

    def double_value(x: Any) -> None:
        doubled.append(2 * x)

    returned = algo.for_each(begin(fx.v1), end(fx.v1), double_value)
    _expect(returned is double_value, "for_each did not return the function")
    _expect(doubled == [2 * v for v in _to_list(fx.v1)], "for_each skipped elements")
    doubled.clear()
    empty = fx.container([])
    returned = algo.for_each(begin(empty), end(empty), double_value)
    _expect(returned is double_value, "for_each on an empty range lost the function")
    _expect(doubled == [], "for_each called the function on an empty range")


def check_binary_search(fx: Fixtures) -> None:
    res = algo.binary_search(begin(fx.v1), end(fx.v1), 5)
    _expect(res is True, "5 not found in 0..9")
    _cross_check(res, _reference_binary_search(fx.v1, 5), "binary_search(v1, 5)")
    res = algo.binary_search(begin(fx.v6), end(fx.v6), 5)
    _expect(res is False, "5 found among zeros")
    _cross_check(res, _reference_binary_search(fx.v6, 5), "binary_search(v6, 5)")


def check_swap(fx: Fixtures) -> None:
    pair = fx.container([69, 420])
    algo.swap(begin(pair), begin(pair) + 1)
    _expect(_to_list(pair) == [420, 69], "swap did not exchange integers")
    letters = ["u", "v"]
    algo.swap(begin(letters), begin(letters) + 1)
    _expect(letters == ["v", "u"], "swap did not exchange characters")
    algo.swap(begin(letters), begin(letters))
    _expect(letters == ["v", "u"], "self-swap changed the value")


class _Tied:
    """Equal by value, distinct by identity."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: "_Tied") -> bool:
        return self.value < other.value

    def __gt__(self, other: "_Tied") -> bool:
        return self.value > other.value


def check_max(fx: Fixtures) -> None:
    _expect(algo.max(100, 10) == 100, "max of integers")
    _expect(algo.max("z", "a") == "z", "max of characters")
    first, second = _Tied(1), _Tied(1)
    _expect(algo.max(first, second) is second, "max tie did not return the second argument")


def check_min(fx: Fixtures) -> None:
    _expect(algo.min(100, 10) == 10, "min of integers")
    _expect(algo.min("z", "a") == "a", "min of characters")
    first, second = _Tied(1), _Tied(1)
    _expect(algo.min(first, second) is second, "min tie did not return the second argument")


CHECKS: Dict[str, Tuple[str, Callable[[Fixtures], None]]] = {
    "equal": ("equal", check_equal),
    "find": ("find", check_find),
    "rfind": ("recursive find", check_rfind),
    "find_if": ("find if", check_find_if),
    "search": ("search", check_search),
    "copy": ("copy", check_copy),
    "remove_copy": ("remove copy", check_remove_copy),
    "remove_copy_if": ("remove copy if", check_remove_copy_if),
    "remove": ("remove", check_remove),
    "remove_if": ("remove if", check_remove_if),
    "replace": ("replace", check_replace),
    "partition": ("partition", check_partition),
    "reverse": ("reverse", check_reverse),
    "accumulate": ("accumulate", check_accumulate),
    "for_each": ("for each", check_for_each),
    "binary_search": ("binary search", check_binary_search),
    "swap": ("swap", check_swap),
    "max": ("max", check_max),
    "min": ("min", check_min),
}


def _sweep_once(rng: Generator, backend: str) -> None:
    size = int(rng.integers(0, 32))
    values = rng.integers(-8, 8, size=size).tolist()
    target = int(rng.integers(-8, 8))

    data = _as_container(list(values), backend)
    new_end = algo.remove(begin(data), end(data), target)
    _expect(
        _to_list(data)[: _index(data, new_end)] == [v for v in values if v != target],
        f"remove({values}, {target}) lost order",
    )

    data = _as_container(list(values), backend)
    split = algo.partition(begin(data), end(data), is_even)
    arranged = _to_list(data)
    pivot = _index(data, split)
    _expect(
        all(is_even(v) for v in arranged[:pivot]) and not any(is_even(v) for v in arranged[pivot:]),
        f"partition({values}) misplaced elements",
    )
    _expect(sorted(arranged) == sorted(values), f"partition({values}) changed the elements")

    data = _as_container(sorted(values), backend)
    _expect(
        algo.binary_search(begin(data), end(data), target) == (target in values),
        f"binary_search({sorted(values)}, {target}) disagrees with membership",
    )

    data = _as_container(list(values), backend)
    start = int(rng.integers(0, size + 1))
    stop = int(rng.integers(start, size + 1))
    needle = _as_container(values[start:stop], backend)
    hit = algo.search(begin(data), end(data), begin(needle), end(needle))
    _expect(
        _index(data, hit) == _reference_search(data, needle),
        f"search({values}, {values[start:stop]}) returned {_index(data, hit)}",
    )


def run_sweeps(count: int, *, seed: int | None, backend: str) -> CheckResult:
    """Run `count` randomised property sweeps and fold them into one result."""

    rng = default_rng(seed)
    for iteration in range(count):
        try:
            _sweep_once(rng, backend)
        except AssertionError as exc:
            LOGGER.debug("Sweep %d failed with seed %s", iteration, seed)
            return CheckResult(name="sweeps", label="random sweep", passed=False, detail=str(exc))
    return CheckResult(name="sweeps", label="random sweep", passed=True)


def run_selftest(
    names: Sequence[str] | None = None,
    *,
    backend: str | None = None,
    sweeps: int = 0,
    seed: int | None = None,
    narrate: Callable[[str], None] | None = None,
) -> List[CheckResult]:
    """Run the named checks (all by default) against fresh fixtures."""

    runtime = sa_config.runtime_config()
    backend = backend or runtime.backend
    if seed is None:
        seed = runtime.seed
    selected = list(names) if names else list(CHECKS)
    unknown = [name for name in selected if name not in CHECKS]
    if unknown:
        raise ValueError(f"Unknown checks {unknown}. Expected names from {list(CHECKS)}.")

    results: List[CheckResult] = []
    for name in selected:
        label, check = CHECKS[name]
        if narrate is not None:
            narrate(f"Testing the {label} function...")
        fixtures = build_fixtures(backend)
        try:
            check(fixtures)
        except AssertionError as exc:
            LOGGER.debug("Check %s failed on %s backend: %s", name, backend, exc)
            results.append(CheckResult(name=name, label=label, passed=False, detail=str(exc)))
        else:
            results.append(CheckResult(name=name, label=label, passed=True))
        del fixtures

    if sweeps > 0:
        if narrate is not None:
            narrate(f"Running {sweeps} random sweeps (seed={seed})...")
        results.append(run_sweeps(sweeps, seed=seed, backend=backend))
    return results
