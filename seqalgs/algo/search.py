from __future__ import annotations

from typing import Any, Callable

from seqalgs import config as sa_config
from seqalgs.core.cursor import ForwardCursor, InputCursor, RandomAccessCursor


def equal(b1: InputCursor, e: InputCursor, b2: InputCursor) -> bool:
    """Compare `[b1, e)` elementwise against the range starting at `b2`.

    The second range must hold at least as many elements as the first; it is
    never bounds-checked.
    """

    while b1 != e:
        if b1.read() != b2.read():
            return False
        b1 = b1.succ()
        b2 = b2.succ()
    return True


def find(b: InputCursor, e: InputCursor, x: Any) -> InputCursor:
    """Return the first cursor in `[b, e)` whose element equals `x`, else `e`."""

    while b != e and b.read() != x:
        b = b.succ()
    return b


def _rfind(b: InputCursor, e: InputCursor, x: Any, depth: int) -> InputCursor:
    if b == e or b.read() == x:
        return b
    if depth == 0:
        return find(b.succ(), e, x)
    return _rfind(b.succ(), e, x, depth - 1)


def rfind(b: InputCursor, e: InputCursor, x: Any) -> InputCursor:
    """Recursive counterpart of `find` with identical results.

    Recursion stops after `rfind_depth` frames and the rest of the range is
    scanned by `find`.
    """

    return _rfind(b, e, x, sa_config.rfind_depth_budget())


def find_if(b: InputCursor, e: InputCursor, p: Callable[[Any], bool]) -> InputCursor:
    """Return the first cursor in `[b, e)` whose element satisfies `p`, else `e`."""

    while b != e and not p(b.read()):
        b = b.succ()
    return b


def search(
    b1: ForwardCursor,
    e1: ForwardCursor,
    b2: ForwardCursor,
    e2: ForwardCursor,
) -> ForwardCursor:
    """Locate the first occurrence of `[b2, e2)` inside `[b1, e1)`.

    An empty needle matches at `b1`. Returns `e1` when there is no match,
    including when the haystack runs out part-way through a candidate.
    """

    if b2 == e2:
        return b1
    while b1 != e1:
        it1 = b1
        it2 = b2
        while it1.read() == it2.read():
            it1 = it1.succ()
            it2 = it2.succ()
            if it2 == e2:
                return b1
            if it1 == e1:
                return e1
        b1 = b1.succ()
    return e1


def binary_search(b: RandomAccessCursor, e: RandomAccessCursor, x: Any) -> bool:
    """Test whether `x` occurs in the sorted range `[b, e)`.

    Only `<` is used on elements, so equality means neither side is less.
    """

    while b < e:
        # offset from b rather than averaging the two ends
        mid = b + (e - b) // 2
        value = mid.read()
        if x < value:
            e = mid
        elif value < x:
            b = mid + 1
        else:
            return True
    return False
