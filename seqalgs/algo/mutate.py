from __future__ import annotations

from typing import Any, Callable

from seqalgs.algo.utility import swap
from seqalgs.core.cursor import BidirectionalCursor, ForwardCursor


def replace(b: ForwardCursor, e: ForwardCursor, x: Any, y: Any) -> None:
    """Overwrite every element equal to `x` in `[b, e)` with `y`."""

    while b != e:
        if b.read() == x:
            b.write(y)
        b = b.succ()


def reverse(b: BidirectionalCursor, e: BidirectionalCursor) -> None:
    """Reverse `[b, e)` in place by swapping from both ends inwards."""

    while b != e:
        e = e.pred()
        if b != e:
            swap(b, e)
            b = b.succ()


def partition(
    b: BidirectionalCursor,
    e: BidirectionalCursor,
    p: Callable[[Any], bool],
) -> BidirectionalCursor:
    """Move elements satisfying `p` ahead of those that do not.

    Returns the cursor to the first element of the second group, or `e` when
    every element satisfies `p`. Order within each group is not preserved.
    """

    while b != e:
        while p(b.read()):
            b = b.succ()
            if b == e:
                return b
        while True:
            e = e.pred()
            if b == e:
                return b
            if p(e.read()):
                break
        swap(b, e)
        b = b.succ()
    return b
