from __future__ import annotations

from typing import Any, Callable

from seqalgs.core.cursor import ForwardCursor, InputCursor, OutputCursor


def copy(b: InputCursor, e: InputCursor, d: OutputCursor) -> OutputCursor:
    """Write `[b, e)` to successive positions from `d`; return the new end of `d`."""

    while b != e:
        d.write(b.read())
        d = d.succ()
        b = b.succ()
    return d


def remove_copy(b: InputCursor, e: InputCursor, d: OutputCursor, x: Any) -> OutputCursor:
    """Copy the elements of `[b, e)` that differ from `x`, keeping their order."""

    while b != e:
        value = b.read()
        if value != x:
            d.write(value)
            d = d.succ()
        b = b.succ()
    return d


def remove_copy_if(
    b: InputCursor,
    e: InputCursor,
    d: OutputCursor,
    p: Callable[[Any], bool],
) -> OutputCursor:
    """Copy the elements of `[b, e)` for which `p` is false, keeping their order."""

    while b != e:
        value = b.read()
        if not p(value):
            d.write(value)
            d = d.succ()
        b = b.succ()
    return d


def remove(b: ForwardCursor, e: ForwardCursor, x: Any) -> ForwardCursor:
    """Compact the elements not equal to `x` to the front of `[b, e)`.

    Returns the new logical end. Positions past it keep stale values; the
    container itself is never resized.
    """

    ret = b
    while b != e:
        value = b.read()
        if not value == x:
            if ret != b:
                ret.write(value)
            ret = ret.succ()
        b = b.succ()
    return ret


def remove_if(b: ForwardCursor, e: ForwardCursor, p: Callable[[Any], bool]) -> ForwardCursor:
    """Predicate form of `remove`: drops elements for which `p` is true."""

    ret = b
    while b != e:
        value = b.read()
        if not p(value):
            if ret != b:
                ret.write(value)
            ret = ret.succ()
        b = b.succ()
    return ret
