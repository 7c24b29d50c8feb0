from __future__ import annotations

from typing import TypeVar

from seqalgs.core.cursor import ForwardCursor, copy_value

X = TypeVar("X")


def swap(x: ForwardCursor, y: ForwardCursor) -> None:
    """Exchange the values stored at `x` and `y` through a temporary."""

    t = copy_value(x.read())
    x.write(y.read())
    y.write(t)


def max(x: X, y: X) -> X:  # noqa: A001
    """Larger of `x` and `y`; ties return `y`."""

    return x if x > y else y  # type: ignore[operator]


def min(x: X, y: X) -> X:  # noqa: A001
    """Smaller of `x` and `y`; ties return `y`."""

    return x if x < y else y  # type: ignore[operator]


__all__ = ["swap", "max", "min"]
