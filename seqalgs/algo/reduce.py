from __future__ import annotations

import copy
from typing import Any, Callable, TypeVar

from seqalgs.core.cursor import InputCursor

A = TypeVar("A")
F = TypeVar("F", bound=Callable[[Any], Any])


def accumulate(b: InputCursor, e: InputCursor, a: A) -> A:
    """Fold `[b, e)` into `a` with `+=`, left to right.

    The seed is taken by value: it is shallow-copied first so a list or
    ndarray passed in by the caller is left untouched.
    """

    a = copy.copy(a)
    while b != e:
        a += b.read()  # type: ignore[operator]
        b = b.succ()
    return a


def for_each(b: InputCursor, e: InputCursor, f: F) -> F:
    """Call `f` on every element of `[b, e)` and hand `f` back."""

    while b != e:
        f(b.read())
        b = b.succ()
    return f
