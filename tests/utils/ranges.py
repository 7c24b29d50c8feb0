from __future__ import annotations

from typing import Any, List

import numpy as np

from seqalgs.core.cursor import IndexCursor


def collect(first: IndexCursor, last: IndexCursor) -> List[Any]:
    """Materialise `[first, last)` as a plain Python list."""

    values = first.seq[first.index : last.index]
    if isinstance(values, np.ndarray):
        return values.tolist()
    return list(values)


def index_of(cursor: IndexCursor) -> int:
    return cursor.index
