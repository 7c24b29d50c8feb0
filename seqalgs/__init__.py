"""seqalgs: generic sequence algorithms over cursor ranges.

Quick Start
-----------
>>> from seqalgs import begin, end, find, partition, distance
>>>
>>> values = [3, 8, 1, 6, 5]
>>> hit = find(begin(values), end(values), 6)
>>> distance(begin(values), hit)
3
>>> split = partition(begin(values), end(values), lambda v: v % 2 == 0)
>>> distance(begin(values), split)
2

Modules
-------
seqalgs.core : Cursor capability protocols and concrete cursors.
seqalgs.algo : Search, copy/filter, mutating, reduction and utility algorithms.
seqalgs.config : Environment-driven runtime configuration.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("seqalgs")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .algo import (
    accumulate,
    binary_search,
    copy,
    equal,
    find,
    find_if,
    for_each,
    max,
    min,
    partition,
    remove,
    remove_copy,
    remove_copy_if,
    remove_if,
    replace,
    reverse,
    rfind,
    search,
    swap,
)
from .config import RuntimeConfig, describe_runtime, reset_runtime_config_cache, runtime_config
from .core import (
    AppendCursor,
    BidirectionalCursor,
    ForwardCursor,
    IndexCursor,
    InputCursor,
    OutputCursor,
    RandomAccessCursor,
    StreamCursor,
    advance,
    back_inserter,
    begin,
    distance,
    end,
    full_range,
    stream_range,
)

__all__ = [
    "__version__",
    # Algorithms
    "equal",
    "find",
    "rfind",
    "find_if",
    "search",
    "binary_search",
    "copy",
    "remove_copy",
    "remove_copy_if",
    "remove",
    "remove_if",
    "replace",
    "reverse",
    "partition",
    "accumulate",
    "for_each",
    "swap",
    "max",
    "min",
    # Cursors
    "InputCursor",
    "OutputCursor",
    "ForwardCursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "IndexCursor",
    "StreamCursor",
    "AppendCursor",
    "begin",
    "end",
    "full_range",
    "stream_range",
    "back_inserter",
    "distance",
    "advance",
    # Runtime
    "RuntimeConfig",
    "runtime_config",
    "reset_runtime_config_cache",
    "describe_runtime",
]
