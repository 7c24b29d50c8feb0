"""Generic sequence algorithms over cursor ranges."""

from .copying import copy, remove, remove_copy, remove_copy_if, remove_if
from .mutate import partition, replace, reverse
from .reduce import accumulate, for_each
from .search import binary_search, equal, find, find_if, rfind, search
from .utility import max, min, swap

__all__ = [
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
]
