"""Shared test utilities for seqalgs."""

from .ranges import collect, index_of

__all__ = ["collect", "index_of"]
