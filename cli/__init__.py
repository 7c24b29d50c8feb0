"""Command line entry points for seqalgs."""

from .main import app

__all__ = ["app"]
