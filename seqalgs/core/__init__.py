"""Cursor protocols and the concrete cursors used to address containers."""

from .cursor import (
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
    copy_value,
    distance,
    end,
    full_range,
    stream_range,
)

__all__ = [
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
    "copy_value",
]
