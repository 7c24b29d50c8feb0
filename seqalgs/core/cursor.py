from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, MutableSequence, Protocol, Tuple, runtime_checkable

import numpy as np


@runtime_checkable
class InputCursor(Protocol):
    """Sequential read-only access."""

    def read(self) -> Any: ...

    def succ(self) -> "InputCursor": ...


@runtime_checkable
class OutputCursor(Protocol):
    """Sequential write-only access."""

    def write(self, value: Any) -> None: ...

    def succ(self) -> "OutputCursor": ...


@runtime_checkable
class ForwardCursor(Protocol):
    """Sequential read-write access."""

    def read(self) -> Any: ...

    def write(self, value: Any) -> None: ...

    def succ(self) -> "ForwardCursor": ...


@runtime_checkable
class BidirectionalCursor(Protocol):
    """Read-write access that can also step backwards."""

    def read(self) -> Any: ...

    def write(self, value: Any) -> None: ...

    def succ(self) -> "BidirectionalCursor": ...

    def pred(self) -> "BidirectionalCursor": ...


@runtime_checkable
class RandomAccessCursor(Protocol):
    """Bidirectional access with constant-time jumps and ordering."""

    def read(self) -> Any: ...

    def write(self, value: Any) -> None: ...

    def succ(self) -> "RandomAccessCursor": ...

    def pred(self) -> "RandomAccessCursor": ...

    def __add__(self, offset: int) -> "RandomAccessCursor": ...

    def __sub__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


def copy_value(value: Any) -> Any:
    """Detach `value` from its container so it survives later writes.

    Indexing a multi-dimensional ndarray yields a view, which would change
    under the caller's feet when the underlying row is overwritten.
    """

    if isinstance(value, np.ndarray):
        return value.copy()
    return value


@dataclass(frozen=True, eq=False)
class IndexCursor:
    """Random-access cursor addressing `seq[index]`.

    Works over any mutable indexable container: lists, bytearrays,
    `array.array` and NumPy arrays. Cursors compare by container identity.
    """

    seq: MutableSequence[Any] = field(repr=False)
    index: int

    def read(self) -> Any:
        return self.seq[self.index]

    def write(self, value: Any) -> None:
        self.seq[self.index] = value

    def succ(self) -> "IndexCursor":
        return IndexCursor(self.seq, self.index + 1)

    def pred(self) -> "IndexCursor":
        return IndexCursor(self.seq, self.index - 1)

    def __add__(self, offset: int) -> "IndexCursor":
        return IndexCursor(self.seq, self.index + int(offset))

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, IndexCursor):
            return self.index - other.index
        return IndexCursor(self.seq, self.index - int(other))

    def _key(self, other: Any) -> int:
        if not isinstance(other, IndexCursor):
            raise TypeError(f"Cannot order IndexCursor against {type(other).__name__}")
        return other.index

    def __lt__(self, other: Any) -> bool:
        return self.index < self._key(other)

    def __le__(self, other: Any) -> bool:
        return self.index <= self._key(other)

    def __gt__(self, other: Any) -> bool:
        return self.index > self._key(other)

    def __ge__(self, other: Any) -> bool:
        return self.index >= self._key(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return self.seq is other.seq and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.seq), self.index))


class _Stream:
    __slots__ = ("iterator", "current", "exhausted", "position")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self.iterator: Iterator[Any] = iter(iterable)
        self.current: Any = None
        self.exhausted = False
        self.position = -1
        self.advance()

    def advance(self) -> None:
        try:
            self.current = next(self.iterator)
        except StopIteration:
            self.current = None
            self.exhausted = True
        else:
            self.position += 1


class StreamCursor:
    """Single-pass read cursor over an arbitrary iterable.

    Copies share the underlying stream, so advancing one advances all of
    them. A cursor built without a stream is the end sentinel.
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: _Stream | None = None) -> None:
        self._stream = stream

    def read(self) -> Any:
        if self.at_end:
            raise IndexError("Cannot read from the end of a stream")
        return self._stream.current

    def succ(self) -> "StreamCursor":
        if self._stream is not None:
            self._stream.advance()
        return self

    @property
    def at_end(self) -> bool:
        return self._stream is None or self._stream.exhausted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamCursor):
            return NotImplemented
        if self.at_end or other.at_end:
            return self.at_end and other.at_end
        return self._stream is other._stream

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.at_end:
            return "StreamCursor(<end>)"
        return f"StreamCursor(position={self._stream.position})"


class AppendCursor:
    """Write cursor that appends to its container instead of overwriting."""

    __slots__ = ("container",)

    def __init__(self, container: Any) -> None:
        self.container = container

    def write(self, value: Any) -> None:
        self.container.append(value)

    def succ(self) -> "AppendCursor":
        return self

    def __repr__(self) -> str:
        return f"AppendCursor(size={len(self.container)})"


def begin(seq: MutableSequence[Any]) -> IndexCursor:
    return IndexCursor(seq, 0)


def end(seq: MutableSequence[Any]) -> IndexCursor:
    return IndexCursor(seq, len(seq))


def full_range(seq: MutableSequence[Any]) -> Tuple[IndexCursor, IndexCursor]:
    return begin(seq), end(seq)


def stream_range(iterable: Iterable[Any]) -> Tuple[StreamCursor, StreamCursor]:
    """Return `[begin, end)` cursors over a one-shot iterable."""

    return StreamCursor(_Stream(iterable)), StreamCursor()


def back_inserter(container: Any) -> AppendCursor:
    return AppendCursor(container)


def distance(first: InputCursor, last: InputCursor) -> int:
    """Number of `succ` steps from `first` to `last`.

    Consumes the stream when given single-pass cursors.
    """

    if isinstance(first, RandomAccessCursor):
        return int(last - first)
    count = 0
    while first != last:
        first = first.succ()
        count += 1
    return count


def advance(cursor: Any, n: int) -> Any:
    if isinstance(cursor, RandomAccessCursor):
        return cursor + n
    if n < 0:
        for _ in range(-n):
            cursor = cursor.pred()
        return cursor
    for _ in range(n):
        cursor = cursor.succ()
    return cursor
