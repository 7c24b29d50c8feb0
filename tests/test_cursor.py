import numpy as np
import pytest

from seqalgs.core.cursor import (
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


def test_index_cursor_reads_and_writes():
    values = [10, 20, 30]
    cursor = begin(values).succ()

    assert cursor.read() == 20
    cursor.write(25)
    assert values == [10, 25, 30]
    assert cursor.pred().read() == 10


def test_index_cursor_arithmetic_and_ordering():
    values = list(range(8))
    first, last = full_range(values)

    assert last - first == 8
    assert (first + 3).read() == 3
    assert (3 + first).read() == 3
    assert (last - 2).read() == 6
    assert first < last
    assert first <= first
    assert last > first
    assert last >= last


def test_index_cursor_equality_uses_container_identity():
    left = [1, 2, 3]
    right = [1, 2, 3]

    assert begin(left) == IndexCursor(left, 0)
    assert begin(left) != begin(right)
    assert hash(begin(left)) == hash(IndexCursor(left, 0))
    assert len({begin(left), IndexCursor(left, 0), end(left)}) == 2


def test_index_cursor_rejects_foreign_ordering():
    with pytest.raises(TypeError):
        _ = begin([1]) < 0


def test_index_cursor_over_numpy_array():
    data = np.arange(5)
    cursor = begin(data) + 2

    cursor.write(9)
    assert data.tolist() == [0, 1, 9, 3, 4]
    assert end(data) - begin(data) == 5


def test_stream_cursor_is_single_pass():
    first, last = stream_range(iter([4, 5]))
    alias = first

    assert first != last
    assert first.read() == 4
    first.succ()
    assert alias.read() == 5
    first.succ()
    assert first == last
    assert alias == last


def test_stream_cursor_over_empty_iterable_is_end():
    first, last = stream_range([])

    assert first == last
    assert repr(first) == "StreamCursor(<end>)"


def test_stream_end_sentinel_cannot_be_read():
    with pytest.raises(IndexError):
        StreamCursor().read()


def test_exhausted_stream_cursor_cannot_be_read():
    first, last = stream_range(iter([4]))
    alias = first
    first.succ()

    assert alias == last
    with pytest.raises(IndexError):
        alias.read()


def test_append_cursor_appends():
    out: list = []
    cursor = back_inserter(out)

    cursor.write("a")
    cursor = cursor.succ()
    cursor.write("b")

    assert isinstance(cursor, AppendCursor)
    assert out == ["a", "b"]


def test_capability_protocols():
    values = [1, 2]
    stream, _ = stream_range(values)

    assert isinstance(begin(values), RandomAccessCursor)
    assert isinstance(begin(values), BidirectionalCursor)
    assert isinstance(begin(values), ForwardCursor)
    assert isinstance(stream, InputCursor)
    assert not isinstance(stream, ForwardCursor)
    assert isinstance(back_inserter(values), OutputCursor)
    assert not isinstance(back_inserter(values), InputCursor)


def test_distance_and_advance():
    values = list(range(6))

    assert distance(begin(values), end(values)) == 6
    assert advance(begin(values), 4).read() == 4
    assert advance(end(values), -1).read() == 5

    first, last = stream_range(values)
    assert distance(first, last) == 6


def test_advance_steps_non_random_access_cursors():
    first, last = stream_range("abcd")

    cursor = advance(first, 2)

    assert cursor.read() == "c"
    assert advance(cursor, 2) == last


def test_copy_value_detaches_array_rows():
    grid = np.arange(6).reshape(3, 2)
    row = copy_value(grid[0])
    grid[0] = [7, 7]

    assert row.tolist() == [0, 1]
    assert copy_value(5) == 5
