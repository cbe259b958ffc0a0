"""Value stream laziness and bounded source exhaustion."""

import pytest

from minicheck import BoundedSource, Integer, ValueStream, seed


def test_stream_is_lazy_until_thunk_is_called():
    start = seed(1)
    stream = ValueStream(Integer(0, 9), start)
    thunks = iter(stream)

    thunk = next(thunks)
    next(thunks)
    assert stream.draws == 0
    assert stream.state == start

    thunk()
    assert stream.draws == 1
    assert stream.state != start


def test_stream_replays_with_same_seed():
    def first_values(count):
        stream = ValueStream(Integer(-50, 50), seed(99))
        thunks = iter(stream)
        return [next(thunks)().value for _ in range(count)]

    assert first_values(25) == first_values(25)


def test_stream_is_not_restartable():
    stream = ValueStream(Integer(0, 2**32 - 1), seed(2))
    first = next(iter(stream))()
    again = next(iter(stream))()

    assert stream.draws == 2
    assert first != again


def test_bounded_source_forwards_exactly_n_pulls():
    stream = ValueStream(Integer(0, 9), seed(3))
    source = BoundedSource(stream, 4)

    values = list(source)

    assert len(values) == 4
    assert stream.draws == 4
    assert source.next() is None
    assert stream.draws == 4


def test_bounded_source_zero_is_exhausted_immediately():
    stream = ValueStream(Integer(0, 9), seed(3))
    source = BoundedSource(stream, 0)

    assert source.next() is None
    assert list(source) == []
    assert stream.draws == 0


def test_bounded_source_rejects_negative_count():
    with pytest.raises(ValueError):
        BoundedSource(ValueStream(Integer(0, 1), seed(0)), -1)
