"""Lazy value stream and the run-count bounded cursor that consumes it."""

from typing import Callable, Iterator, Optional

from .arbitrary import Arbitrary, GeneratedValue
from .prng import PCG32

Thunk = Callable[[], GeneratedValue]


class ValueStream:
    """Infinite sequence of thunks sharing one live generator state.

    Nothing is drawn until a thunk is called. Each call draws from the
    current state and stores the advanced state back, so the stream cannot
    be replayed; build a new one from the same seed instead.
    """

    def __init__(self, arbitrary: Arbitrary, state: PCG32):
        self.arbitrary = arbitrary
        self.state = state
        self.draws = 0

    def _draw(self) -> GeneratedValue:
        generated, self.state = self.arbitrary.generate(self.state)
        self.draws += 1
        return generated

    def __iter__(self) -> Iterator[Thunk]:
        while True:
            yield self._draw


class BoundedSource:
    """Forwards exactly ``run_count`` pulls to a stream, then reports exhaustion."""

    def __init__(self, stream: ValueStream, run_count: int):
        if run_count < 0:
            raise ValueError(f"run_count must be non-negative, got {run_count}")
        self._thunks = iter(stream)
        self.remaining = run_count

    def next(self) -> Optional[GeneratedValue]:
        if self.remaining <= 0:
            return None
        self.remaining -= 1
        return next(self._thunks)()

    def __iter__(self) -> Iterator[GeneratedValue]:
        while True:
            generated = self.next()
            if generated is None:
                return
            yield generated
