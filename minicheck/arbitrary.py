"""Arbitraries: stateless generation policies driven by a PCG32 state."""

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

from .errors import InvalidRange
from .prng import PCG32, next_uniform_int

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E


@dataclass(frozen=True)
class GeneratedValue:
    value: Any


class _Composable:
    """Helpers shared by every arbitrary variant."""

    def map(self, fn: Callable[[Any], Any]) -> "Mapped":
        return Mapped(self, fn)


@dataclass(frozen=True)
class Integer(_Composable):
    """Integers drawn uniformly from the closed interval [min, max]."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise InvalidRange(self.min, self.max)

    def generate(self, state: PCG32) -> tuple[GeneratedValue, PCG32]:
        value, state = next_uniform_int(state, self.min, self.max)
        return GeneratedValue(value), state


@dataclass(frozen=True)
class Mapped(_Composable):
    """Values of ``inner`` passed through ``fn``; consumes exactly what ``inner`` does."""

    inner: "Arbitrary"
    fn: Callable[[Any], Any]

    def generate(self, state: PCG32) -> tuple[GeneratedValue, PCG32]:
        generated, state = self.inner.generate(state)
        return GeneratedValue(self.fn(generated.value)), state


@dataclass(frozen=True)
class Tuple(_Composable):
    """Fixed-arity product; components are drawn left to right from one state."""

    arbitraries: Sequence["Arbitrary"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "arbitraries", tuple(self.arbitraries))

    def generate(self, state: PCG32) -> tuple[GeneratedValue, PCG32]:
        values = []
        for arbitrary in self.arbitraries:
            generated, state = arbitrary.generate(state)
            values.append(generated.value)
        return GeneratedValue(tuple(values)), state


Arbitrary = Union[Integer, Mapped, Tuple]


def integer(minimum: int, maximum: int) -> Integer:
    return Integer(minimum, maximum)


def nat(maximum: int) -> Integer:
    return Integer(0, maximum)


def char() -> Mapped:
    """Single printable ASCII character, space through tilde."""
    return Mapped(Integer(PRINTABLE_MIN, PRINTABLE_MAX), chr)


def tuple_of(*arbitraries: Arbitrary) -> Tuple:
    return Tuple(arbitraries)
