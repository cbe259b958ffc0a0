"""Public package surface for the minicheck property checking engine."""

from .arbitrary import GeneratedValue, Integer, Mapped, Tuple, char, integer, nat, tuple_of
from .errors import InvalidRange, MinicheckError, PropertyFailure
from .prng import PCG32, fresh_seed, next_uniform_int, seed
from .properties import Property, property
from .runner import RunConfiguration, RunVerdict, assert_property, check, run
from .stream import BoundedSource, ValueStream

__all__ = [
    "BoundedSource",
    "GeneratedValue",
    "Integer",
    "InvalidRange",
    "Mapped",
    "MinicheckError",
    "PCG32",
    "Property",
    "PropertyFailure",
    "RunConfiguration",
    "RunVerdict",
    "Tuple",
    "ValueStream",
    "assert_property",
    "char",
    "check",
    "fresh_seed",
    "integer",
    "nat",
    "next_uniform_int",
    "property",
    "run",
    "seed",
    "tuple_of",
]
