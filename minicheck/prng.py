
# PCG32 PRNG (PCG-XSH-RR 64/32) with explicit state threading: every draw
# returns the output together with the advanced generator, never mutating it.
import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidRange

logger = logging.getLogger(__name__)

MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1
SEED_BITS = 53


@dataclass(frozen=True)
class PCG32:
    state: int
    inc: int = 1442695040888963407  # default stream

    def next_u32(self) -> tuple[int, "PCG32"]:
        oldstate = self.state & MASK64
        advanced = PCG32((oldstate * 6364136223846793005 + (self.inc | 1)) & MASK64, self.inc)
        xorshifted = (((oldstate >> 18) ^ oldstate) >> 27) & MASK32
        rot = (oldstate >> 59) & 31
        word = (xorshifted >> rot) | ((xorshifted << ((-rot) & 31)) & MASK32)
        return word, advanced


def seed(value: int, stream: Optional[int] = None) -> PCG32:
    """Build a generator from an integer seed (only the low 64 bits matter).

    ``stream`` selects one of the 2**63 independent PCG sequences; the
    default stream is used when it is omitted.
    """
    inc = PCG32.inc if stream is None else ((stream << 1) | 1) & MASK64
    # Same warm-up as the PCG reference initialiser: step, add the seed, step.
    _, rng = PCG32(0, inc).next_u32()
    rng = PCG32((rng.state + (value & MASK64)) & MASK64, inc)
    _, rng = rng.next_u32()
    return rng


def next_uniform_int(state: PCG32, minimum: int, maximum: int) -> tuple[int, PCG32]:
    """Uniform integer in the closed interval [minimum, maximum].

    Spans wider than 32 bits are served by concatenating several words, and
    rejection sampling keeps every outcome equally likely.
    """
    if minimum > maximum:
        raise InvalidRange(minimum, maximum)

    span = maximum - minimum + 1
    if span == 1:
        return minimum, state

    words = ((span - 1).bit_length() + 31) // 32
    limit = 1 << (32 * words)
    bound = limit - limit % span
    while True:
        value = 0
        for _ in range(words):
            word, state = state.next_u32()
            value = (value << 32) | word
        if value < bound:
            return minimum + value % span, state


def fresh_seed() -> int:
    """Seed for an unseeded check: wall clock mixed with OS-seeded randomness."""
    value = (time.time_ns() ^ random.getrandbits(32)) & ((1 << SEED_BITS) - 1)
    logger.debug("Derived fresh seed %#x", value)
    return value
