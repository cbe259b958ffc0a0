"""Properties: an arbitrary paired with the predicate it must satisfy."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .arbitrary import Arbitrary, Tuple
from .errors import FAILURE_MESSAGE


@dataclass(frozen=True)
class Property:
    arbitrary: Arbitrary
    predicate: Callable[[Any], Any]
    unpack: bool = False

    def run(self, value: Any) -> Optional[str]:
        """Evaluate the predicate once; ``None`` on pass, the failure message otherwise.

        Only an explicit ``False`` fails. ``True`` and ``None`` (a predicate
        that returns nothing) both pass. Exceptions are not caught.
        """
        outcome = self.predicate(*value) if self.unpack else self.predicate(value)
        if outcome is False:
            return FAILURE_MESSAGE
        return None


def property(*args: Any) -> Property:
    """``property(arb_1, ..., arb_k, predicate)``.

    With one arbitrary the predicate receives the bare value; with more, the
    arbitraries are drawn as a tuple in declared order and the predicate gets
    one positional argument per arbitrary.
    """
    if len(args) < 2:
        raise TypeError("property() needs at least one arbitrary and a predicate")
    *arbitraries, predicate = args
    if not callable(predicate):
        raise TypeError("the last argument to property() must be a callable predicate")
    if len(arbitraries) == 1:
        return Property(arbitraries[0], predicate)
    return Property(Tuple(arbitraries), predicate, unpack=True)
