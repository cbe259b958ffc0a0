"""Exception types raised by the property checking engine."""

FAILURE_MESSAGE = "Property failed"


class MinicheckError(Exception):
    """Base class for every error the engine raises itself."""


class InvalidRange(MinicheckError, ValueError):
    """An integer range whose lower bound exceeds its upper bound."""

    def __init__(self, minimum: int, maximum: int):
        super().__init__(f"Invalid range: min {minimum} is greater than max {maximum}")
        self.min = minimum
        self.max = maximum


class PropertyFailure(MinicheckError, AssertionError):
    """Raised by ``assert_property`` when a sampled value falsified the predicate."""

    def __init__(self, verdict=None):
        super().__init__(FAILURE_MESSAGE)
        self.verdict = verdict
