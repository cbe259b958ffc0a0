"""Runner, ``check`` and the assertion boundary used from test functions."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .errors import PropertyFailure
from .prng import fresh_seed, seed as seed_generator
from .properties import Property
from .stream import BoundedSource, ValueStream

logger = logging.getLogger(__name__)

DEFAULT_RUN_COUNT = 100


@dataclass(frozen=True)
class RunConfiguration:
    """How many samples a check evaluates and, optionally, the seed it uses."""

    run_count: int = DEFAULT_RUN_COUNT
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.run_count, bool) or not isinstance(self.run_count, int):
            raise ValueError(f"run_count must be an integer, got {self.run_count!r}")
        if self.run_count < 0:
            raise ValueError(f"run_count must be non-negative, got {self.run_count}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RunConfiguration":
        run_count = options.get("run_count", options.get("runCount", DEFAULT_RUN_COUNT))
        return cls(run_count=run_count, seed=options.get("seed"))


@dataclass(frozen=True)
class RunVerdict:
    failed: bool
    seed: int
    runs: int


ConfigLike = Union[RunConfiguration, Mapping[str, Any], None]


def _coerce_config(config: ConfigLike) -> RunConfiguration:
    if config is None:
        return RunConfiguration()
    if isinstance(config, RunConfiguration):
        return config
    return RunConfiguration.from_mapping(config)


def run(prop: Property, source: BoundedSource) -> tuple[bool, int]:
    """Feed ``source`` through ``prop`` until the first failure or exhaustion.

    Returns ``(failed, evaluations)``. Nothing is pulled after a failure.
    """
    runs = 0
    while True:
        generated = source.next()
        if generated is None:
            return False, runs
        runs += 1
        if prop.run(generated.value) is not None:
            return True, runs


def check(prop: Property, config: ConfigLike = None) -> RunVerdict:
    """Sample ``prop`` with a generator owned by this call and return the verdict."""
    cfg = _coerce_config(config)
    run_seed = cfg.seed if cfg.seed is not None else fresh_seed()
    logger.debug("Checking property with seed %#x for %d runs", run_seed, cfg.run_count)

    stream = ValueStream(prop.arbitrary, seed_generator(run_seed))
    failed, runs = run(prop, BoundedSource(stream, cfg.run_count))

    if failed:
        logger.info("Property falsified after %d runs (seed %#x)", runs, run_seed)
    return RunVerdict(failed=failed, seed=run_seed, runs=runs)


def assert_property(prop: Property, config: ConfigLike = None) -> None:
    """Raise ``PropertyFailure`` if any sampled value falsifies ``prop``."""
    verdict = check(prop, config)
    if verdict.failed:
        raise PropertyFailure(verdict)
