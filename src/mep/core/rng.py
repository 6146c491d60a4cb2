"""Central RNG helpers using PCG64DXSM."""
from __future__ import annotations

import random
from typing import Protocol

from numpy.random import Generator, PCG64DXSM


class RangeSampler(Protocol):
    """Anything that draws a uniform integer from ``[low, high)``."""

    def integers(self, low: int, high: int): ...


def make_rng(seed: int) -> Generator:
    return Generator(PCG64DXSM(seed))


class StdlibSampler:
    """Adapt ``random.Random`` to the ``integers(low, high)`` sampler interface."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random(0)

    def integers(self, low: int, high: int) -> int:
        return self.rng.randrange(low, high)
