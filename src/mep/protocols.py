"""Abstract contracts for evolvable and executable genomes."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Sequence


class GeneticAlgorithm(ABC):
    """Genome that can be recombined and mutated under an injected random source.

    Implementations must be deterministic given the same sequence of draws from
    ``rng`` and must keep their structural invariants after every call.
    """

    @classmethod
    @abstractmethod
    def mate(cls, parents: tuple[Any, Any], rng) -> Any:
        """Create an offspring from two parents.

        Invariants:
            - Must not mutate either parent.
            - Must reject incompatible parents before drawing from ``rng``.
        """

    @abstractmethod
    def mutate(self, rng, mutator: Callable[[Any], Any]) -> int:
        """Mutate this genome in place and return the number of sites touched.

        ``mutator`` regenerates an instruction payload; the genome never
        inspects the payload itself.
        """


class FunctionalAlgorithm(ABC):
    """Genome that can be run as a program over a sequence of inputs."""

    @abstractmethod
    def execute(
        self,
        inputs: Sequence[Any],
        outputs: int,
        processor: Callable[[Any, Any, Any], Any],
    ) -> Iterator[Any]:
        """Lazily produce ``outputs`` program results.

        Invariants:
            - Precondition failures are raised before the iterator is returned.
            - The genome is never modified by execution.
        """
