"""Multi-expression program genome: construction, crossover and mutation."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Sequence

from .core.rng import RangeSampler
from .errors import ArityMismatch, InvalidGenome
from .evaluate import execute
from .protocols import FunctionalAlgorithm, GeneticAlgorithm

logger = logging.getLogger(__name__)

POINT_MODES = ("uniform", "trait")


@dataclass
class Operation:
    """One instruction plus the two addresses it consumes."""

    instruction: Any
    first: int
    second: int

    def clone(self) -> "Operation":
        return Operation(instruction=copy.deepcopy(self.instruction), first=self.first, second=self.second)


@dataclass
class Mep(GeneticAlgorithm, FunctionalAlgorithm):
    """Sequence of operations that may reuse any program input or earlier result.

    Addresses ``0 .. inputs`` name the program inputs, the following addresses
    name operation results in declaration order.
    """

    operations: list[Operation] = field(default_factory=list)
    inputs: int = 1
    mutation_intensity: int = 1
    crossover_points: int = 1

    def __post_init__(self):
        self.validate()

    def __len__(self) -> int:
        return len(self.operations)

    def validate(self) -> None:
        if self.mutation_intensity < 1:
            raise InvalidGenome("mutation_intensity must be >= 1")
        if self.crossover_points < 1:
            raise InvalidGenome("crossover_points must be >= 1")
        if self.inputs < 0:
            raise InvalidGenome("inputs must be non-negative")
        for index, op in enumerate(self.operations):
            bound = self.inputs + index
            if not (0 <= op.first < bound and 0 <= op.second < bound):
                raise InvalidGenome(
                    f"operation {index} references ({op.first}, {op.second}) outside [0, {bound})"
                )

    @classmethod
    def random(
        cls,
        inputs: int,
        mutation_intensity: int,
        crossover_points: int,
        rng: RangeSampler,
        instructions: Iterable[Any],
    ) -> "Mep":
        """Wire each instruction to two operands drawn uniformly from everything before it."""

        if mutation_intensity < 1 or crossover_points < 1:
            raise ValueError("mutation_intensity and crossover_points must be >= 1")
        operations = []
        for index, ins in enumerate(instructions):
            if inputs + index < 1:
                raise ValueError("a genome with operations needs at least one input")
            operations.append(
                Operation(
                    instruction=ins,
                    first=int(rng.integers(0, index + inputs)),
                    second=int(rng.integers(0, index + inputs)),
                )
            )
        return cls(
            operations=operations,
            inputs=inputs,
            mutation_intensity=mutation_intensity,
            crossover_points=crossover_points,
        )

    @classmethod
    def from_config(cls, genome_cfg, rng: RangeSampler, instructions: Iterable[Any]) -> "Mep":
        """Build from a ``GenomeConfig``; ``instructions`` is truncated to ``length``."""

        payloads = [ins for _, ins in zip(range(genome_cfg.length), instructions)]
        return cls.random(
            genome_cfg.inputs,
            genome_cfg.mutation_intensity,
            genome_cfg.crossover_points,
            rng,
            payloads,
        )

    def copy(self) -> "Mep":
        return Mep(
            operations=[op.clone() for op in self.operations],
            inputs=self.inputs,
            mutation_intensity=self.mutation_intensity,
            crossover_points=self.crossover_points,
        )

    def output_addresses(self, outputs: int) -> list[int]:
        total = self.inputs + len(self.operations)
        return list(range(total - 1, total - outputs - 1, -1))

    @classmethod
    def mate(cls, parents: tuple["Mep", "Mep"], rng: RangeSampler, *, point_mode: str = "uniform") -> "Mep":
        return crossover(parents[0], parents[1], rng, point_mode=point_mode)

    def mutate(self, rng: RangeSampler, mutator: Callable[[Any], Any]) -> int:
        return mutate(self, rng, mutator)

    def execute(
        self,
        inputs: Sequence[Any],
        outputs: int,
        processor: Callable[[Any, Any, Any], Any],
    ) -> Iterator[Any]:
        return execute(self, inputs, outputs, processor)


def _blend(a: int, b: int, rng: RangeSampler) -> int:
    lo, hi = (a, b) if a < b else (b, a)
    return int(rng.integers(lo, hi + 1))


def _point_count(parent_a: Mep, parent_b: Mep, total: int, rng: RangeSampler, point_mode: str) -> int:
    # Fewer than four shared operations leaves no room for a cut.
    upper = total // 2
    if upper <= 1:
        return 0
    if point_mode == "uniform":
        return int(rng.integers(1, upper))
    count = _blend(parent_a.crossover_points, parent_b.crossover_points, rng)
    return min(max(count, 1), upper - 1)


def crossover_cuts(total: int, count: int, rng: RangeSampler) -> list[int]:
    """Sorted, de-duplicated cut points in ``[0, total)`` closed by ``total``."""

    points = {int(rng.integers(0, total)) for _ in range(count)}
    points.add(total)
    return sorted(points)


def crossover(parent_a: Mep, parent_b: Mep, rng: RangeSampler, *, point_mode: str = "uniform") -> Mep:
    """Alternate contiguous slices from both parents at random cut points.

    Even-numbered slices come from ``parent_a``, odd-numbered ones from
    ``parent_b``, each taken from the same positions in the donor. Operand
    addresses are copied untouched. The child's adaptive parameters are drawn
    between the parents' values, inclusive.

    ``point_mode="uniform"`` draws the number of cuts from ``[1, n // 2)``;
    ``point_mode="trait"`` draws it between the parents' ``crossover_points``.
    """

    if parent_a.inputs != parent_b.inputs:
        raise ArityMismatch(parent_a.inputs, parent_b.inputs)
    if point_mode not in POINT_MODES:
        raise ValueError(f"unknown point_mode {point_mode!r}")

    total = min(len(parent_a.operations), len(parent_b.operations))
    count = _point_count(parent_a, parent_b, total, rng, point_mode)
    cuts = crossover_cuts(total, count, rng)
    logger.debug("crossover over %d operations with cuts %s", total, cuts)

    operations: list[Operation] = []
    prev = 0
    for index, cut in enumerate(cuts):
        donor = parent_a if index % 2 == 0 else parent_b
        operations.extend(op.clone() for op in donor.operations[prev:cut])
        prev = cut

    return Mep(
        operations=operations,
        inputs=parent_a.inputs,
        mutation_intensity=_blend(parent_a.mutation_intensity, parent_b.mutation_intensity, rng),
        crossover_points=_blend(parent_a.crossover_points, parent_b.crossover_points, rng),
    )


def _step(value: int, rng: RangeSampler) -> int:
    if rng.integers(0, 2) == 0:
        return value + 1
    return max(1, value - 1)


def mutate(genome: Mep, rng: RangeSampler, mutate_instruction: Callable[[Any], Any]) -> int:
    """Self-adaptive in-place mutation; returns the number of sites mutated.

    Each adaptive parameter moves by one with probability
    ``1 / mutation_intensity``. Sites are then drawn as
    ``uniform[0, len) + uniform[0, mutation_intensity)`` until a draw lands
    past the end, so larger intensities mean fewer mutations per call.

    ``mutate_instruction`` receives the payload; a non-``None`` return value
    replaces it, ``None`` means it was changed in place.
    """

    if rng.integers(0, genome.mutation_intensity) == 0:
        genome.mutation_intensity = _step(genome.mutation_intensity, rng)
    if rng.integers(0, genome.mutation_intensity) == 0:
        genome.crossover_points = _step(genome.crossover_points, rng)

    size = len(genome.operations)
    if size == 0:
        return 0
    # An offset range of one never overshoots, so intensity 1 mutates like 2.
    spread = max(genome.mutation_intensity, 2)
    applied = 0
    while True:
        choice = int(rng.integers(0, size)) + int(rng.integers(0, spread))
        if choice >= size:
            break
        op = genome.operations[choice]
        kind = rng.integers(0, 3)
        if kind == 0:
            replaced = mutate_instruction(op.instruction)
            if replaced is not None:
                op.instruction = replaced
        elif kind == 1:
            op.first = int(rng.integers(0, choice + genome.inputs))
        else:
            op.second = int(rng.integers(0, choice + genome.inputs))
        applied += 1
    logger.debug(
        "mutated %d sites (intensity=%d, crossover_points=%d)",
        applied,
        genome.mutation_intensity,
        genome.crossover_points,
    )
    return applied
