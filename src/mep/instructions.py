"""Reference arithmetic instruction set for MEP genomes."""
from __future__ import annotations

from enum import Enum
from typing import Callable, List

from .core.rng import RangeSampler


class Op(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MIN = "min"
    MAX = "max"


OPS: List[Op] = list(Op)


def reduce_arithmetic(op: Op, a: float, b: float) -> float:
    if op is Op.ADD:
        return a + b
    if op is Op.SUB:
        return a - b
    if op is Op.MUL:
        return a * b
    if op is Op.DIV:
        # protected division
        return a / b if b != 0 else 1.0
    if op is Op.MIN:
        return min(a, b)
    if op is Op.MAX:
        return max(a, b)
    raise ValueError(f"unknown op {op!r}")


def random_instructions(rng: RangeSampler, n: int) -> List[Op]:
    return [OPS[int(rng.integers(0, len(OPS)))] for _ in range(n)]


def instruction_mutator(rng: RangeSampler) -> Callable[[Op], Op]:
    """Callback for ``Mep.mutate`` that redraws the opcode from ``rng``."""

    def _mutate(_: Op) -> Op:
        return OPS[int(rng.integers(0, len(OPS)))]

    return _mutate
