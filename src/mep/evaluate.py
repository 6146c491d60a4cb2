"""Lazy, memoized evaluation of a genome's output operations."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterator, Sequence

from .errors import InsufficientInputs, InsufficientOperations

if TYPE_CHECKING:  # pragma: no cover
    from .genome import Mep

Reducer = Callable[[Any, Any, Any], Any]

_UNSOLVED = object()


def execute(genome: "Mep", inputs: Sequence[Any], outputs: int, reduce: Reducer) -> Iterator[Any]:
    """Evaluate the last ``outputs`` operations, highest address first.

    Preconditions are checked here, before the returned iterator does any
    work. Each element is computed on demand; an operation reachable from
    several outputs is reduced once per call.
    """

    if outputs < 0:
        raise ValueError("outputs must be non-negative")
    if outputs > len(genome.operations):
        raise InsufficientOperations(outputs, len(genome.operations))
    if len(inputs) < genome.inputs:
        raise InsufficientInputs(len(inputs), genome.inputs)
    return _results(genome, inputs, outputs, reduce)


def _results(genome: "Mep", inputs: Sequence[Any], outputs: int, reduce: Reducer) -> Iterator[Any]:
    operations = genome.operations
    offset = genome.inputs
    memo: list[Any] = [_UNSOLVED] * len(operations)

    def value(address: int) -> Any:
        if address < offset:
            return inputs[address]
        return memo[address - offset]

    def solve(address: int) -> Any:
        if address < offset:
            return inputs[address]
        # Explicit stack; a chain of operations can be as deep as the genome.
        stack = [address]
        while stack:
            local = stack[-1] - offset
            if memo[local] is not _UNSOLVED:
                stack.pop()
                continue
            op = operations[local]
            pending = [a for a in dict.fromkeys((op.first, op.second)) if a >= offset and memo[a - offset] is _UNSOLVED]
            if pending:
                stack.extend(reversed(pending))
                continue
            stack.pop()
            memo[local] = reduce(op.instruction, value(op.first), value(op.second))
        return memo[address - offset]

    for address in genome.output_addresses(outputs):
        yield solve(address)
