"""Error taxonomy for MEP genome operations."""
from __future__ import annotations


class MepError(Exception):
    """Base class for genome precondition failures."""


class ArityMismatch(MepError, ValueError):
    def __init__(self, left: int, right: int):
        super().__init__(f"cannot cross genomes with {left} and {right} inputs")
        self.left = left
        self.right = right


class InsufficientOperations(MepError, ValueError):
    def __init__(self, requested: int, available: int):
        super().__init__(f"requested {requested} outputs from a genome with {available} operations")
        self.requested = requested
        self.available = available


class InsufficientInputs(MepError, ValueError):
    def __init__(self, supplied: int, required: int):
        super().__init__(f"genome reads {required} inputs but only {supplied} were supplied")
        self.supplied = supplied
        self.required = required


class InvalidGenome(MepError, ValueError):
    """Raised when a genome's operands or adaptive parameters break its invariants."""
