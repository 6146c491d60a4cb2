"""Multi-expression program genomes for linear genetic programming."""
from .errors import ArityMismatch, InsufficientInputs, InsufficientOperations, InvalidGenome, MepError
from .evaluate import execute
from .genome import Mep, Operation, crossover, crossover_cuts, mutate
from .protocols import FunctionalAlgorithm, GeneticAlgorithm

__all__ = [
    "Mep",
    "Operation",
    "crossover",
    "crossover_cuts",
    "mutate",
    "execute",
    "GeneticAlgorithm",
    "FunctionalAlgorithm",
    "MepError",
    "ArityMismatch",
    "InsufficientOperations",
    "InsufficientInputs",
    "InvalidGenome",
]
