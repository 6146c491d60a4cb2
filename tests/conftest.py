"""Test configuration for local imports without installing the package."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    """Ensure the src/ directory is importable for tests."""
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))


@pytest.fixture
def rng():
    from mep.core.rng import make_rng

    return make_rng(1234)


def assert_acyclic(genome):
    for index, op in enumerate(genome.operations):
        bound = genome.inputs + index
        assert 0 <= op.first < bound, (index, op)
        assert 0 <= op.second < bound, (index, op)
