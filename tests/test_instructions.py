import pytest

from mep.core.rng import make_rng
from mep.instructions import OPS, Op, instruction_mutator, random_instructions, reduce_arithmetic


@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        (Op.ADD, 2.0, 3.0, 5.0),
        (Op.SUB, 2.0, 3.0, -1.0),
        (Op.MUL, 2.0, 3.0, 6.0),
        (Op.DIV, 3.0, 2.0, 1.5),
        (Op.DIV, 3.0, 0.0, 1.0),
        (Op.MIN, 2.0, 3.0, 2.0),
        (Op.MAX, 2.0, 3.0, 3.0),
    ],
)
def test_reduce_arithmetic(op, a, b, expected):
    assert reduce_arithmetic(op, a, b) == expected


def test_random_instructions_draw_from_ops():
    ins = random_instructions(make_rng(0), 200)
    assert len(ins) == 200
    assert set(ins) == set(OPS)


def test_mutator_returns_an_op():
    mutator = instruction_mutator(make_rng(1))
    assert all(mutator(Op.ADD) in OPS for _ in range(20))
