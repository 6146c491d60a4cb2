import pytest

from mep import ArityMismatch, Mep, crossover, crossover_cuts
from mep.core.rng import make_rng

from conftest import assert_acyclic


def _parents(seed: int, len_a: int = 10, len_b: int = 10, inputs: int = 3):
    rng = make_rng(seed)
    a = Mep.random(inputs, 2, 3, rng, [("a", i) for i in range(len_a)])
    b = Mep.random(inputs, 6, 1, rng, [("b", i) for i in range(len_b)])
    return a, b


def _expected_donors(cuts, a, b):
    donors = []
    prev = 0
    for index, cut in enumerate(cuts):
        donors.extend([a if index % 2 == 0 else b] * (cut - prev))
        prev = cut
    return donors


def test_child_is_built_from_alternating_parent_slices():
    a, b = _parents(0)
    child = crossover(a, b, make_rng(42))

    replay = make_rng(42)
    count = int(replay.integers(1, 5))
    cuts = crossover_cuts(10, count, replay)
    assert all(0 <= c < 10 for c in cuts[:-1])
    assert cuts[-1] == 10

    assert len(child) == 10
    for index, donor in enumerate(_expected_donors(cuts, a, b)):
        assert child.operations[index] == donor.operations[index]
        assert child.operations[index] is not donor.operations[index]
    assert_acyclic(child)


def test_child_length_is_shorter_parent():
    for seed in range(10):
        a, b = _parents(seed, len_a=12, len_b=25)
        assert len(crossover(a, b, make_rng(seed))) == 12
        assert len(crossover(b, a, make_rng(seed))) == 12


def test_adaptive_parameters_are_blended_inclusively():
    a, b = _parents(1)
    seen_intensity = set()
    seen_points = set()
    for seed in range(200):
        child = Mep.mate((a, b), make_rng(seed))
        seen_intensity.add(child.mutation_intensity)
        seen_points.add(child.crossover_points)
        assert child.inputs == 3
    assert seen_intensity == {2, 3, 4, 5, 6}
    assert seen_points == {1, 2, 3}


def test_crossover_is_deterministic():
    a, b = _parents(2, len_a=40, len_b=40)
    assert crossover(a, b, make_rng(5)) == crossover(a, b, make_rng(5))


def test_parents_are_untouched():
    a, b = _parents(3)
    before = (a.copy(), b.copy())
    child = crossover(a, b, make_rng(9))
    child.operations[0].first = 0
    assert (a, b) == before


def test_arity_mismatch_fails_before_drawing():
    rng = make_rng(0)
    a = Mep.random(3, 1, 1, rng, range(10))
    b = Mep.random(4, 1, 1, rng, range(10))
    state = rng.bit_generator.state
    with pytest.raises(ArityMismatch):
        crossover(a, b, rng)
    assert rng.bit_generator.state == state


def test_short_parents_copy_first_parent():
    a, b = _parents(4, len_a=3, len_b=10)
    child = crossover(a, b, make_rng(0))
    assert child.operations == a.operations


def test_empty_parents_give_empty_child():
    a, b = _parents(4, len_a=0, len_b=5)
    assert len(crossover(a, b, make_rng(0))) == 0


def test_trait_mode_draws_count_from_parent_traits():
    rng = make_rng(11)
    a = Mep.random(2, 1, 2, rng, [("a", i) for i in range(20)])
    b = Mep.random(2, 1, 2, rng, [("b", i) for i in range(20)])
    child = crossover(a, b, make_rng(8), point_mode="trait")

    replay = make_rng(8)
    count = int(replay.integers(2, 3))
    cuts = crossover_cuts(20, count, replay)
    assert len(cuts) <= 3
    for index, donor in enumerate(_expected_donors(cuts, a, b)):
        assert child.operations[index] == donor.operations[index]
    assert child.crossover_points == 2


def test_unknown_point_mode_is_rejected():
    a, b = _parents(5)
    with pytest.raises(ValueError):
        crossover(a, b, make_rng(0), point_mode="fixed")
