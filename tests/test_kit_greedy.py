import itertools
import random

import pytest

from contestlib.kit_greedy import cast_spells, can_make_23, smallest_passing_grade


def test_can_make_23_reachable():
    assert can_make_23([5, 1, 4, 2, 3]) is True


def test_can_make_23_trivial_sum():
    assert can_make_23([23, 0, 0, 0, 0]) is True


def test_can_make_23_all_zero():
    assert can_make_23([0, 0, 0, 0, 0]) is False


def test_can_make_23_order_does_not_matter():
    rng = random.Random(2)
    for _ in range(20):
        numbers = [rng.randint(1, 10) for _ in range(5)]
        shuffled = numbers[:]
        rng.shuffle(shuffled)
        assert can_make_23(numbers) == can_make_23(shuffled)


def test_can_make_23_empty():
    with pytest.raises(ValueError):
        can_make_23([])


def _apply(colors, spells):
    cells = [c == "B" for c in colors]
    for p in spells:
        cells[p - 1] = not cells[p - 1]
        cells[p] = not cells[p]
    return cells


@pytest.mark.parametrize("length", range(1, 9))
def test_cast_spells_make_uniform(length):
    for combo in itertools.product("BW", repeat=length):
        colors = "".join(combo)
        spells = cast_spells(colors)
        if spells is None:
            assert length % 2 == 0
        else:
            assert all(1 <= p < length for p in spells)
            assert len(set(_apply(colors, spells))) == 1


def test_cast_spells_unsolvable():
    assert cast_spells("WB") is None


def test_cast_spells_already_white():
    assert cast_spells("WWWW") == []


def test_cast_spells_empty():
    with pytest.raises(ValueError):
        cast_spells("")


def test_smallest_passing_grade_exact():
    assert smallest_passing_grade(100, 37, lambda grade: grade) == 37


def test_smallest_passing_grade_unreachable():
    assert smallest_passing_grade(100, 1000, lambda grade: grade) == 100


def test_smallest_passing_grade_always_passing():
    assert smallest_passing_grade(50, 0, lambda grade: grade) == 1


def test_smallest_passing_grade_is_minimal():
    points = [0, 3, 3, 8, 8, 8, 15, 20, 31, 40]

    def ask(grade):
        return points[grade - 1]

    for needed in range(1, 41):
        grade = smallest_passing_grade(len(points), needed, ask)
        assert ask(grade) >= needed
        if grade > 1:
            assert ask(grade - 1) < needed