"""Tests for the Shuffler module."""
from collections import Counter
from unittest.mock import MagicMock
from uniform_quiz.shuffler import make_rng, shuffle


def test_shuffle_is_permutation():
    rng = make_rng(1)
    items = [1, 2, 2, 3, 4, 5, 5, 5]
    for _ in range(50):
        result = shuffle(items, rng)
        assert len(result) == len(items)
        assert Counter(result) == Counter(items)


def test_shuffle_does_not_mutate_input():
    items = [1, 2, 3, 4]
    shuffle(items, make_rng(3))
    assert items == [1, 2, 3, 4]


def test_shuffle_returns_new_list():
    items = [1, 2, 3]
    assert shuffle(items) is not items


def test_shuffle_empty_and_single():
    assert shuffle([]) == []
    assert shuffle(["only"]) == ["only"]


def test_shuffle_accepts_tuples():
    assert sorted(shuffle(("b", "a", "c"))) == ["a", "b", "c"]


def test_same_seed_same_order():
    items = list(range(20))
    assert shuffle(items, make_rng(42)) == shuffle(items, make_rng(42))


def test_fisher_yates_draw_range():
    """Each step draws j from [0, i] while i walks down to 1."""
    rng = MagicMock()
    rng.randint.side_effect = lambda a, b: a
    shuffle([1, 2, 3, 4], rng)
    calls = [c.args for c in rng.randint.call_args_list]
    assert calls == [(0, 3), (0, 2), (0, 1)]


def test_all_permutations_reachable():
    rng = make_rng(7)
    seen = {tuple(shuffle([1, 2, 3], rng)) for _ in range(600)}
    assert len(seen) == 6
