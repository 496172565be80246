"""Tests for weighted and without-replacement sampling."""

from collections import Counter

import pytest

from npcforge.sampling import (
    SeededRandom,
    WeightedOption,
    sample_unique,
    weighted_choice,
    weighted_pool,
)


class FixedDraw:
    """Random source returning a scripted sequence of next() values."""

    def __init__(self, *values: float):
        self.values = list(values)

    def next(self) -> float:
        return self.values.pop(0)


class TestWeightedChoice:
    """Tests for weighted_choice."""

    def test_walks_pool_in_declared_order(self):
        """The threshold is consumed in declaration order."""
        pool = weighted_pool([("a", 1), ("b", 3)])
        # total 4: 0.2*4=0.8 lands on a, 0.5*4=2.0 on b
        assert weighted_choice(FixedDraw(0.2), pool) == "a"
        assert weighted_choice(FixedDraw(0.5), pool) == "b"

    def test_zero_draw_picks_first(self):
        """A zero draw selects the first option."""
        pool = weighted_pool([("a", 1), ("b", 1)])
        assert weighted_choice(FixedDraw(0.0), pool) == "a"

    def test_boundary_stays_on_earlier_option(self):
        """A threshold that hits a boundary exactly stays on that option."""
        pool = weighted_pool([("a", 1), ("b", 1)])
        assert weighted_choice(FixedDraw(0.5), pool) == "a"

    def test_distribution_follows_weights(self):
        """Frequencies roughly follow the weights."""
        rng = SeededRandom(2024)
        pool = weighted_pool([("common", 9), ("rare", 1)])
        counts = Counter(weighted_choice(rng, pool) for _ in range(5000))
        assert counts["common"] > counts["rare"] * 5

    def test_empty_pool_raises(self):
        with pytest.raises(ValueError):
            weighted_choice(SeededRandom(1), [])

    def test_non_positive_total_raises(self):
        with pytest.raises(ValueError):
            weighted_choice(SeededRandom(1), [WeightedOption("a", 0)])

    def test_one_draw_per_choice(self):
        """weighted_choice consumes exactly one draw."""
        a = SeededRandom(77)
        b = SeededRandom(77)
        weighted_choice(a, weighted_pool([("x", 1), ("y", 2)]))
        b.next()
        assert a.next() == b.next()


class TestSampleUnique:
    """Tests for sample_unique."""

    def test_results_are_distinct(self):
        rng = SeededRandom(10)
        for _ in range(50):
            picked = sample_unique(rng, list("abcdefgh"), 3)
            assert len(picked) == len(set(picked))
            assert len(picked) <= 3

    def test_count_capped_at_pool_size(self):
        """Asking for more than the pool holds never exceeds the pool."""
        picked = sample_unique(SeededRandom(10), ["a", "b"], 5)
        assert len(picked) <= 2
        assert set(picked) <= {"a", "b"}

    def test_empty_pool(self):
        assert sample_unique(SeededRandom(1), [], 3) == []

    def test_deterministic(self):
        pool = list(range(30))
        assert sample_unique(SeededRandom(5), pool, 4) == sample_unique(SeededRandom(5), pool, 4)
