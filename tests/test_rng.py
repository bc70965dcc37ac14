"""Tests for the seeded random stream."""

import dataclasses
import math

import pytest

from stellarforge.utils import SeededStream, seeded_random


class TestSeededRandom:
    """Test the stateless hash transform."""

    def test_deterministic(self):
        """Same seed always maps to the same value."""
        assert seeded_random(12345) == seeded_random(12345)

    def test_range(self):
        """Values stay in [0, 1) across a wide seed range."""
        for seed in range(-2000, 2000):
            value = seeded_random(seed)
            assert 0.0 <= value < 1.0

    def test_zero_seed(self):
        """sin(0) is zero, so seed 0 maps to 0.0."""
        assert seeded_random(0) == 0.0

    def test_neighbours_differ(self):
        """Consecutive seeds give unrelated values."""
        values = {seeded_random(seed) for seed in range(1, 200)}
        assert len(values) == 199


class TestSeededStream:
    """Test offset-addressed draws."""

    def test_draw_matches_offset(self):
        """draw(k) is seeded_random(seed + offset + k)."""
        stream = SeededStream(100, offset=3)
        assert stream.draw() == seeded_random(103)
        assert stream.draw(7) == seeded_random(110)

    def test_frozen(self):
        """Streams cannot be advanced in place."""
        stream = SeededStream(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            stream.offset = 5

    def test_next_returns_new_stream(self):
        """next() yields the current value and a stream one step further."""
        stream = SeededStream(42)
        value, advanced = stream.next()

        assert value == seeded_random(42)
        assert advanced.draw() == seeded_random(43)
        assert stream.offset == 0  # Original untouched

    def test_child_is_rooted_further_along(self):
        """child(n) starts at seed + offset + n."""
        stream = SeededStream(1000, offset=2)
        child = stream.child(5000)
        assert child.seed == 6002
        assert child.offset == 0
        assert child.draw(1) == seeded_random(6003)

    def test_uniform_range(self):
        """uniform stays inside [low, high)."""
        stream = SeededStream(7)
        for k in range(500):
            assert 2.5 <= stream.uniform(k, 2.5, 4.0) < 4.0

    def test_randint_inclusive(self):
        """randint covers both ends and nothing outside them."""
        stream = SeededStream(11)
        values = {stream.randint(k, 1, 4) for k in range(500)}
        assert values == {1, 2, 3, 4}

    def test_chance_extremes(self):
        """Probability 0 never fires and probability 1 always does."""
        stream = SeededStream(3)
        assert not any(stream.chance(k, 0.0) for k in range(100))
        assert all(stream.chance(k, 1.0) for k in range(100))

    def test_choice_empty_raises(self):
        """Choosing from nothing is an error."""
        with pytest.raises(ValueError, match="empty"):
            SeededStream(1).choice(0, [])

    def test_choice_returns_member(self):
        """choice only returns elements of the sequence."""
        stream = SeededStream(5)
        options = ["a", "b", "c"]
        assert {stream.choice(k, options) for k in range(200)} == set(options)


class TestWeightedChoice:
    """Test cumulative-sum weighted selection."""

    def test_all_zero_weights_raise(self):
        """A table with no positive weight cannot be sampled."""
        with pytest.raises(ValueError):
            SeededStream(1).weighted_choice(0, [("a", 0), ("b", 0)])

    def test_empty_raises(self):
        """An empty table cannot be sampled."""
        with pytest.raises(ValueError):
            SeededStream(1).weighted_choice(0, [])

    def test_zero_weight_never_chosen(self):
        """Items with zero weight are never selected."""
        stream = SeededStream(9)
        table = [("never", 0.0), ("always", 2.0), ("also_never", 0.0)]
        assert all(stream.weighted_choice(k, table) == "always" for k in range(300))

    def test_weights_bias_selection(self):
        """A 3:1 weighting picks the heavier item roughly three times as often."""
        stream = SeededStream(2024)
        picks = [stream.weighted_choice(k, [("heavy", 3), ("light", 1)]) for k in range(2000)]
        share = picks.count("heavy") / len(picks)
        assert 0.65 < share < 0.85


class TestUnitVector:
    """Test random directions."""

    def test_unit_length(self):
        """Directions have length one."""
        stream = SeededStream(77)
        for k in range(0, 400, 2):
            x, y, z = stream.unit_vector(k)
            assert math.isclose(math.sqrt(x * x + y * y + z * z), 1.0, rel_tol=1e-9)
