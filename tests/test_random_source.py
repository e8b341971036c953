"""Tests for RandomSource."""

import math
from datetime import date

import pytest

from valuegen.random_source import RandomSource


class TestRandomSource:
    def test_gen_bool_extremes(self):
        source = RandomSource(42)
        assert not any(source.gen_bool(0.0) for _ in range(1000))
        assert all(source.gen_bool(1.0) for _ in range(1000))

    @pytest.mark.parametrize("p", [-0.1, 1.1])
    def test_gen_bool_rejects_invalid_probability(self, p):
        with pytest.raises(ValueError):
            RandomSource(42).gen_bool(p)

    def test_gen_range_int(self):
        source = RandomSource(42)
        assert all(0 <= source.gen_range(0, 3) < 3 for _ in range(1000))

    def test_gen_range_float(self):
        source = RandomSource(42)
        values = [source.gen_range(-1.0, 1.0) for _ in range(1000)]
        assert all(-1.0 <= v < 1.0 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_gen_range_wide_float(self):
        source = RandomSource(42)
        values = [source.gen_range(-1e308, 1e308) for _ in range(1000)]
        assert all(-1e308 <= v < 1e308 for v in values)
        assert len(set(values)) > 900

    @pytest.mark.parametrize("lb,ub", [(-math.inf, math.inf), (0.0, math.inf), (-math.inf, 1)])
    def test_gen_range_rejects_non_finite_bounds(self, lb, ub):
        with pytest.raises(ValueError, match="Non-finite"):
            RandomSource(42).gen_range(lb, ub)

    def test_gen_range_mixed_numbers(self):
        value = RandomSource(42).gen_range(0, 0.5)
        assert 0 <= value < 0.5

    def test_gen_range_date(self):
        source = RandomSource(42)
        lb, ub = date(2024, 1, 1), date(2024, 1, 3)
        values = {source.gen_range(lb, ub) for _ in range(200)}
        assert values == {date(2024, 1, 1), date(2024, 1, 2)}

    @pytest.mark.parametrize("lb,ub", [(3, 3), (4, 1), (0.0, 0.0)])
    def test_gen_range_rejects_empty_range(self, lb, ub):
        with pytest.raises(ValueError):
            RandomSource(42).gen_range(lb, ub)

    def test_gen_range_rejects_unsupported_types(self):
        with pytest.raises(TypeError):
            RandomSource(42).gen_range("a", "b")

    def test_gen_index(self):
        source = RandomSource(42)
        assert {source.gen_index(4) for _ in range(500)} == {0, 1, 2, 3}

    def test_gen_index_rejects_empty(self):
        with pytest.raises(ValueError):
            RandomSource(42).gen_index(0)

    def test_reseed_replays_sequence(self):
        source = RandomSource(1)
        first = [source.gen_index(100) for _ in range(10)]
        source.reseed(1)
        assert [source.gen_index(100) for _ in range(10)] == first

    def test_state_roundtrip(self):
        source = RandomSource(1)
        state = source.getstate()
        first = source.random()
        source.setstate(state)
        assert source.random() == first

    def test_instances_are_independent(self):
        a = RandomSource(5)
        b = RandomSource(5)
        first = a.random()
        a.random()
        assert b.random() == first
