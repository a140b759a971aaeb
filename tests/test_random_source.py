"""Tests for the uniform random sources."""

import numpy as np
import pytest

from optcalc.random_source import UniformSource, UniformGenerator


class Counter(UniformSource):
    def __init__(self):
        super().__init__()
        self.i = 0

    def next(self):
        self.i += 1
        return self.i / 100.0


class TestUniformGenerator:
    def test_bounds_respected(self):
        g = UniformGenerator(2.0, 5.0, seed=1)
        x = g.fill(10_000)
        assert x.min() >= 2.0
        assert x.max() < 5.0

    def test_bounds_swapped(self):
        g = UniformGenerator(5.0, 2.0, seed=1)
        assert (g.low, g.high) == (2.0, 5.0)
        assert 2.0 <= g.next() < 5.0

    def test_seed_reproducible(self):
        a = UniformGenerator(seed=42).fill((3, 4))
        b = UniformGenerator(seed=42).fill((3, 4))
        np.testing.assert_array_equal(a, b)

    def test_unseeded_streams_differ(self):
        assert not np.array_equal(UniformGenerator().fill(8), UniformGenerator().fill(8))

    def test_fill_equals_successive_next(self):
        bulk = UniformGenerator(seed=3).fill((2, 3, 2))
        g = UniformGenerator(seed=3)
        one_by_one = np.array([g.next() for _ in range(12)]).reshape(2, 3, 2)
        np.testing.assert_array_equal(bulk, one_by_one)

    def test_roughly_uniform(self):
        x = UniformGenerator(seed=0).fill(200_000)
        assert abs(x.mean() - 0.5) < 0.005
        assert abs(x.var() - 1.0 / 12.0) < 0.002

    def test_spawn_independent_and_reproducible(self):
        kids_a = UniformGenerator(seed=8).spawn(3)
        kids_b = UniformGenerator(seed=8).spawn(3)
        draws_a = [k.fill(5) for k in kids_a]
        draws_b = [k.fill(5) for k in kids_b]
        for a, b in zip(draws_a, draws_b):
            np.testing.assert_array_equal(a, b)
        assert not np.array_equal(draws_a[0], draws_a[1])

    def test_spawn_keeps_bounds(self):
        (kid,) = UniformGenerator(1.0, 3.0, seed=8).spawn(1)
        assert (kid.low, kid.high) == (1.0, 3.0)


class TestUniformSourceBase:
    def test_fill_defaults_to_next(self):
        src = Counter()
        out = src.fill((2, 2))
        np.testing.assert_allclose(out, [[0.01, 0.02], [0.03, 0.04]])
        assert src.i == 4

    def test_fill_int_shape(self):
        assert Counter().fill(3).shape == (3,)

    def test_next_not_implemented(self):
        with pytest.raises(NotImplementedError):
            UniformSource().next()

    def test_spawn_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Counter().spawn(2)
