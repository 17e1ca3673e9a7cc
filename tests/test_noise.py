"""Tests for the Perlin noise source."""

import pytest

from steering.noise import PerlinNoise, perlin


def test_lattice_points_are_half():
    """Integer coordinates sit at the midpoint of the range."""
    for x, y in [(0, 0), (1, 0), (3, 7), (-2, 5)]:
        assert perlin(x, y) == pytest.approx(0.5, abs=1e-6)


def test_values_within_unit_range():
    for i in range(40):
        for j in range(40):
            value = perlin(i * 0.137, j * 0.291)
            assert 0.0 <= value <= 1.0


def test_deterministic_for_same_seed():
    a = PerlinNoise(seed=5)
    b = PerlinNoise(seed=5)
    assert a(0.3, 0.7) == b(0.3, 0.7)
    assert perlin(0.25, 0.75) == perlin(0.25, 0.75)


def test_default_seed_matches_shared_generator():
    assert PerlinNoise()(0.4, 0.6) == perlin(0.4, 0.6)


def test_seeds_give_different_fields():
    a = PerlinNoise(seed=1)
    b = PerlinNoise(seed=2)
    samples = [(i * 0.31 + 0.1, j * 0.27 + 0.2) for i in range(5) for j in range(5)]
    assert any(a(x, y) != b(x, y) for x, y in samples)


def test_continuous():
    """Nearby samples give nearby values."""
    assert abs(perlin(0.5, 0.5) - perlin(0.5001, 0.5)) < 0.01
    assert abs(perlin(2.3, 1.1) - perlin(2.3, 1.1001)) < 0.01


def test_not_constant():
    samples = {round(perlin(i * 0.31, 0.47), 6) for i in range(20)}
    assert len(samples) > 5
