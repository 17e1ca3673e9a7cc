"""Deterministic 2D Perlin noise.

The flow field fills itself from a smooth noise function sampled at
normalised cell coordinates. ``perlin`` mirrors the usual game-engine
contract: the result lies in [0, 1] and equals 0.5 on integer lattice
points. Sampling is delegated to libtcod's Perlin generator.
"""

from __future__ import annotations

from typing import Optional

import tcod.noise

from steering.config.behaviours import DEFAULT_NOISE_SEED


class PerlinNoise:
    """Single-octave Perlin noise over the plane.

    Args:
        seed: Seed for the gradient table. ``None`` uses DEFAULT_NOISE_SEED
            so results are identical across runs.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = DEFAULT_NOISE_SEED if seed is None else int(seed)
        self._noise = tcod.noise.Noise(
            dimensions=2,
            algorithm=tcod.noise.Algorithm.PERLIN,
            implementation=tcod.noise.Implementation.SIMPLE,
            seed=self.seed,
        )

    def noise(self, x: float, y: float) -> float:
        """Raw noise value in [-1, 1]."""
        return float(self._noise.get_point(x, y))

    def __call__(self, x: float, y: float) -> float:
        value = (self.noise(x, y) + 1.0) * 0.5
        return max(0.0, min(value, 1.0))


_default_noise = PerlinNoise()


def perlin(x: float, y: float) -> float:
    """Sample the default noise; result in [0, 1]."""
    return _default_noise(x, y)


__all__ = ["PerlinNoise", "perlin"]
