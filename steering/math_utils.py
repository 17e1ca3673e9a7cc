"""Centralized math utilities for the steering engine.

This module provides pure Python mathematical utilities used by every
behaviour, including a Vector2 implementation for 2D vector operations
and the rotation / random sampling helpers.
"""

from __future__ import annotations

import math
import random
from typing import Optional


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def right(cls) -> "Vector2":
        return cls(1.0, 0.0)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        length = math.sqrt(self.x * self.x + self.y * self.y)
        if length == 0:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def is_zero(self) -> bool:
        """Exact zero check (no tolerance), used to decide heading updates."""
        return self.x == 0 and self.y == 0

    def update(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        """Check if two vectors are not equal."""
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def add_inplace(self, other: "Vector2") -> "Vector2":
        """Add another vector to this one in-place."""
        self.x += other.x
        self.y += other.y
        return self


def rotate(vector: Vector2, degrees: float) -> Vector2:
    """Rotate ``vector`` counter-clockwise by ``degrees``.

    Args:
        vector: Vector to rotate (left untouched)
        degrees: Rotation angle in degrees

    Returns:
        New rotated vector
    """
    radians = math.radians(degrees)
    sin = math.sin(radians)
    cos = math.cos(radians)
    return Vector2(vector.x * cos - vector.y * sin, vector.x * sin + vector.y * cos)


def random_vector(
    rng: Optional[random.Random] = None, low: int = -100, high: int = 100
) -> Vector2:
    """Sample a vector whose axes are integers drawn uniformly from [low, high)."""
    rng = rng if rng is not None else random
    return Vector2(rng.randrange(low, high), rng.randrange(low, high))


def angle_degrees(vector: Vector2) -> float:
    """Heading of ``vector`` in degrees, measured from the +x axis."""
    return math.degrees(math.atan2(vector.y, vector.x))


def heading(degrees: float) -> Vector2:
    """Unit vector pointing along ``degrees``."""
    radians = math.radians(degrees)
    return Vector2(math.cos(radians), math.sin(radians))


def distance(a: Vector2, b: Vector2) -> float:
    return a.distance_to(b)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


__all__ = [
    "Vector2",
    "angle_degrees",
    "clamp",
    "distance",
    "heading",
    "random_vector",
    "rotate",
]
