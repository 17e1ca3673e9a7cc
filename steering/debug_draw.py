"""Renderer-agnostic debug shapes.

Behaviours, managers and flow fields describe what they would like drawn
as plain data; ``steering.rendering.DebugRenderer`` turns the shapes into
pygame calls, and any other host can do the same.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

from steering.config.display import (
    DESIRED_VELOCITY_COLOR,
    FLOW_FIELD_COLOR,
    HELPER_COLOR,
)
from steering.math_utils import Vector2

if TYPE_CHECKING:
    from steering.flow_field import Rect

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class DebugArrow:
    start: Vector2
    end: Vector2
    color: Color = DESIRED_VELOCITY_COLOR


@dataclass(frozen=True)
class DebugCircle:
    center: Vector2
    radius: float
    color: Color = HELPER_COLOR
    filled: bool = False


@dataclass(frozen=True)
class DebugRect:
    rect: "Rect"
    color: Color = FLOW_FIELD_COLOR


DebugShape = Union[DebugArrow, DebugCircle, DebugRect]

__all__ = ["DebugArrow", "DebugCircle", "DebugRect", "DebugShape"]
