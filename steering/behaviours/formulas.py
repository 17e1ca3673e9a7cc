"""Composable steering formulas.

Concrete behaviours are built from these pure functions instead of from a
deep class hierarchy: a base locomotion formula (seek or flee), an optional
distance scaling factor, and an optional predicted target.
"""

from __future__ import annotations

from steering.math_utils import Vector2


def seek_velocity(position: Vector2, target: Vector2, max_speed: float) -> Vector2:
    """Full-speed velocity from ``position`` straight towards ``target``."""
    return (target - position).normalize() * max_speed


def flee_velocity(position: Vector2, target: Vector2, max_speed: float) -> Vector2:
    """Exact negation of :func:`seek_velocity` for the same inputs."""
    return -seek_velocity(position, target, max_speed)


def arrival_factor(distance: float, slowing_radius: float) -> float:
    """1 outside the slowing radius, falling linearly to 0 at the target."""
    if distance > slowing_radius:
        return 1.0
    return distance / slowing_radius


def eschew_factor(distance: float, safe_radius: float) -> float:
    """Flee strength: 1 at the target, 0 at and beyond the safe radius."""
    return max(0.0, 1.0 - distance / safe_radius)


def magnet_factor(distance: float, attraction_radius: float) -> float:
    """Pull strength: 0 outside the attraction radius, 1 at the target."""
    if distance > attraction_radius:
        return 0.0
    return 1.0 - distance / attraction_radius


def future_steps(distance: float, max_speed: float, max_future_steps: int) -> int:
    """Number of one-second steps to look ahead when predicting a target.

    Proportional to the time needed to cover ``distance`` at ``max_speed``,
    rounded to nearest (ties to even) and clamped to
    ``[0, max_future_steps]``. A non-positive speed disables prediction.
    """
    if max_speed <= 0:
        return 0
    steps = round(distance / max_speed)
    return max(0, min(steps, max_future_steps))


def predict_position(target: Vector2, velocity: Vector2, steps: float) -> Vector2:
    """Linear extrapolation of ``target`` along ``velocity``."""
    return target + velocity * steps


__all__ = [
    "arrival_factor",
    "eschew_factor",
    "flee_velocity",
    "future_steps",
    "magnet_factor",
    "predict_position",
    "seek_velocity",
]
