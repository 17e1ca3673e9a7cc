"""Prediction-based behaviours: Pursuit and Evade.

Pursuit seeks where the target is going to be rather than where it is.
The target's velocity is estimated from its displacement over a fixed
one-second interval, sampled only while the behaviour is active:

    INACTIVE --(active=True)--> ESTIMATING --(active=False)--> INACTIVE

Entering ESTIMATING re-seeds the last sampled position to the target's
current position; leaving it zeroes the estimate immediately. Sampling is
an accumulator advanced by ``update(dt)``, so it shares the tick with the
desired-velocity reads and can never fire mid-frame.

The look-ahead is proportional to the distance (distance / max_speed
steps), which collapses to plain Seek as the agent closes in, and capped
by ``max_future_steps`` so a fast target cannot drag the prediction far
away. Evade is the same computation with the result negated.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from steering.behaviours.base import Behaviour
from steering.behaviours.formulas import future_steps, predict_position, seek_velocity
from steering.config.behaviours import (
    DEFAULT_MAX_FUTURE_STEPS,
    MIN_MAX_FUTURE_STEPS,
    SAMPLE_TIME_EPSILON,
    TARGET_SAMPLE_INTERVAL,
)
from steering.config.display import HELPER_COLOR
from steering.debug_draw import DebugArrow, DebugShape
from steering.math_utils import Vector2

logger = logging.getLogger(__name__)


class PursuitState(Enum):
    INACTIVE = "inactive"
    ESTIMATING = "estimating"


class Pursuit(Behaviour):
    """Seek towards the target's predicted future position.

    Args:
        max_future_steps: Cap (>= 0) on the number of one-second steps
            the prediction may look ahead
    """

    # Sign applied to the seek result; Evade flips it
    direction_sign = 1.0

    def __init__(self, max_future_steps: int = DEFAULT_MAX_FUTURE_STEPS, **kwargs) -> None:
        self.target_velocity = Vector2(0.0, 0.0)
        self._last_sampled: Optional[Vector2] = None
        self._time_since_sample = 0.0
        super().__init__(**kwargs)
        self.max_future_steps = max_future_steps

    @property
    def max_future_steps(self) -> int:
        return self._max_future_steps

    @max_future_steps.setter
    def max_future_steps(self, value: int) -> None:
        value = int(value)
        if value < MIN_MAX_FUTURE_STEPS:
            logger.debug("max_future_steps=%r out of range, clamped to %r", value, MIN_MAX_FUTURE_STEPS)
            value = MIN_MAX_FUTURE_STEPS
        self._max_future_steps = value

    @property
    def state(self) -> PursuitState:
        return PursuitState.ESTIMATING if self.active else PursuitState.INACTIVE

    # ------------------------------------------------------------------
    # Velocity estimation
    # ------------------------------------------------------------------

    def on_attached(self, manager) -> None:
        super().on_attached(manager)
        if self.active:
            self._start_estimation()

    def _on_activation_changed(self, active: bool) -> None:
        if active:
            self._start_estimation()
        else:
            self._stop_estimation()

    def _start_estimation(self) -> None:
        self.target_velocity = Vector2(0.0, 0.0)
        self._time_since_sample = 0.0
        # Seeded lazily when no manager is attached yet
        self._last_sampled = self.target_position() if self.manager is not None else None

    def _stop_estimation(self) -> None:
        self.target_velocity = Vector2(0.0, 0.0)
        self._time_since_sample = 0.0
        self._last_sampled = None

    def update(self, dt: float) -> None:
        if not self.active:
            return
        if self._last_sampled is None:
            self._last_sampled = self.target_position()
            return
        self._time_since_sample += dt
        if self._time_since_sample + SAMPLE_TIME_EPSILON >= TARGET_SAMPLE_INTERVAL:
            self._sample()

    def _sample(self) -> None:
        current = self.target_position()
        # v = s / t with t fixed at one interval
        self.target_velocity = current - self._last_sampled
        self._last_sampled = current
        self._time_since_sample = 0.0
        logger.debug("%s estimated target velocity %r", type(self).__name__, self.target_velocity)

    # ------------------------------------------------------------------
    # Steering
    # ------------------------------------------------------------------

    def predicted_target(self) -> Vector2:
        """Target position extrapolated along the estimated velocity."""
        manager = self._require_manager()
        target = self.target_position()
        steps = future_steps(
            manager.agent.position.distance_to(target),
            manager.max_speed,
            self._max_future_steps,
        )
        return predict_position(target, self.target_velocity, steps)

    @property
    def desired_velocity(self) -> Vector2:
        return self.calculate_desired_velocity(self.predicted_target()) * self.weight

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        velocity = seek_velocity(manager.agent.position, target_position, manager.max_speed)
        return velocity * self.direction_sign

    def _debug_shapes(self) -> List[DebugShape]:
        shapes = super()._debug_shapes()
        shapes.append(DebugArrow(self.position.copy(), self.predicted_target(), HELPER_COLOR))
        return shapes


class Evade(Pursuit):
    """Flee from the target's predicted future position (exactly -Pursuit)."""

    direction_sign = -1.0


__all__ = ["Evade", "Pursuit", "PursuitState"]
