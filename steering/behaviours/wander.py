"""Wander behaviour.

The agent seeks a "carrot" sitting on a circle projected ahead of it. The
carrot's angle on the circle is integrated over time from a random drift,
so the route changes smoothly instead of jittering.
"""

from __future__ import annotations

import random
from typing import List, Optional

from steering.behaviours.base import Behaviour, clamped
from steering.behaviours.formulas import seek_velocity
from steering.config.behaviours import (
    DEFAULT_CIRCLE_DISTANCE,
    DEFAULT_CIRCLE_RADIUS,
    MIN_CIRCLE_DISTANCE,
    MIN_CIRCLE_RADIUS,
    WANDER_ANGLE_RANGE,
)
from steering.config.display import CARROT_RADIUS, DESIRED_VELOCITY_COLOR, HELPER_COLOR
from steering.debug_draw import DebugArrow, DebugCircle, DebugShape
from steering.math_utils import Vector2, rotate


class Wander(Behaviour):
    """Randomised seek towards a carrot ahead of the agent.

    The target reference is ignored.

    Args:
        circle_distance: Distance (>= 1) from the agent to the circle centre
        circle_radius: Radius (>= 0) of the circle holding the carrot
        rng: Random source for the angle drift (defaults to the module RNG)
    """

    def __init__(
        self,
        circle_distance: float = DEFAULT_CIRCLE_DISTANCE,
        circle_radius: float = DEFAULT_CIRCLE_RADIUS,
        rng: Optional[random.Random] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.circle_distance = circle_distance
        self.circle_radius = circle_radius
        self.rng = rng if rng is not None else random.Random()
        self.wander_angle = 0.0
        self.circle_center = Vector2(0.0, 0.0)
        self.displacement = Vector2(0.0, 0.0)
        self._dt = 0.0

    @property
    def circle_distance(self) -> float:
        return self._circle_distance

    @circle_distance.setter
    def circle_distance(self, value: float) -> None:
        self._circle_distance = clamped("circle_distance", value, MIN_CIRCLE_DISTANCE)

    @property
    def circle_radius(self) -> float:
        return self._circle_radius

    @circle_radius.setter
    def circle_radius(self, value: float) -> None:
        self._circle_radius = clamped("circle_radius", value, MIN_CIRCLE_RADIUS)

    @property
    def carrot(self) -> Vector2:
        """Point currently being sought."""
        return self.circle_center + self.displacement

    def on_attached(self, manager) -> None:
        super().on_attached(manager)
        # Initial circle: no time has elapsed yet, so the angle does not drift
        self._advance_circle(0.0)

    def update(self, dt: float) -> None:
        self._dt = dt

    def _advance_circle(self, dt: float) -> None:
        manager = self._require_manager()
        self.circle_center = manager.agent.position + manager.direction * self._circle_distance
        self.wander_angle += self.rng.uniform(-WANDER_ANGLE_RANGE, WANDER_ANGLE_RANGE) * dt
        self.displacement = rotate(Vector2(self._circle_radius, 0.0), self.wander_angle)

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        velocity = seek_velocity(manager.agent.position, self.carrot, manager.max_speed)
        # Every evaluation moves the carrot for the next one
        self._advance_circle(self._dt)
        return velocity

    def _debug_shapes(self) -> List[DebugShape]:
        position = self.position
        carrot = self.carrot
        return [
            DebugArrow(position.copy(), carrot, DESIRED_VELOCITY_COLOR),
            DebugCircle(self.circle_center.copy(), self._circle_radius, HELPER_COLOR),
            DebugCircle(carrot, CARROT_RADIUS, HELPER_COLOR, filled=True),
        ]
