"""Obstacle avoidance behaviour.

Looks ahead along the agent's heading with a ray (or a circle sweep) and,
when something blocks the way, pushes the agent away from the obstacle's
centre while keeping its current momentum.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from steering.behaviours.base import Behaviour, clamped
from steering.config.behaviours import (
    ALL_LAYERS,
    DEFAULT_RAYCAST_RADIUS,
    DEFAULT_SEE_AHEAD_DISTANCE,
    MIN_RAYCAST_RADIUS,
    MIN_SEE_AHEAD_DISTANCE,
)
from steering.config.display import DESIRED_VELOCITY_COLOR, HELPER_COLOR, HIT_MARKER_RADIUS
from steering.debug_draw import DebugArrow, DebugCircle, DebugShape
from steering.exceptions import MissingCollaboratorError
from steering.math_utils import Vector2
from steering.protocols import RaycastHit, Raycaster

logger = logging.getLogger(__name__)


class Avoid(Behaviour):
    """Steer around obstacles found ahead of the agent.

    The target reference is ignored.

    Args:
        raycaster: Obstacle query provider (required)
        see_ahead_distance: Look-ahead length (>= 1)
        raycast_radius: Sweep radius (>= 0); 0 casts a thin ray
        layer_mask: Bit mask of obstacle layers to consider
    """

    def __init__(
        self,
        raycaster: Raycaster,
        see_ahead_distance: float = DEFAULT_SEE_AHEAD_DISTANCE,
        raycast_radius: float = DEFAULT_RAYCAST_RADIUS,
        layer_mask: int = ALL_LAYERS,
        **kwargs,
    ) -> None:
        if raycaster is None:
            raise MissingCollaboratorError("Avoid requires a raycaster")
        super().__init__(**kwargs)
        self.raycaster = raycaster
        self.see_ahead_distance = see_ahead_distance
        self.raycast_radius = raycast_radius
        self.layer_mask = layer_mask

    @property
    def see_ahead_distance(self) -> float:
        return self._see_ahead_distance

    @see_ahead_distance.setter
    def see_ahead_distance(self, value: float) -> None:
        self._see_ahead_distance = clamped("see_ahead_distance", value, MIN_SEE_AHEAD_DISTANCE)

    @property
    def raycast_radius(self) -> float:
        return self._raycast_radius

    @raycast_radius.setter
    def raycast_radius(self, value: float) -> None:
        self._raycast_radius = clamped("raycast_radius", value, MIN_RAYCAST_RADIUS)

    def look_ahead(self) -> Optional[RaycastHit]:
        """Nearest obstacle along the current heading, if any."""
        manager = self._require_manager()
        return self.raycaster.cast(
            manager.agent.position,
            manager.direction,
            self._see_ahead_distance,
            self._raycast_radius,
            self.layer_mask,
        )

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        hit = self.look_ahead()
        if hit is None:
            return Vector2(0.0, 0.0)
        return self._avoidance_velocity(hit)

    def _avoidance_velocity(self, hit: RaycastHit) -> Vector2:
        manager = self._require_manager()
        steer = (hit.point - hit.center).normalize() * manager.max_speed
        logger.debug("Avoiding obstacle at %r (hit point %r)", hit.center, hit.point)
        return (steer + manager.velocity).normalize() * manager.max_speed

    def _debug_shapes(self) -> List[DebugShape]:
        manager = self._require_manager()
        position = manager.agent.position
        see_ahead = position + manager.direction * self._see_ahead_distance
        shapes: List[DebugShape] = [DebugArrow(position.copy(), see_ahead, DESIRED_VELOCITY_COLOR)]
        hit = self.look_ahead()
        if hit is not None:
            velocity = self._avoidance_velocity(hit)
            shapes.append(DebugCircle(hit.point, HIT_MARKER_RADIUS, DESIRED_VELOCITY_COLOR, True))
            shapes.append(DebugArrow(position.copy(), position + velocity, HELPER_COLOR))
        return shapes
