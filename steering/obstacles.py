"""Static circular obstacles with ray and circle-sweep queries.

``ObstacleField`` satisfies the ``Raycaster`` protocol consumed by the
Avoid behaviour. A host with its own physics engine would provide its own
raycaster instead.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from steering.config.behaviours import ALL_LAYERS
from steering.config.display import OBSTACLE_COLOR
from steering.debug_draw import DebugCircle, DebugShape
from steering.math_utils import Vector2
from steering.protocols import RaycastHit

logger = logging.getLogger(__name__)


@dataclass
class CircleObstacle:
    """A solid disc on a single layer (0-31)."""

    center: Vector2
    radius: float
    layer: int = 0

    def in_mask(self, layer_mask: int) -> bool:
        return bool(layer_mask & (1 << self.layer))


class ObstacleField:
    """Collection of static obstacles answering nearest-hit casts."""

    def __init__(self, obstacles: Optional[Iterable[CircleObstacle]] = None) -> None:
        self.obstacles: List[CircleObstacle] = list(obstacles or [])

    def add(self, center: Vector2, radius: float, layer: int = 0) -> CircleObstacle:
        obstacle = CircleObstacle(center.copy(), max(0.0, float(radius)), layer)
        self.obstacles.append(obstacle)
        return obstacle

    def cast(
        self,
        origin: Vector2,
        direction: Vector2,
        length: float,
        radius: float = 0.0,
        layer_mask: int = ALL_LAYERS,
    ) -> Optional[RaycastHit]:
        """Nearest obstacle hit by a ray (radius 0) or swept circle.

        A cast starting inside an obstacle hits it at distance 0.
        """
        unit = direction.normalize()
        if unit.is_zero():
            return None

        best: Optional[RaycastHit] = None
        for obstacle in self.obstacles:
            if not obstacle.in_mask(layer_mask):
                continue
            distance = self._intersect(origin, unit, length, obstacle.center, obstacle.radius + radius)
            if distance is None or (best is not None and distance >= best.distance):
                continue
            centroid = origin + unit * distance
            normal = (centroid - obstacle.center).normalize()
            if normal.is_zero():
                normal = -unit
            best = RaycastHit(
                point=obstacle.center + normal * obstacle.radius,
                center=obstacle.center.copy(),
                distance=distance,
                obstacle=obstacle,
            )
        return best

    @staticmethod
    def _intersect(
        origin: Vector2, unit: Vector2, length: float, center: Vector2, radius: float
    ) -> Optional[float]:
        offset = origin - center
        c = offset.length_squared() - radius * radius
        if c <= 0:
            return 0.0
        b = offset.dot(unit)
        if b > 0:
            return None  # moving away from the circle
        discriminant = b * b - c
        if discriminant < 0:
            return None
        t = -b - math.sqrt(discriminant)
        if t > length:
            return None
        return t

    def debug_shapes(self) -> List[DebugShape]:
        return [DebugCircle(o.center.copy(), o.radius, OBSTACLE_COLOR, True) for o in self.obstacles]


__all__ = ["CircleObstacle", "ObstacleField"]
