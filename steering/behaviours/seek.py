"""Seek-family behaviours: Seek, Flee and their distance-scaled variants.

Each behaviour is a base locomotion formula optionally multiplied by a
distance factor:

    Seek     seek_velocity
    Flee     flee_velocity                     (exactly -Seek)
    Arrival  seek_velocity * arrival_factor    (slows down near the target)
    Eschew   flee_velocity * eschew_factor     (flees only while close)
    Magnet   seek_velocity * magnet_factor     (pulled in only while close)
"""

from __future__ import annotations

from typing import List

from steering.behaviours.base import Behaviour, clamped
from steering.behaviours.formulas import (
    arrival_factor,
    eschew_factor,
    flee_velocity,
    magnet_factor,
    seek_velocity,
)
from steering.config.behaviours import (
    DEFAULT_ATTRACTION_RADIUS,
    DEFAULT_SAFE_RADIUS,
    DEFAULT_SLOWING_RADIUS,
    MIN_BEHAVIOUR_RADIUS,
)
from steering.config.display import HELPER_COLOR
from steering.debug_draw import DebugCircle, DebugShape
from steering.math_utils import Vector2


class Seek(Behaviour):
    """Head straight for the target at maximum speed."""

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        return seek_velocity(manager.agent.position, target_position, manager.max_speed)


class Flee(Behaviour):
    """Run straight away from the target at maximum speed."""

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        return flee_velocity(manager.agent.position, target_position, manager.max_speed)


class Arrival(Behaviour):
    """Seek that decelerates inside a slowing radius around the target.

    Args:
        slowing_radius: Radius (>= 1) where deceleration starts
    """

    def __init__(self, slowing_radius: float = DEFAULT_SLOWING_RADIUS, **kwargs) -> None:
        super().__init__(**kwargs)
        self.slowing_radius = slowing_radius

    @property
    def slowing_radius(self) -> float:
        return self._slowing_radius

    @slowing_radius.setter
    def slowing_radius(self, value: float) -> None:
        self._slowing_radius = clamped("slowing_radius", value, MIN_BEHAVIOUR_RADIUS)

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        position = manager.agent.position
        factor = arrival_factor(position.distance_to(target_position), self._slowing_radius)
        return seek_velocity(position, target_position, manager.max_speed) * factor

    def _debug_shapes(self) -> List[DebugShape]:
        shapes = super()._debug_shapes()
        shapes.append(DebugCircle(self.target_position(), self._slowing_radius, HELPER_COLOR))
        return shapes


class Eschew(Behaviour):
    """Flee that fades out as the agent leaves the safe radius.

    Args:
        safe_radius: Radius (>= 1) the agent tries to stay outside of
    """

    def __init__(self, safe_radius: float = DEFAULT_SAFE_RADIUS, **kwargs) -> None:
        super().__init__(**kwargs)
        self.safe_radius = safe_radius

    @property
    def safe_radius(self) -> float:
        return self._safe_radius

    @safe_radius.setter
    def safe_radius(self, value: float) -> None:
        self._safe_radius = clamped("safe_radius", value, MIN_BEHAVIOUR_RADIUS)

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        position = manager.agent.position
        factor = eschew_factor(position.distance_to(target_position), self._safe_radius)
        return flee_velocity(position, target_position, manager.max_speed) * factor

    def _debug_shapes(self) -> List[DebugShape]:
        shapes = super()._debug_shapes()
        shapes.append(DebugCircle(self.target_position(), self._safe_radius, HELPER_COLOR))
        return shapes


class Magnet(Behaviour):
    """Seek whose pull only exists near the target and grows as it closes in.

    Args:
        attraction_radius: Radius (>= 1) inside which the pull is felt
    """

    def __init__(self, attraction_radius: float = DEFAULT_ATTRACTION_RADIUS, **kwargs) -> None:
        super().__init__(**kwargs)
        self.attraction_radius = attraction_radius

    @property
    def attraction_radius(self) -> float:
        return self._attraction_radius

    @attraction_radius.setter
    def attraction_radius(self, value: float) -> None:
        self._attraction_radius = clamped("attraction_radius", value, MIN_BEHAVIOUR_RADIUS)

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        position = manager.agent.position
        factor = magnet_factor(position.distance_to(target_position), self._attraction_radius)
        return seek_velocity(position, target_position, manager.max_speed) * factor

    def _debug_shapes(self) -> List[DebugShape]:
        shapes = super()._debug_shapes()
        shapes.append(DebugCircle(self.position.copy(), self._attraction_radius, HELPER_COLOR))
        return shapes
