"""Base class for all steering behaviours.

A behaviour proposes the velocity its agent would like to have this tick.
The SteeringManager it is attached to averages the proposals of every
active behaviour and integrates the result.

Contract for subclasses:
- implement ``calculate_desired_velocity(target_position)`` WITHOUT
  applying the weight; ``desired_velocity`` applies it
- a subclass overriding ``desired_velocity`` itself must multiply by
  ``self.weight``
- per-tick state (timers, random walks) advances in ``update(dt)``, which
  the manager calls before reading any desired velocity
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Union

from steering.agent import Agent
from steering.config.behaviours import (
    DEFAULT_DEBUG,
    DEFAULT_WEIGHT,
    MAX_WEIGHT,
    MIN_WEIGHT,
)
from steering.config.display import DESIRED_VELOCITY_COLOR
from steering.debug_draw import DebugArrow, DebugShape
from steering.entity_ids import AgentId
from steering.exceptions import MissingCollaboratorError
from steering.math_utils import Vector2, clamp

if TYPE_CHECKING:
    from steering.manager import SteeringManager

logger = logging.getLogger(__name__)

TargetLike = Union[Agent, AgentId, None]


def clamped(name: str, value: float, low: float, high: float = float("inf")) -> float:
    """Clamp a configuration value, logging when it was out of range."""
    result = clamp(float(value), low, high)
    if result != value:
        logger.debug("%s=%r out of range, clamped to %r", name, value, result)
    return result


class Behaviour(ABC):
    """Abstract steering behaviour.

    Args:
        weight: Blend weight in [0, 1] (clamped)
        target: Agent or AgentId to steer relative to; None means the origin
        active: Whether the behaviour takes part in the blend
        debug: Whether ``debug_shapes`` returns anything
    """

    def __init__(
        self,
        weight: float = DEFAULT_WEIGHT,
        target: TargetLike = None,
        active: bool = True,
        debug: bool = DEFAULT_DEBUG,
    ) -> None:
        self._active = bool(active)
        self._weight = clamped("weight", weight, MIN_WEIGHT, MAX_WEIGHT)
        self._target: Optional[AgentId] = None
        self._missing_target_reported = False
        self.target = target
        self.debug = debug
        self.manager: Optional[SteeringManager] = None

    # ------------------------------------------------------------------
    # Configuration surface
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        value = bool(value)
        changed = self._active != value
        self._active = value
        if changed:
            self._on_activation_changed(value)
            if self.manager is not None:
                self.manager.refresh_behaviours()

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = clamped("weight", value, MIN_WEIGHT, MAX_WEIGHT)

    @property
    def target(self) -> Optional[AgentId]:
        """Handle of the tracked agent (the behaviour never owns it)."""
        return self._target

    @target.setter
    def target(self, value: TargetLike) -> None:
        if isinstance(value, Agent):
            if value.id is None:
                raise MissingCollaboratorError(f"Target {value!r} is not registered")
            value = value.id
        elif value is not None and not isinstance(value, AgentId):
            raise TypeError(f"target must be an Agent, AgentId or None, got {type(value).__name__}")
        self._target = value
        self._missing_target_reported = False

    # ------------------------------------------------------------------
    # Manager wiring
    # ------------------------------------------------------------------

    def on_attached(self, manager: "SteeringManager") -> None:
        """Called by the manager when the behaviour is added to it."""
        self.manager = manager

    def on_detached(self) -> None:
        self.manager = None

    def _on_activation_changed(self, active: bool) -> None:
        """Hook for subclasses with state tied to activation."""

    def _require_manager(self) -> "SteeringManager":
        if self.manager is None:
            raise MissingCollaboratorError(
                f"{type(self).__name__} is not attached to a steering manager"
            )
        return self.manager

    @property
    def position(self) -> Vector2:
        """Position of the agent this behaviour steers."""
        return self._require_manager().agent.position

    def resolve_target(self) -> Optional[Vector2]:
        """Current target position, or None if unset or no longer registered."""
        if self._target is None:
            return None
        registry = self._require_manager().agent.registry
        position = registry.position_of(self._target) if registry is not None else None
        if position is None and not self._missing_target_reported:
            logger.warning("%s target %s is not available", type(self).__name__, self._target)
            self._missing_target_reported = True
        return position

    def target_position(self) -> Vector2:
        """Target position, falling back to the origin."""
        position = self.resolve_target()
        return position.copy() if position is not None else Vector2(0.0, 0.0)

    # ------------------------------------------------------------------
    # Steering
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """Advance per-tick state. Called before ``desired_velocity``."""

    @property
    def desired_velocity(self) -> Vector2:
        """Weighted velocity this behaviour proposes for the current tick."""
        return self.calculate_desired_velocity(self.target_position()) * self.weight

    @abstractmethod
    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        """Unweighted desired velocity relative to ``target_position``."""

    # ------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------

    def debug_shapes(self) -> List[DebugShape]:
        """Shapes describing the behaviour's current state."""
        if not (self._active and self.debug and self.manager is not None):
            return []
        return self._debug_shapes()

    def _debug_shapes(self) -> List[DebugShape]:
        position = self.position
        return [
            DebugArrow(position.copy(), position + self.desired_velocity, DESIRED_VELOCITY_COLOR)
        ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(active={self._active}, weight={self._weight}, "
            f"target={self._target})"
        )
