"""Steering manager: blends behaviour proposals into agent motion.

At each tick of its configured phase the manager averages the desired
velocities of every active behaviour attached to it and integrates the
result with Newton's second law:

    steering_force = average_desired - velocity
    acceleration   = steering_force / mass
    velocity      += acceleration
    position      += velocity * dt

The manager is the only owner of the agent's velocity and heading.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from steering.agent import Agent
from steering.behaviours.base import Behaviour, clamped
from steering.config.behaviours import MIN_MASS, MIN_MAX_SPEED
from steering.config.display import VELOCITY_COLOR
from steering.config.simulation_config import ManagerConfig
from steering.debug_draw import DebugArrow, DebugShape
from steering.exceptions import MissingCollaboratorError
from steering.math_utils import Vector2, angle_degrees
from steering.update_phases import FrameTime, UpdateMode

logger = logging.getLogger(__name__)


class SteeringManager:
    """Applies a set of steering behaviours to one agent.

    Args:
        agent: Transform the manager moves (required)
        config: Initial settings; keyword overrides take precedence

    Attributes:
        rotate: Rotate the agent towards its heading after each tick
        timescale_independent: Integrate with unscaled instead of scaled time
        debug: Emit debug shapes
    """

    def __init__(self, agent: Agent, config: Optional[ManagerConfig] = None, **overrides) -> None:
        if agent is None:
            raise MissingCollaboratorError("SteeringManager requires an agent")
        config = replace(config if config is not None else ManagerConfig(), **overrides)

        self.agent = agent
        self.update_mode = UpdateMode.parse(config.update_mode)
        self._active = bool(config.active)
        self.max_speed = config.max_speed
        self.mass = config.mass
        self.rotate = config.rotate
        self.timescale_independent = config.timescale_independent
        self.debug = config.debug

        self._velocity = Vector2(0.0, 0.0)
        self._direction = Vector2(1.0, 0.0)
        self._behaviours: List[Behaviour] = []
        self._active_behaviours: List[Behaviour] = []

    # ------------------------------------------------------------------
    # Configuration surface
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        value = bool(value)
        if self._active != value:
            self._velocity = Vector2(0.0, 0.0)
            logger.debug("Steering for %r %s", self.agent, "enabled" if value else "disabled")
        self._active = value

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @max_speed.setter
    def max_speed(self, value: float) -> None:
        self._max_speed = clamped("max_speed", value, MIN_MAX_SPEED)

    @property
    def mass(self) -> float:
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        self._mass = clamped("mass", value, MIN_MASS)

    @property
    def velocity(self) -> Vector2:
        """Current velocity (a copy; only the manager mutates it)."""
        return self._velocity.copy()

    @property
    def direction(self) -> Vector2:
        """Normalised heading; keeps its last value while the agent is still."""
        return self._direction.copy()

    # ------------------------------------------------------------------
    # Behaviours
    # ------------------------------------------------------------------

    @property
    def behaviours(self) -> List[Behaviour]:
        return list(self._behaviours)

    @property
    def active_behaviours(self) -> List[Behaviour]:
        return list(self._active_behaviours)

    def add_behaviour(self, behaviour: Behaviour) -> Behaviour:
        """Attach ``behaviour`` to this manager and return it."""
        if behaviour.manager is not None and behaviour.manager is not self:
            behaviour.manager.remove_behaviour(behaviour)
        if behaviour not in self._behaviours:
            self._behaviours.append(behaviour)
            behaviour.on_attached(self)
        self.refresh_behaviours()
        return behaviour

    def remove_behaviour(self, behaviour: Behaviour) -> None:
        if behaviour in self._behaviours:
            self._behaviours.remove(behaviour)
            behaviour.on_detached()
            self.refresh_behaviours()

    def refresh_behaviours(self) -> None:
        """Rebuild the list of behaviours taking part in the blend."""
        self._active_behaviours = [b for b in self._behaviours if b.active]
        logger.debug(
            "%r: %d of %d behaviours active",
            self.agent,
            len(self._active_behaviours),
            len(self._behaviours),
        )

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def on_phase(self, mode: UpdateMode, frame_time: FrameTime) -> None:
        """Host callback for every phase; only the configured one integrates."""
        if mode is not self.update_mode:
            return
        dt = frame_time.unscaled_delta if self.timescale_independent else frame_time.delta
        self.step(dt)

    def step(self, dt: float) -> None:
        """Run one integration tick of ``dt`` seconds."""
        if not self._active:
            return

        behaviours = self._active_behaviours
        for behaviour in behaviours:
            behaviour.update(dt)

        desired = Vector2(0.0, 0.0)
        for behaviour in behaviours:
            desired.add_inplace(behaviour.desired_velocity)
        if behaviours:
            desired = desired / len(behaviours)

        steering_force = desired - self._velocity
        acceleration = steering_force / self._mass
        self._velocity.add_inplace(acceleration)

        self.agent.position.add_inplace(self._velocity * dt)

        if not self._velocity.is_zero():
            self._direction = self._velocity.normalize()
            if self.rotate:
                self.agent.rotation = angle_degrees(self._velocity)

    # ------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------

    def debug_shapes(self) -> List[DebugShape]:
        """Velocity arrow plus the shapes of every active behaviour."""
        if not (self._active and self.debug):
            return []
        position = self.agent.position
        shapes: List[DebugShape] = [
            DebugArrow(position.copy(), position + self._velocity, VELOCITY_COLOR)
        ]
        for behaviour in self._active_behaviours:
            shapes.extend(behaviour.debug_shapes())
        return shapes

    def __repr__(self) -> str:
        return (
            f"SteeringManager(agent={self.agent!r}, mode={self.update_mode.value}, "
            f"active={self._active}, behaviours={len(self._behaviours)})"
        )
