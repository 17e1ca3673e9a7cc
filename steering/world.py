"""Steering world: the host loop driving managers phase by phase.

The world plays the role of the game engine around the steering core. It
owns the agent registry, the clock and every steering manager, and runs
each frame in explicit phase order:

    1. FIXED_UPDATE: zero or more fixed steps covering the elapsed time
    2. UPDATE: regular per-frame update with the frame's delta
    3. LATE_UPDATE: late update with the same delta

Every manager receives every phase and integrates only in its own.
Everything runs on the calling thread; nothing is scheduled in between.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional, Union

from steering.agent import Agent
from steering.config.simulation_config import ManagerConfig, WorldConfig
from steering.debug_draw import DebugShape
from steering.entity_ids import AgentId
from steering.flow_field import FlowField
from steering.manager import SteeringManager
from steering.math_utils import Vector2
from steering.noise import PerlinNoise
from steering.obstacles import ObstacleField
from steering.protocols import Raycaster
from steering.registry import AgentRegistry
from steering.update_phases import PHASE_DESCRIPTIONS, PHASE_ORDER, FrameTime, UpdateMode

logger = logging.getLogger(__name__)


class FrameClock:
    """Tracks scaled and unscaled simulation time."""

    def __init__(self, time_scale: float = 1.0) -> None:
        self.time_scale = max(0.0, float(time_scale))
        self.frame = 0
        self.time = 0.0
        self.unscaled_time = 0.0

    def tick(self, real_dt: float) -> FrameTime:
        """Advance by ``real_dt`` seconds of real time."""
        real_dt = max(0.0, float(real_dt))
        self.frame += 1
        scaled = real_dt * self.time_scale
        self.time += scaled
        self.unscaled_time += real_dt
        return FrameTime(delta=scaled, unscaled_delta=real_dt, frame=self.frame)


class SteeringWorld:
    """Registry, clock and managers for one simulation.

    Args:
        config: Clock/loop configuration (defaults to WorldConfig())
        seed: Seed for the world RNG shared by wander behaviours and fields
        raycaster: Obstacle provider for Avoid (defaults to an empty field)
    """

    def __init__(
        self,
        config: Optional[WorldConfig] = None,
        seed: Optional[int] = None,
        raycaster: Optional[Raycaster] = None,
    ) -> None:
        self.config = config if config is not None else WorldConfig()
        self.rng = random.Random(seed)
        self.registry = AgentRegistry()
        self.clock = FrameClock(self.config.time_scale)
        self.raycaster: Raycaster = raycaster if raycaster is not None else ObstacleField()
        self.flow_fields: List[FlowField] = []
        self._managers: Dict[AgentId, SteeringManager] = {}
        self._fixed_accumulator = 0.0
        self._current_phase: Optional[UpdateMode] = None

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def spawn_agent(
        self, x: float = 0.0, y: float = 0.0, rotation: float = 0.0, name: Optional[str] = None
    ) -> Agent:
        """Create and register a plain agent (no steering)."""
        agent = Agent(x, y, rotation=rotation, name=name)
        self.registry.register(agent)
        return agent

    def attach_manager(
        self, agent: Agent, config: Optional[ManagerConfig] = None, **overrides
    ) -> SteeringManager:
        """Give ``agent`` a steering manager driven by this world."""
        if agent.id is None or agent.registry is not self.registry:
            self.registry.register(agent)
        manager = SteeringManager(agent, config, **overrides)
        self._managers[agent.id] = manager
        logger.debug("Attached %r", manager)
        return manager

    def manager_for(self, agent: Union[Agent, AgentId]) -> Optional[SteeringManager]:
        agent_id = agent.id if isinstance(agent, Agent) else agent
        return self._managers.get(agent_id)

    @property
    def managers(self) -> List[SteeringManager]:
        return list(self._managers.values())

    def remove_agent(self, agent: Union[Agent, AgentId]) -> None:
        """Tear down an agent and its manager; handles to it stop resolving."""
        agent_id = agent.id if isinstance(agent, Agent) else agent
        if agent_id is None:
            return
        self._managers.pop(agent_id, None)
        if self.registry.remove(agent_id) is not None:
            logger.info("Removed %s from the world", agent_id)

    def add_flow_field(
        self,
        rows: int,
        columns: int,
        position: Optional[Vector2] = None,
        scale: Optional[Vector2] = None,
        noise: Optional[PerlinNoise] = None,
    ) -> FlowField:
        field = FlowField(rows, columns, position=position, scale=scale, rng=self.rng, noise=noise)
        self.flow_fields.append(field)
        return field

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    @property
    def frame_count(self) -> int:
        return self.clock.frame

    def get_current_phase(self) -> Optional[UpdateMode]:
        return self._current_phase

    def get_phase_description(self, phase: Optional[UpdateMode] = None) -> str:
        phase = phase if phase is not None else self._current_phase
        if phase is None:
            return "Not updating"
        return PHASE_DESCRIPTIONS[phase]

    def step(self, real_dt: Optional[float] = None) -> None:
        """Advance the world by one frame of ``real_dt`` real seconds."""
        if real_dt is None:
            real_dt = self.config.frame_delta
        frame_time = self.clock.tick(real_dt)

        for mode in PHASE_ORDER:
            if mode is UpdateMode.FIXED_UPDATE:
                self._phase_fixed_update(frame_time)
            else:
                self._run_phase(mode, frame_time)
        self._current_phase = None

    def _phase_fixed_update(self, frame_time: FrameTime) -> None:
        fixed_dt = self.config.fixed_delta_time
        if fixed_dt <= 0:
            return
        self._fixed_accumulator += frame_time.delta
        steps = 0
        while self._fixed_accumulator >= fixed_dt:
            if steps >= self.config.max_fixed_steps_per_frame:
                logger.debug(
                    "Frame %d: dropping %.4fs of fixed-step backlog",
                    frame_time.frame,
                    self._fixed_accumulator,
                )
                self._fixed_accumulator = 0.0
                break
            self._run_phase(UpdateMode.FIXED_UPDATE, FrameTime.fixed(fixed_dt, frame_time.frame))
            self._fixed_accumulator -= fixed_dt
            steps += 1

    def _run_phase(self, mode: UpdateMode, frame_time: FrameTime) -> None:
        self._current_phase = mode
        for manager in list(self._managers.values()):
            manager.on_phase(mode, frame_time)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def debug_shapes(self) -> List[DebugShape]:
        shapes: List[DebugShape] = []
        for field in self.flow_fields:
            shapes.extend(field.debug_shapes())
        if hasattr(self.raycaster, "debug_shapes"):
            shapes.extend(self.raycaster.debug_shapes())
        for manager in self._managers.values():
            shapes.extend(manager.debug_shapes())
        return shapes

    def get_stats(self) -> Dict[str, Any]:
        agents = {}
        for agent in self.registry:
            manager = self._managers.get(agent.id)
            agents[str(agent.id)] = {
                "name": agent.name,
                "position": agent.position.to_tuple(),
                "rotation": agent.rotation,
                "velocity": manager.velocity.to_tuple() if manager is not None else None,
            }
        return {
            "frame": self.clock.frame,
            "time": self.clock.time,
            "agents": agents,
        }

    def print_stats(self) -> None:
        stats = self.get_stats()
        logger.info("Frame %d (t=%.2fs)", stats["frame"], stats["time"])
        for agent_id, info in stats["agents"].items():
            x, y = info["position"]
            velocity = info["velocity"]
            if velocity is None:
                logger.info("  %s %s pos=(%.2f, %.2f)", agent_id, info["name"] or "", x, y)
            else:
                logger.info(
                    "  %s %s pos=(%.2f, %.2f) vel=(%.2f, %.2f)",
                    agent_id,
                    info["name"] or "",
                    x,
                    y,
                    velocity[0],
                    velocity[1],
                )

    def run_headless(self, max_frames: int = 600, stats_interval: int = 60) -> Dict[str, Any]:
        """Run ``max_frames`` frames without visualization and return final stats."""
        sep = self.config.display.separator_width
        logger.info("=" * sep)
        logger.info("HEADLESS STEERING SIMULATION")
        logger.info("=" * sep)
        logger.info(
            "Running for %d frames (%.1f seconds of sim time)",
            max_frames,
            max_frames * self.config.frame_delta * self.clock.time_scale,
        )

        for frame in range(max_frames):
            self.step()
            if stats_interval > 0 and frame > 0 and frame % stats_interval == 0:
                self.print_stats()

        logger.info("=" * sep)
        logger.info("SIMULATION COMPLETE - Final positions")
        logger.info("=" * sep)
        self.print_stats()
        return self.get_stats()
