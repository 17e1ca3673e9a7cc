"""2D steering behaviours for autonomous agents.

Behaviours propose desired velocities; a SteeringManager blends the
proposals of one agent and integrates them; a SteeringWorld drives the
managers through fixed, regular and late update phases.
"""

from steering.agent import Agent
from steering.behaviours import (
    Arrival,
    Avoid,
    Behaviour,
    Eschew,
    Evade,
    Flee,
    FlowFollow,
    Magnet,
    Pursuit,
    PursuitState,
    Seek,
    Wander,
)
from steering.config.simulation_config import DisplayConfig, ManagerConfig, WorldConfig
from steering.entity_ids import AgentId
from steering.exceptions import (
    ConfigurationError,
    InvalidCellError,
    MissingCollaboratorError,
    SteeringError,
)
from steering.flow_field import FlowField, Rect
from steering.manager import SteeringManager
from steering.math_utils import Vector2
from steering.obstacles import CircleObstacle, ObstacleField
from steering.protocols import RaycastHit, Raycaster
from steering.registry import AgentRegistry
from steering.update_phases import FrameTime, UpdateMode
from steering.world import SteeringWorld

__version__ = "0.1.0"

__all__ = [
    "Agent",
    "AgentId",
    "AgentRegistry",
    "Arrival",
    "Avoid",
    "Behaviour",
    "CircleObstacle",
    "ConfigurationError",
    "DisplayConfig",
    "Eschew",
    "Evade",
    "Flee",
    "FlowField",
    "FlowFollow",
    "FrameTime",
    "InvalidCellError",
    "Magnet",
    "ManagerConfig",
    "MissingCollaboratorError",
    "ObstacleField",
    "Pursuit",
    "PursuitState",
    "RaycastHit",
    "Raycaster",
    "Rect",
    "Seek",
    "SteeringError",
    "SteeringManager",
    "SteeringWorld",
    "UpdateMode",
    "Vector2",
    "Wander",
    "WorldConfig",
]
