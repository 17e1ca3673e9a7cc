"""Agent transform.

An Agent is the host-side object a steering manager moves: it owns the
position, z rotation and scale. Velocity is not stored here; it belongs
exclusively to the agent's SteeringManager.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from steering.math_utils import Vector2, heading

if TYPE_CHECKING:
    from steering.entity_ids import AgentId
    from steering.registry import AgentRegistry


class Agent:
    """A positioned, rotatable object in the plane.

    Attributes:
        position: World position (mutated in place by the manager)
        scale: Local scale, used by hosts such as flow fields
        name: Optional label for logs
        id: Handle assigned by the registry (None until registered)
        registry: Registry the agent belongs to (None until registered)
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        rotation: float = 0.0,
        name: Optional[str] = None,
        scale: Optional[Vector2] = None,
    ) -> None:
        self.position = Vector2(x, y)
        self._rotation = float(rotation)
        self.scale = scale.copy() if scale is not None else Vector2(1.0, 1.0)
        self.name = name
        self.id: Optional[AgentId] = None
        self.registry: Optional[AgentRegistry] = None

    @property
    def rotation(self) -> float:
        """Rotation about the z axis, in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        self._rotation = float(degrees)

    @property
    def forward(self) -> Vector2:
        """Unit vector the agent is facing."""
        return heading(self._rotation)

    def move_to(self, x: float, y: float) -> None:
        self.position.update(x, y)

    def __repr__(self) -> str:
        label = self.name or (str(self.id) if self.id is not None else "unregistered")
        return f"Agent({label}, pos=({self.position.x:.2f}, {self.position.y:.2f}))"
