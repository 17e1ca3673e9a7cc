"""Flow field following behaviour."""

from __future__ import annotations

from steering.behaviours.base import Behaviour
from steering.exceptions import MissingCollaboratorError
from steering.flow_field import FlowField
from steering.math_utils import Vector2


class FlowFollow(Behaviour):
    """Move along the flow field vector under the agent at maximum speed.

    Outside the field the proposal is zero. The target reference is ignored.
    """

    def __init__(self, flow_field: FlowField, **kwargs) -> None:
        if flow_field is None:
            raise MissingCollaboratorError("FlowFollow requires a flow field")
        super().__init__(**kwargs)
        self.flow_field = flow_field

    def calculate_desired_velocity(self, target_position: Vector2) -> Vector2:
        manager = self._require_manager()
        flow = self.flow_field.get_value_at_position(manager.agent.position)
        return flow.normalize() * manager.max_speed
