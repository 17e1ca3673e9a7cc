"""Protocol-based abstractions for the host collaborators.

The steering core never talks to a rendering or physics engine directly.
It consumes a handful of capabilities, each described here as a structural
protocol so any host object providing them works without inheritance:

    Transform - position and z rotation of an agent
    Raycaster - nearest obstacle hit along a ray or circle sweep

``steering.agent.Agent`` and ``steering.obstacles.ObstacleField`` are the
in-process implementations used by the demo and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from steering.math_utils import Vector2


@runtime_checkable
class Transform(Protocol):
    """Position and orientation of an object in the plane."""

    position: "Vector2"

    @property
    def rotation(self) -> float:
        """Rotation about the z axis, in degrees."""
        ...

    @rotation.setter
    def rotation(self, degrees: float) -> None: ...


@dataclass(frozen=True)
class RaycastHit:
    """Result of a successful cast.

    Attributes:
        point: Contact point on the obstacle surface
        center: Centre of the obstacle's bounds
        distance: Distance travelled along the cast before contact
        obstacle: Host object that was hit (opaque to the core)
    """

    point: "Vector2"
    center: "Vector2"
    distance: float = 0.0
    obstacle: Any = None


@runtime_checkable
class Raycaster(Protocol):
    """Obstacle query used by the Avoid behaviour."""

    def cast(
        self,
        origin: "Vector2",
        direction: "Vector2",
        length: float,
        radius: float,
        layer_mask: int,
    ) -> Optional[RaycastHit]:
        """Return the nearest blocking hit, or None.

        A radius of 0 is a thin ray; a positive radius sweeps a circle.
        """
        ...


__all__ = ["RaycastHit", "Raycaster", "Transform"]
