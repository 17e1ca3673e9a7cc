"""Update phase definitions for explicit execution ordering.

A host frame runs its phases in a fixed order: zero or more fixed-step
updates, then the regular update, then the late update. Each steering
manager is bound to exactly one of them and ignores the others.

Usage:
------
    manager = SteeringManager(agent, update_mode=UpdateMode.FIXED_UPDATE)

    # The world (or any host loop) broadcasts every phase
    for mode, frame_time in host_phases():
        manager.on_phase(mode, frame_time)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from steering.exceptions import ConfigurationError

__all__ = [
    "UpdateMode",
    "FrameTime",
    "PHASE_ORDER",
    "PHASE_DESCRIPTIONS",
]


class UpdateMode(Enum):
    """Per-frame phase in which a steering manager integrates motion."""

    UPDATE = "update"
    LATE_UPDATE = "late_update"
    FIXED_UPDATE = "fixed_update"

    @classmethod
    def parse(cls, value: Union["UpdateMode", str]) -> "UpdateMode":
        """Accept an enum member or its (case-insensitive) name/value."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ConfigurationError(f"Unknown update mode: {value!r}")


# Host execution order within one frame
PHASE_ORDER = (UpdateMode.FIXED_UPDATE, UpdateMode.UPDATE, UpdateMode.LATE_UPDATE)

PHASE_DESCRIPTIONS: Dict[UpdateMode, str] = {
    UpdateMode.FIXED_UPDATE: "Fixed-step update before physics",
    UpdateMode.UPDATE: "Regular per-frame update",
    UpdateMode.LATE_UPDATE: "Late update after rendering preparation",
}


@dataclass(frozen=True)
class FrameTime:
    """Clock reading handed to managers for one phase.

    Attributes:
        delta: Elapsed time scaled by the world's time scale
        unscaled_delta: Elapsed real time, ignoring the time scale
        frame: Frame counter of the host loop
    """

    delta: float
    unscaled_delta: float
    frame: int = 0

    @classmethod
    def fixed(cls, dt: float, frame: int = 0) -> "FrameTime":
        """A reading where scaled and unscaled time agree."""
        return cls(delta=dt, unscaled_delta=dt, frame=frame)
