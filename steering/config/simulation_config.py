"""Lightweight steering configuration helpers."""

from dataclasses import dataclass, field
from typing import Tuple, Union

from steering.config.behaviours import (
    DEFAULT_DEBUG,
    DEFAULT_MASS,
    DEFAULT_MAX_SPEED,
    DEFAULT_ROTATE,
    DEFAULT_TIMESCALE_INDEPENDENT,
)
from steering.config.display import (
    BACKGROUND_COLOR,
    FRAME_RATE,
    PIXELS_PER_UNIT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SEPARATOR_WIDTH,
)
from steering.update_phases import UpdateMode

Color = Tuple[int, int, int]


@dataclass
class ManagerConfig:
    """Initial settings for a SteeringManager.

    Attributes:
        update_mode: Phase in which the manager integrates (enum or name)
        active: Whether steering starts enabled
        max_speed: Maximum speed in units per second (clamped to >= 0)
        mass: Agent mass (clamped to >= 1)
        rotate: Rotate the agent towards its heading
        timescale_independent: Integrate with unscaled time
        debug: Emit debug shapes
    """

    update_mode: Union[UpdateMode, str] = UpdateMode.UPDATE
    active: bool = True
    max_speed: float = DEFAULT_MAX_SPEED
    mass: float = DEFAULT_MASS
    rotate: bool = DEFAULT_ROTATE
    timescale_independent: bool = DEFAULT_TIMESCALE_INDEPENDENT
    debug: bool = DEFAULT_DEBUG


@dataclass
class DisplayConfig:
    """Minimal display configuration for the debug renderer."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    pixels_per_unit: float = PIXELS_PER_UNIT
    background_color: Color = BACKGROUND_COLOR
    separator_width: int = SEPARATOR_WIDTH


@dataclass
class WorldConfig:
    """Clock and loop configuration for a SteeringWorld.

    Attributes:
        fixed_delta_time: Length of one fixed-step update in seconds
        time_scale: Multiplier applied to real elapsed time
        max_fixed_steps_per_frame: Upper bound on catch-up fixed steps
        frame_rate: Frames per second assumed by headless runs
    """

    fixed_delta_time: float = 0.02
    time_scale: float = 1.0
    max_fixed_steps_per_frame: int = 8
    frame_rate: int = FRAME_RATE
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @property
    def frame_delta(self) -> float:
        """Real seconds per frame for headless runs."""
        return 1.0 / self.frame_rate
