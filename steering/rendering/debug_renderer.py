"""Debug renderer for the steering demo.

Draws the plain-data debug shapes produced by a SteeringWorld onto a
pygame surface. World space has y pointing up with the origin at the
centre of the surface; screen space has y pointing down.
"""

import math
from typing import Iterable, Tuple

import pygame

from steering.config.display import AGENT_COLOR, AGENT_RADIUS
from steering.config.simulation_config import DisplayConfig
from steering.debug_draw import DebugArrow, DebugCircle, DebugRect, DebugShape
from steering.math_utils import Vector2, heading
from steering.protocols import Transform

ARROW_HEAD_LENGTH = 8  # pixels
ARROW_HEAD_ANGLE = 25  # degrees either side of the shaft


class DebugRenderer:
    """Renders debug shapes and agents on a pygame surface.

    Attributes:
        screen: Pygame surface to render to
        config: Display settings (scale and background)
    """

    def __init__(self, screen: pygame.Surface, config: DisplayConfig = None) -> None:
        self.screen = screen
        self.config = config if config is not None else DisplayConfig()

    @property
    def origin(self) -> Tuple[float, float]:
        width, height = self.screen.get_size()
        return width / 2.0, height / 2.0

    def world_to_screen(self, point: Vector2) -> Tuple[int, int]:
        """Convert a world position to integer pixel coordinates."""
        ox, oy = self.origin
        ppu = self.config.pixels_per_unit
        return int(round(ox + point.x * ppu)), int(round(oy - point.y * ppu))

    def to_pixels(self, length: float) -> int:
        return max(1, int(round(length * self.config.pixels_per_unit)))

    def clear(self) -> None:
        self.screen.fill(self.config.background_color)

    def draw(self, shapes: Iterable[DebugShape]) -> None:
        for shape in shapes:
            if isinstance(shape, DebugArrow):
                self.draw_arrow(shape)
            elif isinstance(shape, DebugCircle):
                self.draw_circle(shape)
            elif isinstance(shape, DebugRect):
                self.draw_rect(shape)
            else:
                raise TypeError(f"Unsupported debug shape: {type(shape).__name__}")

    def draw_arrow(self, arrow: DebugArrow) -> None:
        start = self.world_to_screen(arrow.start)
        end = self.world_to_screen(arrow.end)
        if start == end:
            return
        pygame.draw.line(self.screen, arrow.color, start, end, 1)

        # Head: two short strokes back from the tip
        angle = math.atan2(start[1] - end[1], start[0] - end[0])
        spread = math.radians(ARROW_HEAD_ANGLE)
        for side in (-spread, spread):
            tip = (
                end[0] + ARROW_HEAD_LENGTH * math.cos(angle + side),
                end[1] + ARROW_HEAD_LENGTH * math.sin(angle + side),
            )
            pygame.draw.line(self.screen, arrow.color, end, tip, 1)

    def draw_circle(self, circle: DebugCircle) -> None:
        width = 0 if circle.filled else 1
        pygame.draw.circle(
            self.screen,
            circle.color,
            self.world_to_screen(circle.center),
            self.to_pixels(circle.radius),
            width,
        )

    def draw_rect(self, shape: DebugRect) -> None:
        rect = shape.rect
        # Top-left in screen space is the world (x_min, y_max) corner
        left, top = self.world_to_screen(Vector2(rect.x_min, rect.y_max))
        right, bottom = self.world_to_screen(Vector2(rect.x_max, rect.y_min))
        pygame.draw.rect(self.screen, shape.color, (left, top, right - left, bottom - top), 1)

    def draw_agent(self, agent: Transform, color=AGENT_COLOR) -> None:
        """Draw an agent as a disc with a heading tick."""
        center = self.world_to_screen(agent.position)
        radius = self.to_pixels(AGENT_RADIUS)
        pygame.draw.circle(self.screen, color, center, radius)
        nose = self.world_to_screen(agent.position + heading(agent.rotation) * (AGENT_RADIUS * 2))
        pygame.draw.line(self.screen, color, center, nose, 2)
