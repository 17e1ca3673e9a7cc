"""Tests for the pygame debug renderer, drawing onto off-screen surfaces."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from steering.agent import Agent  # noqa: E402
from steering.config.simulation_config import DisplayConfig  # noqa: E402
from steering.debug_draw import DebugArrow, DebugCircle, DebugRect  # noqa: E402
from steering.flow_field import Rect  # noqa: E402
from steering.math_utils import Vector2  # noqa: E402
from steering.protocols import Transform  # noqa: E402
from steering.rendering import DebugRenderer  # noqa: E402

RED = (255, 0, 0)


@pytest.fixture
def renderer():
    surface = pygame.Surface((200, 100))
    renderer = DebugRenderer(surface, DisplayConfig(pixels_per_unit=32.0))
    renderer.clear()
    return renderer


def pixel(renderer, x, y):
    return tuple(renderer.screen.get_at((x, y)))[:3]


class TestTransform:
    def test_origin_at_surface_centre(self, renderer):
        assert renderer.world_to_screen(Vector2(0, 0)) == (100, 50)

    def test_y_axis_points_up(self, renderer):
        assert renderer.world_to_screen(Vector2(1, 1)) == (132, 18)


class TestDrawing:
    def test_clear_fills_background(self, renderer):
        assert pixel(renderer, 0, 0) == renderer.config.background_color

    def test_arrow(self, renderer):
        renderer.draw([DebugArrow(Vector2(0, 0), Vector2(2, 0), RED)])
        assert pixel(renderer, 120, 50) == RED

    def test_filled_circle(self, renderer):
        renderer.draw([DebugCircle(Vector2(0, 0), 0.25, RED, filled=True)])
        assert pixel(renderer, 100, 50) == RED

    def test_rect_outline(self, renderer):
        renderer.draw([DebugRect(Rect(-1, -1, 2, 2), RED)])
        assert pixel(renderer, 68, 50) == RED
        assert pixel(renderer, 100, 50) != RED

    def test_agent(self, renderer):
        renderer.draw_agent(Agent(0, 0), RED)
        assert pixel(renderer, 100, 50) == RED

    def test_agent_heading_tick_follows_rotation(self, renderer):
        renderer.draw_agent(Agent(0, 0, rotation=90), RED)
        assert pixel(renderer, 100, 38) == RED
        assert pixel(renderer, 112, 50) != RED

    def test_any_transform_can_be_drawn(self, renderer):
        class HostTransform:
            def __init__(self):
                self.position = Vector2(1, 0)
                self.rotation = 0.0

        host = HostTransform()
        assert isinstance(host, Transform)
        assert isinstance(Agent(), Transform)
        renderer.draw_agent(host, RED)
        assert pixel(renderer, 132, 50) == RED

    def test_unknown_shape_rejected(self, renderer):
        with pytest.raises(TypeError):
            renderer.draw(["not a shape"])

    def test_world_shapes_render(self, renderer, world):
        field = world.add_flow_field(2, 2)
        field.fill_with_perlin_noise()
        world.step()
        renderer.draw(world.debug_shapes())
