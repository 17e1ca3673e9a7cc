"""Pygame visualisation of steering debug shapes."""

from steering.rendering.debug_renderer import DebugRenderer

__all__ = ["DebugRenderer"]
