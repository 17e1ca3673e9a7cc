"""Pytest configuration and fixtures for steering tests."""

import random

import pytest

from steering.registry import AgentRegistry
from steering.world import SteeringWorld


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def registry():
    """Provide an empty agent registry."""
    return AgentRegistry()


@pytest.fixture
def world():
    """Provide a fresh world with a fixed seed."""
    return SteeringWorld(seed=42)


@pytest.fixture
def steer(world):
    """Factory: spawn an agent at (x, y) with a manager running ``behaviours``."""

    def _steer(*behaviours, x=0.0, y=0.0, **config):
        agent = world.spawn_agent(x, y)
        manager = world.attach_manager(agent, **config)
        for behaviour in behaviours:
            manager.add_behaviour(behaviour)
        return agent, manager

    return _steer
