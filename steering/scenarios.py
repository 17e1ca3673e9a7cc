"""Demo scenarios, one per behaviour.

Each builder populates a fresh SteeringWorld and returns the agents the
renderer should highlight as targets.
"""

import logging
from typing import Callable, Dict, List

from steering.agent import Agent
from steering.behaviours import (
    Arrival,
    Avoid,
    Eschew,
    Evade,
    Flee,
    FlowFollow,
    Magnet,
    Pursuit,
    Seek,
    Wander,
)
from steering.math_utils import Vector2
from steering.noise import PerlinNoise
from steering.obstacles import ObstacleField
from steering.world import SteeringWorld

logger = logging.getLogger(__name__)

ScenarioBuilder = Callable[[SteeringWorld], List[Agent]]


def _static_target(world: SteeringWorld, x: float, y: float) -> Agent:
    return world.spawn_agent(x, y, name="target")


def _wandering_target(world: SteeringWorld, x: float, y: float) -> Agent:
    target = world.spawn_agent(x, y, name="target")
    manager = world.attach_manager(target, max_speed=2.0)
    manager.add_behaviour(Wander(circle_distance=2.0, circle_radius=1.0, rng=world.rng))
    return target


def build_seek(world: SteeringWorld) -> List[Agent]:
    target = _static_target(world, 6.0, 3.0)
    agent = world.spawn_agent(-6.0, -3.0, name="seeker")
    world.attach_manager(agent).add_behaviour(Seek(target=target))
    return [target]


def build_flee(world: SteeringWorld) -> List[Agent]:
    target = _static_target(world, 0.0, 0.0)
    agent = world.spawn_agent(1.0, 0.5, name="fleer")
    world.attach_manager(agent, max_speed=3.0).add_behaviour(Flee(target=target))
    return [target]


def build_arrival(world: SteeringWorld) -> List[Agent]:
    target = _static_target(world, 5.0, 0.0)
    agent = world.spawn_agent(-8.0, 2.0, name="arriver")
    world.attach_manager(agent).add_behaviour(Arrival(slowing_radius=4.0, target=target))
    return [target]


def build_eschew(world: SteeringWorld) -> List[Agent]:
    target = _wandering_target(world, 0.0, 0.0)
    agent = world.spawn_agent(1.5, 0.0, name="eschewer")
    world.attach_manager(agent).add_behaviour(Eschew(safe_radius=4.0, target=target))
    return [target]


def build_magnet(world: SteeringWorld) -> List[Agent]:
    target = _static_target(world, 0.0, 0.0)
    for index, (x, y) in enumerate([(2.5, 0.0), (-1.0, 2.0), (6.0, -4.0)]):
        agent = world.spawn_agent(x, y, name=f"filing-{index}")
        world.attach_manager(agent).add_behaviour(Magnet(attraction_radius=4.0, target=target))
    return [target]


def build_wander(world: SteeringWorld) -> List[Agent]:
    for index in range(3):
        agent = world.spawn_agent(-4.0 + 4.0 * index, 0.0, name=f"wanderer-{index}")
        manager = world.attach_manager(agent, max_speed=3.0)
        manager.add_behaviour(Wander(circle_distance=2.0, circle_radius=1.0, rng=world.rng))
    return []


def build_pursuit(world: SteeringWorld) -> List[Agent]:
    target = _wandering_target(world, 4.0, 2.0)
    agent = world.spawn_agent(-8.0, -4.0, name="pursuer")
    world.attach_manager(agent, max_speed=3.0).add_behaviour(Pursuit(target=target))
    return [target]


def build_evade(world: SteeringWorld) -> List[Agent]:
    target = _wandering_target(world, 0.0, 0.0)
    agent = world.spawn_agent(2.0, 1.0, name="evader")
    world.attach_manager(agent, max_speed=3.0).add_behaviour(Evade(target=target))
    return [target]


def build_avoid(world: SteeringWorld) -> List[Agent]:
    field = world.raycaster if isinstance(world.raycaster, ObstacleField) else ObstacleField()
    field.add(Vector2(0.0, 0.0), 1.5)
    field.add(Vector2(4.0, 1.0), 1.0)
    target = _static_target(world, 9.0, 0.5)
    agent = world.spawn_agent(-9.0, 0.2, name="avoider")
    manager = world.attach_manager(agent)
    manager.add_behaviour(Seek(target=target))
    manager.add_behaviour(Avoid(field, see_ahead_distance=3.0, raycast_radius=0.25))
    return [target]


def build_flowfield(world: SteeringWorld) -> List[Agent]:
    field = world.add_flow_field(8, 14, noise=PerlinNoise(world.rng.randrange(2**31)))
    field.fill_with_perlin_noise()
    for index in range(4):
        agent = world.spawn_agent(-5.0 + 3.0 * index, -2.0 + index, name=f"drifter-{index}")
        world.attach_manager(agent, max_speed=2.0).add_behaviour(FlowFollow(field))
    return []


SCENARIOS: Dict[str, ScenarioBuilder] = {
    "seek": build_seek,
    "flee": build_flee,
    "arrival": build_arrival,
    "eschew": build_eschew,
    "magnet": build_magnet,
    "wander": build_wander,
    "pursuit": build_pursuit,
    "evade": build_evade,
    "avoid": build_avoid,
    "flowfield": build_flowfield,
}


def build_scenario(name: str, world: SteeringWorld) -> List[Agent]:
    """Populate ``world`` with the named scenario and return its targets."""
    try:
        builder = SCENARIOS[name]
    except KeyError:
        raise ValueError(f"Unknown scenario {name!r}; choose from {sorted(SCENARIOS)}") from None
    targets = builder(world)
    logger.info("Scenario %s: %d agents", name, len(world.registry))
    return targets
