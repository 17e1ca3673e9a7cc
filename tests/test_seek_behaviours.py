"""Tests for Seek, Flee, Arrival, Eschew and Magnet."""

import logging

import pytest

from steering.agent import Agent
from steering.behaviours import Arrival, Eschew, Flee, Magnet, Seek
from steering.exceptions import MissingCollaboratorError
from steering.math_utils import Vector2


class TestSeekAndFlee:
    def test_seek_towards_target_at_max_speed(self, world, steer):
        target = world.spawn_agent(10, 0)
        seek = Seek(target=target)
        steer(seek, max_speed=5)
        assert seek.desired_velocity == Vector2(5, 0)

    def test_flee_is_exact_negation_of_seek(self, world, steer):
        target = world.spawn_agent(3, 4)
        seek = Seek(target=target)
        flee = Flee(target=target)
        steer(seek, flee, x=-1, y=0.5, max_speed=3)
        assert flee.desired_velocity.to_tuple() == (-seek.desired_velocity).to_tuple()

    def test_seek_on_target_is_zero(self, world, steer):
        target = world.spawn_agent(2, 2)
        seek = Seek(target=target)
        steer(seek, x=2, y=2)
        assert seek.desired_velocity == Vector2(0, 0)

    def test_weight_scales_proposal(self, world, steer):
        target = world.spawn_agent(10, 0)
        seek = Seek(target=target, weight=0.5)
        steer(seek, max_speed=5)
        assert seek.desired_velocity == Vector2(2.5, 0)

    def test_weight_is_clamped(self):
        assert Seek(weight=2).weight == 1
        assert Seek(weight=-1).weight == 0

    def test_no_target_means_origin(self, steer):
        seek = Seek()
        steer(seek, x=0, y=-2, max_speed=5)
        assert seek.desired_velocity.to_tuple() == pytest.approx((0.0, 5.0))


class TestArrival:
    def test_full_speed_outside_slowing_radius(self, world, steer):
        target = world.spawn_agent(10, 0)
        arrival = Arrival(slowing_radius=4, target=target)
        steer(arrival, max_speed=5)
        assert arrival.desired_velocity == Vector2(5, 0)

    def test_scaled_inside_slowing_radius(self, world, steer):
        target = world.spawn_agent(10, 0)
        arrival = Arrival(slowing_radius=4, target=target)
        steer(arrival, x=8, max_speed=5)
        assert arrival.desired_velocity.to_tuple() == pytest.approx((2.5, 0.0))

    def test_radius_clamped_to_minimum(self):
        assert Arrival(slowing_radius=0.2).slowing_radius == 1


class TestEschew:
    def test_flees_inside_safe_radius(self, world, steer):
        target = world.spawn_agent(0, 0)
        eschew = Eschew(safe_radius=2, target=target)
        steer(eschew, x=1, max_speed=5)
        assert eschew.desired_velocity.to_tuple() == pytest.approx((2.5, 0.0))

    def test_ignores_target_outside_safe_radius(self, world, steer):
        target = world.spawn_agent(0, 0)
        eschew = Eschew(safe_radius=2, target=target)
        steer(eschew, x=3, max_speed=5)
        assert eschew.desired_velocity == Vector2(0, 0)


class TestMagnet:
    def test_zero_outside_attraction_radius(self, world, steer):
        target = world.spawn_agent(0, 0)
        magnet = Magnet(attraction_radius=2, target=target)
        steer(magnet, x=3, max_speed=5)
        assert magnet.desired_velocity == Vector2(0, 0)

    def test_pull_grows_towards_target(self, world, steer):
        target = world.spawn_agent(0, 0)
        magnet = Magnet(attraction_radius=2, target=target)
        steer(magnet, x=1, max_speed=5)
        assert magnet.desired_velocity.to_tuple() == pytest.approx((-2.5, 0.0))

    def test_equals_seek_on_target(self, world, steer):
        target = world.spawn_agent(1, 1)
        magnet = Magnet(attraction_radius=2, target=target)
        seek = Seek(target=target)
        steer(magnet, seek, x=1, y=1)
        assert magnet.desired_velocity == seek.desired_velocity


class TestTargets:
    """Weak target handles and missing collaborators."""

    def test_removed_target_resolves_to_origin(self, world, steer, caplog):
        target = world.spawn_agent(10, 0)
        seek = Seek(target=target)
        steer(seek, x=0, y=3, max_speed=5)
        world.remove_agent(target)

        with caplog.at_level(logging.WARNING, logger="steering.behaviours.base"):
            first = seek.desired_velocity
            second = seek.desired_velocity

        assert first.to_tuple() == pytest.approx((0.0, -5.0))
        assert first == second
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1

    def test_target_accepts_agent_id(self, world, steer):
        target = world.spawn_agent(0, 10)
        seek = Seek(target=target.id)
        steer(seek, max_speed=1)
        assert seek.target == target.id
        assert seek.desired_velocity == Vector2(0, 1)

    def test_unregistered_agent_rejected(self):
        with pytest.raises(MissingCollaboratorError):
            Seek(target=Agent(1, 1))

    def test_invalid_target_type_rejected(self):
        with pytest.raises(TypeError):
            Seek(target="somewhere")

    def test_detached_behaviour_cannot_steer(self):
        with pytest.raises(MissingCollaboratorError):
            Seek().desired_velocity


class TestDebugShapes:
    def test_arrival_draws_radius(self, world, steer):
        target = world.spawn_agent(5, 0)
        arrival = Arrival(slowing_radius=3, target=target)
        steer(arrival)
        shapes = arrival.debug_shapes()
        assert any(getattr(s, "radius", None) == 3 for s in shapes)

    def test_no_shapes_when_debug_disabled(self, world, steer):
        seek = Seek(debug=False)
        steer(seek)
        assert seek.debug_shapes() == []
