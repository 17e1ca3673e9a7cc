"""Tests for Pursuit and Evade, including target velocity sampling."""

import pytest

from steering.behaviours import Evade, Pursuit, PursuitState, Seek
from steering.math_utils import Vector2


class TestPrediction:
    def test_stationary_target_matches_seek(self, world, steer):
        """With no estimated velocity Pursuit degenerates to Seek."""
        target = world.spawn_agent(6, -2)
        pursuit = Pursuit(target=target)
        seek = Seek(target=target)
        steer(pursuit, seek, x=-1, y=1)
        assert pursuit.desired_velocity == seek.desired_velocity

    def test_evade_is_exact_negation_of_pursuit(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        evade = Evade(target=target)
        steer(pursuit, evade)
        pursuit.target_velocity = Vector2(1, 2)
        evade.target_velocity = Vector2(1, 2)
        assert evade.desired_velocity.to_tuple() == (-pursuit.desired_velocity).to_tuple()

    def test_predicted_target_scales_with_distance(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        steer(pursuit, max_speed=5)
        pursuit.target_velocity = Vector2(1, 0)
        # round(10 / 5) = 2 steps ahead
        assert pursuit.predicted_target() == Vector2(12, 0)

    def test_prediction_capped_by_max_future_steps(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(max_future_steps=1, target=target)
        steer(pursuit, max_speed=1)
        pursuit.target_velocity = Vector2(1, 0)
        assert pursuit.predicted_target() == Vector2(11, 0)

    def test_max_future_steps_clamped(self):
        assert Pursuit(max_future_steps=-3).max_future_steps == 0


class TestSampling:
    """The target's velocity is sampled once per elapsed second."""

    def test_velocity_sampled_after_one_second(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        _, manager = steer(pursuit)

        target.move_to(12, 0)
        manager.step(0.5)
        assert pursuit.target_velocity == Vector2(0, 0)

        manager.step(0.5)
        assert pursuit.target_velocity == Vector2(2, 0)

    def test_sampled_on_tenth_tick_of_a_tenth_of_a_second(self, world, steer):
        """Ten 0.1 s ticks sum to just under 1.0 in floating point."""
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        _, manager = steer(pursuit)

        for tick in range(10):
            target.move_to(target.position.x + 0.1, 0)
            manager.step(0.1)
            if tick < 9:
                assert pursuit.target_velocity == Vector2(0, 0)

        assert pursuit.target_velocity.to_tuple() == pytest.approx((1.0, 0.0))

    def test_timer_resets_after_sample(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        _, manager = steer(pursuit)

        target.move_to(12, 0)
        manager.step(1.0)
        target.move_to(13, 0)
        manager.step(0.5)
        assert pursuit.target_velocity == Vector2(2, 0)
        manager.step(0.5)
        assert pursuit.target_velocity == Vector2(1, 0)

    def test_deactivation_zeroes_estimate(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        _, manager = steer(pursuit)
        target.move_to(12, 0)
        manager.step(1.0)

        pursuit.active = False

        assert pursuit.state is PursuitState.INACTIVE
        assert pursuit.target_velocity == Vector2(0, 0)
        assert pursuit not in manager.active_behaviours

    def test_reactivation_reseeds_sample(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        _, manager = steer(pursuit)
        pursuit.active = False
        target.move_to(50, 0)

        pursuit.active = True
        assert pursuit.state is PursuitState.ESTIMATING
        target.move_to(53, 0)
        manager.step(1.0)
        assert pursuit.target_velocity == Vector2(3, 0)

    def test_no_sampling_while_manager_inactive(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        _, manager = steer(pursuit)
        manager.active = False
        target.move_to(12, 0)
        manager.step(1.0)
        assert pursuit.target_velocity == Vector2(0, 0)

    def test_lost_target_steers_to_origin(self, world, steer):
        target = world.spawn_agent(10, 0)
        pursuit = Pursuit(target=target)
        steer(pursuit, x=0, y=4, max_speed=2)
        world.remove_agent(target)
        assert pursuit.desired_velocity.to_tuple() == pytest.approx((0.0, -2.0), abs=1e-9)
