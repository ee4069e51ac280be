"""Tests for the high striker physics visualization and device shape."""

import random

import pytest

from bus_system import AnimationHelpers, BusAnimation, HighStriker, PhysicsState, RunAnimationOperation
from bus_system.visualizations import HighStrikerPhysicsVisualization


@pytest.fixture
def physics(clock):
    return HighStrikerPhysicsVisualization(clock=clock, sleep=clock.sleep, rng=random.Random(3))


@pytest.fixture
def opts(physics):
    return physics.get_default_options()


def fixed_velocity(velocity):
    return {'min_velocity': velocity, 'max_velocity': velocity}


class TestStep:
    def test_step_is_pure(self, physics, opts):
        state = PhysicsState(position=10.0, velocity=20.0)
        new_state = physics.step(state, opts)
        assert state == PhysicsState(position=10.0, velocity=20.0)
        assert new_state.velocity == pytest.approx(18.04)
        assert new_state.position == pytest.approx(10.0 + 18.04 * 0.02)

    def test_bell_reached_while_rising(self, physics, opts):
        state = physics.step(PhysicsState(position=89.0, velocity=100.0), opts)
        assert state.target_reached

    def test_bell_not_reached_while_falling(self, physics, opts):
        state = physics.step(PhysicsState(position=89.99, velocity=0.5), opts)
        assert not state.target_reached

    def test_bell_height_overrides_threshold(self, physics, opts):
        state = PhysicsState(position=12.0, velocity=80.0)
        assert not physics.step(state, opts).target_reached
        assert physics.step(state, dict(opts, bell_height=13.5)).target_reached

    def test_target_stays_reached(self, physics, opts):
        state = physics.step(PhysicsState(position=50.0, velocity=-10.0, target_reached=True), opts)
        assert state.target_reached

    def test_floor_bounce(self, physics, opts):
        state = physics.step(PhysicsState(position=0.5, velocity=-50.0), opts)
        assert state.position == 0.0
        assert state.velocity == pytest.approx(51.96 * 0.6)
        assert state.bounce_count == 1

    @pytest.mark.parametrize("state, at_rest", [
        (PhysicsState(position=0.0, velocity=3.0, bounce_count=2), True),
        (PhysicsState(position=0.0, velocity=30.0, bounce_count=2), False),
        (PhysicsState(position=12.0, velocity=3.0, bounce_count=2), False),
        (PhysicsState(position=0.0, velocity=60.0, bounce_count=0), False),
        (PhysicsState(position=0.0, velocity=30.0, bounce_count=5), True),
    ])
    def test_is_at_rest(self, physics, opts, state, at_rest):
        assert physics.is_at_rest(state, opts) is at_rest


class TestSimulation:
    def test_weak_hit_bounces_out_before_duration(self, physics, bus, clock):
        state = physics.simulate(bus, 5000, fixed_velocity(100))

        assert state.bounce_count == 5
        assert not state.target_reached
        # 232 frames of 20ms, no sleep after the final one
        assert len(clock.sleeps) == 231
        assert clock.elapsed_ms < 5000

    def test_strong_hit_rings_the_bell(self, physics, bus):
        state = physics.simulate(bus, 5000, fixed_velocity(150))

        assert state.target_reached
        assert bus.get_channel("bell").strip.shown == [0xFFD700, 0xFFD700]

    def test_raw_bell_height_rings_on_a_weak_hit(self, physics, bus):
        state = physics.simulate(bus, 5000, dict(fixed_velocity(60), bell_height=15 * 0.9))

        assert state.target_reached
        assert bus.get_channel("bell").strip.shown == [0xFFD700, 0xFFD700]

    def test_duration_bounds_the_loop(self, physics, bus, clock):
        physics.simulate(bus, 5000, fixed_velocity(150))
        # Last frame starts before 5000ms, then sleeps one frame delay
        assert 5000 <= clock.elapsed_ms <= 5020 + 1e-6

    def test_puck_with_trail(self, physics, bus):
        physics.simulate(bus, 100, fixed_velocity(100))

        # Five frames: position 9.41 of 100 -> pixel 1 on a 15 pixel rail
        shown = bus.get_channel("rail").strip.shown
        assert shown[1] == 0xFF0000
        assert shown[0] == AnimationHelpers.dim_color(0xFF0000, 1 - 1 / 3)
        assert all(pixel == 0 for pixel in shown[2:])

    def test_zero_duration_draws_nothing(self, physics, bus, events):
        state = physics.simulate(bus, 0, fixed_velocity(100))
        assert state.position == 0.0
        assert state.velocity == 100
        assert events == []


class TestRun:
    def test_miss_ends_dark_after_hold(self, physics, bus, clock):
        physics.run(bus, 5000, fixed_velocity(60))

        assert clock.sleeps[-1] == 0.5
        assert bus.get_channel("rail").strip.shown == [0] * 15
        assert bus.get_channel("bell").strip.shown == [0, 0]

    def test_final_bell_color(self, physics, bus, clock):
        bell_colors = []
        original_sleep = clock.sleep

        def sleep(seconds):
            if seconds == 0.5:
                bell_colors.append(bus.get_channel("bell").get_pixel(0))
            original_sleep(seconds)

        physics.sleep = sleep
        physics.run(bus, 5000, fixed_velocity(150))
        physics.run(bus, 5000, fixed_velocity(60))

        assert bell_colors == [0xFFD700, 0x404040]


class TestHighStrikerShape:
    def test_channels(self, high_striker):
        assert high_striker.channel_names() == ["rail", "bell"]
        assert high_striker.rail.pixel_count() == 15
        assert high_striker.bell.pixel_count() == 2

    @pytest.mark.parametrize("strength, velocities", [
        ("weak", (30, 60)),
        ("medium", (60, 100)),
        ("strong", (100, 150)),
        ("random", (30, 150)),
        ("mighty", (30, 150)),
    ])
    def test_strike_strengths(self, high_striker, strength, velocities):
        high_striker.with_async().strike(strength)
        assert high_striker.pending_operations == [RunAnimationOperation(
            BusAnimation.HIGH_STRIKER_PHYSICS, 5000,
            {'min_velocity': velocities[0], 'max_velocity': velocities[1]},
        )]

    def test_follow_up_animations(self, high_striker):
        high_striker.with_async().celebrate_success().encourage_fail()
        assert high_striker.pending_operations == [
            RunAnimationOperation(BusAnimation.HIGH_STRIKER_SUCCESS, 3000, {}),
            RunAnimationOperation(BusAnimation.HIGH_STRIKER_FAIL, 2000, {}),
        ]

    def test_strike_end_to_end(self, high_striker, clock):
        high_striker.strike("strong")

        assert clock.elapsed_ms <= 5520 + 1e-6
        assert high_striker.rail.strip.shown == [0] * 15
        assert high_striker.bell.strip.shown == [0, 0]

    def test_queued_game_round(self, high_striker, events):
        high_striker.with_async().strike("weak").wait(100).encourage_fail().fire()

        assert high_striker.pending_operations == []
        assert ("rail", "show") in events
        assert events[-4:] == [("rail", "write"), ("rail", "show"), ("bell", "write"), ("bell", "show")]

    def test_virtual(self):
        striker = HighStriker.virtual(rail_dots=10)
        assert striker.rail.pixel_count() == 10
        assert striker.bell.pixel_count() == 2
