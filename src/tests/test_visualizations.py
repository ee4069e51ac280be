"""Tests for the built-in bus visualizations."""

import math
import random

import pytest

from bus_system import AnimatablePixelBus, AnimationHelpers, AnimationIncompatibleError, BusAnimation, PixelBus
from bus_system.visualizations import (
    AlternatingPulseVisualization,
    ChannelChaseVisualization,
    HighStrikerFailVisualization,
    HighStrikerSuccessVisualization,
    SynchronizedRainbowVisualization,
)


def capturing(clock, capture):
    """Sleep that records something before advancing the fake clock."""
    def sleep(seconds):
        capture()
        clock.sleep(seconds)
    return sleep


def frame_of(bus, name):
    return bus.get_channel(name).frame()


@pytest.mark.parametrize("animation", [
    BusAnimation.HIGH_STRIKER_PHYSICS,
    BusAnimation.HIGH_STRIKER_SUCCESS,
    BusAnimation.HIGH_STRIKER_FAIL,
    BusAnimation.SYNCHRONIZED_RAINBOW,
    BusAnimation.CHANNEL_CHASE,
    BusAnimation.ALTERNATING_PULSE,
])
def test_every_builtin_ends_dark(bus, animation):
    bus.animate(animation, 300)
    for channel in bus:
        assert channel.strip.shown == [0] * channel.pixel_count()


def test_unimplemented_animations_are_not_registered(bus):
    assert not bus.factory.has(BusAnimation.WAVE_ACROSS_CHANNELS)
    assert not bus.factory.has(BusAnimation.MIRRORED_ANIMATION)


class TestHighStrikerSuccess:
    def test_phase_timing(self, bus, clock):
        visualization = HighStrikerSuccessVisualization(clock=clock, sleep=clock.sleep, rng=random.Random(1))
        visualization.run(bus, 3000)

        # 6 flashes on/off, 15 fill steps, 20 sparkle frames
        assert clock.sleeps == [0.1] * 12 + [0.05] * 15 + [0.05] * 20

    def test_victory_fill_cycles_colors(self, bus, clock):
        frames = []
        visualization = HighStrikerSuccessVisualization(
            clock=clock,
            sleep=capturing(clock, lambda: frames.append((frame_of(bus, "rail"), frame_of(bus, "bell")))),
        )
        visualization.run(bus, 3000, {'bell_flashes': 0, 'sparkle_duration_ms': 0})

        colors = visualization.get_default_options()['victory_colors']
        rail, bell = frames[-1]
        assert rail == [colors[i % 3] for i in range(15)]
        assert bell == [AnimationHelpers.dim_color(colors[14 % 3], 0.8)] * 2

    def test_requires_rail_and_bell(self, make_channel):
        visualization = HighStrikerSuccessVisualization()
        assert not visualization.is_compatible(PixelBus({"rail": make_channel("rail")}))
        assert visualization.get_required_channels() == ["rail", "bell"]


class TestHighStrikerFail:
    def test_phase_timing(self, bus, clock):
        HighStrikerFailVisualization(clock=clock, sleep=clock.sleep).run(bus, 2000)

        pulse = [0.03] * 10 + [0.15] + [0.08] * 10 + [0.2]
        assert clock.sleeps == pytest.approx(pulse * 3 + [0.04] * 30)

    def test_almost_there_climb(self, bus, clock):
        frames = []
        visualization = HighStrikerFailVisualization(
            clock=clock,
            sleep=capturing(clock, lambda: frames.append((frame_of(bus, "rail"), frame_of(bus, "bell")))),
        )
        visualization.run(bus, 2000)

        rail, bell = frames[9]
        orange = visualization.get_default_options()['try_again_color']
        assert bell == [0x202020, 0x202020]
        assert rail[0] == orange
        assert rail[9] == AnimationHelpers.dim_color(orange, 1.0 - 0.9 * 0.3)
        assert rail[10:] == [0] * 5


class TestSynchronizedRainbow:
    def test_channels_share_the_phase(self, bus, clock):
        firsts = []
        visualization = SynchronizedRainbowVisualization(
            clock=clock,
            sleep=capturing(clock, lambda: firsts.append((frame_of(bus, "rail")[0], frame_of(bus, "bell")[0]))),
        )
        visualization.run(bus, 100)

        assert firsts == [
            (0xFF0000, 0xFF0000),
            (AnimationHelpers.hsv_to_pixel(8, 1.0, 1.0), AnimationHelpers.hsv_to_pixel(8, 1.0, 1.0)),
        ]

    def test_rainbow_spreads_along_channel(self, bus, clock):
        rails = []
        visualization = SynchronizedRainbowVisualization(
            clock=clock, sleep=capturing(clock, lambda: rails.append(frame_of(bus, "rail"))))
        visualization.run(bus, 50)

        assert rails[0][5] == AnimationHelpers.hsv_to_pixel(5 * 360 / 15, 1.0, 1.0)


class TestChannelChase:
    def test_one_channel_lit_in_bus_order(self, make_channel, factory, clock):
        bus = AnimatablePixelBus({name: make_channel(name, 3) for name in ("a", "b", "c")},
                                 factory=factory, sleep=clock.sleep)
        lit = []

        def record():
            lit.append([channel.name for channel in bus if not channel.get_pixel(0).is_black])

        ChannelChaseVisualization(clock=clock, sleep=capturing(clock, record)).run(bus, 800)

        assert lit == [["a"], ["b"], ["c"], ["a"]]

    def test_empty_bus(self, clock):
        ChannelChaseVisualization(clock=clock, sleep=clock.sleep).run(PixelBus(sleep=clock.sleep), 1000)
        assert clock.sleeps == []


class TestAlternatingPulse:
    def test_needs_two_channels(self, make_channel, factory, clock):
        bus = AnimatablePixelBus({"solo": make_channel("solo", 1)}, factory=factory, sleep=clock.sleep)
        with pytest.raises(AnimationIncompatibleError):
            bus.animate(BusAnimation.ALTERNATING_PULSE, 1000)

    def test_neighbours_in_opposite_phase(self, bus, clock):
        frames = []
        visualization = AlternatingPulseVisualization(
            clock=clock,
            sleep=capturing(clock, lambda: frames.append((frame_of(bus, "rail")[0], frame_of(bus, "bell")[0]))),
        )
        visualization.run(bus, 40, {'phase_speed': math.pi / 2})

        color = visualization.get_default_options()['color']
        assert frames[0][0] == frames[0][1]
        assert frames[1] == (AnimationHelpers.dim_color(color, 1.0), AnimationHelpers.dim_color(color, 0.1))
