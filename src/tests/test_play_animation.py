"""Tests for the play-animation command line player."""

import json
from unittest.mock import MagicMock

import pytest

import play_animation
from bus_system import BusAnimation, PixelBus
from bus_system.lighting_setup import LightingSetup
from play_animation import AnimationPlayer, build_parser, find_animation, load_config


@pytest.mark.parametrize("name, expected", [
    ("high-striker-physics", BusAnimation.HIGH_STRIKER_PHYSICS),
    ("CHANNEL_CHASE", BusAnimation.CHANNEL_CHASE),
    ("Alternating Pulse", BusAnimation.ALTERNATING_PULSE),
    ("meteor-shower", None),
])
def test_find_animation(name, expected):
    assert find_animation(name) is expected


def test_unknown_animation_lists_suggestions(capsys):
    assert play_animation.main(["meteor-shower"]) == 1

    out = capsys.readouterr().out
    assert "'meteor-shower' not found" in out
    for animation in BusAnimation:
        assert animation.value in out


def test_run_with_duration_then_graceful_shutdown(bus, clock, events):
    exit_code = play_animation.main(["channel-chase", "--duration", "400"],
                                    setup=LightingSetup(bus), sleep=clock.sleep)

    assert exit_code == 0
    assert clock.sleeps[-2:] == [0.4, 0.4]
    assert events[-8:] == [
        ("rail", "write"), ("rail", "show"), ("bell", "write"), ("bell", "show"),
        ("rail", "write"), ("rail", "show"), ("bell", "write"), ("bell", "show"),
    ]
    for channel in bus:
        assert channel.strip.shown == [0] * channel.pixel_count()


def test_shutdown_goes_red_first(bus, clock):
    reds = []

    def sleep(seconds):
        reds.append([channel.get_pixel(0) for channel in bus])
        clock.sleep(seconds)

    AnimationPlayer(bus, BusAnimation.CHANNEL_CHASE, MagicMock(), sleep=sleep).graceful_shutdown()

    assert reds == [[0xFF0000, 0xFF0000], [0, 0xFF0000]]


def test_animation_failure_exits_with_error(make_channel, factory, clock):
    rail_only = LightingSetup(
        play_animation.AnimatablePixelBus({"rail": make_channel("rail", 15)}, factory=factory, sleep=clock.sleep))

    exit_code = play_animation.main(["high-striker-physics", "--duration", "1000"],
                                    setup=rail_only, sleep=clock.sleep)

    assert exit_code == 1
    assert rail_only.bus.get_channel("rail").strip.shown == [0] * 15


def test_shutdown_flushes_log(bus, clock):
    logger = MagicMock()
    AnimationPlayer(bus, BusAnimation.CHANNEL_CHASE, logger, sleep=clock.sleep).graceful_shutdown()
    logger.flush.assert_called_once_with()


def test_run_forever_stops_on_request(bus):
    player = AnimationPlayer(bus, BusAnimation.CHANNEL_CHASE, MagicMock())
    cycles = []

    def play_cycle(duration_ms):
        cycles.append(duration_ms)
        if len(cycles) == 3:
            player.request_shutdown(15)

    player.play_cycle = play_cycle
    player.run_forever()

    assert cycles == [5000, 5000, 5000]
    assert player.iterations == 3


def test_empty_bus_shutdown_is_noop(clock):
    AnimationPlayer(PixelBus(sleep=clock.sleep), BusAnimation.CHANNEL_CHASE, MagicMock(),
                    sleep=clock.sleep).graceful_shutdown()
    assert clock.sleeps == []


class TestLoadConfig:
    def test_flags(self):
        config = load_config(build_parser().parse_args(["x", "--virtual", "--strategy", "background"]))
        assert config.async_strategy == "background"
        assert all(channel.virtual for channel in config.channels)
        assert config.channel_names == ["rail", "bell"]

    def test_config_file(self, tmp_path):
        path = tmp_path / "lighting.json"
        path.write_text(json.dumps({
            'async_concurrency_driver': 'sync',
            'devices': {'solo': {'shape': 'single-diode'}},
        }))

        config = load_config(build_parser().parse_args(["x", "--config", str(path), "--virtual"]))
        assert config.channel_names == ["solo"]
        assert config.channels[0].virtual
