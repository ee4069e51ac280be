"""Shared fixtures: fake clock, virtual channels, buses wired to a private factory."""

import random
from functools import partial
from typing import List, Tuple

import pytest

from bus_system import AnimatablePixelBus, AnimationFactory, HighStriker
from bus_system.visualizations import (
    AlternatingPulseVisualization,
    ChannelChaseVisualization,
    HighStrikerFailVisualization,
    HighStrikerPhysicsVisualization,
    HighStrikerSuccessVisualization,
    SynchronizedRainbowVisualization,
)
from led_system import PixelChannel, VirtualStrip

BUILTIN_VISUALIZATIONS = [
    HighStrikerPhysicsVisualization,
    HighStrikerSuccessVisualization,
    HighStrikerFailVisualization,
    SynchronizedRainbowVisualization,
    ChannelChaseVisualization,
    AlternatingPulseVisualization,
]


class FakeClock:
    """Clock whose time only moves when something sleeps on it."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    @property
    def elapsed_ms(self) -> float:
        return self.now * 1000


class RecordingStrip(VirtualStrip):
    """VirtualStrip that appends (name, event) to a shared log."""

    def __init__(self, name: str, led_count: int, events: List[Tuple[str, str]]):
        super().__init__(led_count)
        self.name = name
        self.events = events

    def __setitem__(self, pos, color) -> None:
        super().__setitem__(pos, color)
        self.events.append((self.name, "write"))

    def show(self) -> None:
        super().show()
        self.events.append((self.name, "show"))


@pytest.fixture(autouse=True)
def reset_shared_factory():
    AnimationFactory.reset_shared()
    yield
    AnimationFactory.reset_shared()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def events() -> List[Tuple[str, str]]:
    return []


@pytest.fixture
def make_channel(events):
    def _make(name: str, led_count: int = 8) -> PixelChannel:
        return PixelChannel(name, RecordingStrip(name, led_count, events))
    return _make


@pytest.fixture
def factory(clock) -> AnimationFactory:
    """Factory whose visualizations run on the fake clock with a seeded RNG."""
    factory = AnimationFactory()
    for cls in BUILTIN_VISUALIZATIONS:
        constructor = partial(cls, clock=clock, sleep=clock.sleep, rng=random.Random(7))
        factory.register(cls().get_animation_type(), constructor)
    return factory


@pytest.fixture
def bus(make_channel, factory, clock) -> AnimatablePixelBus:
    return AnimatablePixelBus({
        "rail": make_channel("rail", 15),
        "bell": make_channel("bell", 2),
    }, factory=factory, sleep=clock.sleep)


@pytest.fixture
def high_striker(events, factory, clock) -> HighStriker:
    return HighStriker(RecordingStrip("rail", 15, events), RecordingStrip("bell", 2, events),
                       factory=factory, sleep=clock.sleep)
