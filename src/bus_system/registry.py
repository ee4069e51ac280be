"""
Bus animation registry - wires the built-in visualizations into a factory
"""

from typing import TYPE_CHECKING

from .bus_animation import BusAnimation

if TYPE_CHECKING:
    from .factory import AnimationFactory

VISUALIZATIONS_PACKAGE = "bus_system.visualizations"


class BusAnimationRegistry:
    """Explicit table of built-in visualizations plus package discovery"""

    @staticmethod
    def register_all(factory: 'AnimationFactory') -> None:
        from .visualizations import (
            AlternatingPulseVisualization,
            ChannelChaseVisualization,
            HighStrikerFailVisualization,
            HighStrikerPhysicsVisualization,
            HighStrikerSuccessVisualization,
            SynchronizedRainbowVisualization,
        )

        factory.register_batch({
            BusAnimation.HIGH_STRIKER_PHYSICS: HighStrikerPhysicsVisualization,
            BusAnimation.HIGH_STRIKER_SUCCESS: HighStrikerSuccessVisualization,
            BusAnimation.HIGH_STRIKER_FAIL: HighStrikerFailVisualization,
            BusAnimation.SYNCHRONIZED_RAINBOW: SynchronizedRainbowVisualization,
            BusAnimation.CHANNEL_CHASE: ChannelChaseVisualization,
            BusAnimation.ALTERNATING_PULSE: AlternatingPulseVisualization,
        })

    @staticmethod
    def auto_discover(factory: 'AnimationFactory') -> int:
        """Scan the visualizations package; returns the number registered"""
        return factory.discover_package(VISUALIZATIONS_PACKAGE)

    @classmethod
    def initialize(cls, factory: 'AnimationFactory', use_auto_discovery: bool = True) -> None:
        """
        Populate a factory with every built-in visualization.

        Discovery runs first so that anything found in the package is
        available; the explicit table then guarantees the built-ins are
        registered even if discovery skipped them.
        """
        if use_auto_discovery:
            cls.auto_discover(factory)
        cls.register_all(factory)
