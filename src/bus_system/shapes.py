"""
Device shapes - pixel buses with a fixed channel layout
"""

import time
from typing import Callable, Optional, TYPE_CHECKING

from led_system.channel import PixelChannel
from led_system.interfaces import LedStrip
from led_system.virtual_strip import VirtualStrip

from .bus_animation import BusAnimation
from .pixel_bus import AnimatablePixelBus
from .strategies import ExecutionStrategy

if TYPE_CHECKING:
    from lighting_utils import ClassLogger
    from .factory import AnimationFactory

RAIL = "rail"
BELL = "bell"


class HighStriker(AnimatablePixelBus):
    """
    Carnival strength tester: a vertical rail the puck travels along and a
    bell at the top.
    """

    # Impact velocity range per strike strength
    STRIKE_VELOCITIES = {
        'weak': (30, 60),
        'medium': (60, 100),
        'strong': (100, 150),
        'random': (30, 150),
    }

    def __init__(self,
                 rail_strip: LedStrip,
                 bell_strip: LedStrip,
                 factory: Optional['AnimationFactory'] = None,
                 strategy: Optional[ExecutionStrategy] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 logger: Optional['ClassLogger'] = None):
        super().__init__({
            RAIL: PixelChannel(RAIL, rail_strip),
            BELL: PixelChannel(BELL, bell_strip),
        }, factory=factory, strategy=strategy, sleep=sleep, logger=logger)

    @classmethod
    def virtual(cls, rail_dots: int = 15, bell_dots: int = 2, **kwargs) -> 'HighStriker':
        """High striker over in-memory strips"""
        return cls(VirtualStrip(rail_dots), VirtualStrip(bell_dots), **kwargs)

    @property
    def rail(self) -> PixelChannel:
        return self.get_channel(RAIL)

    @property
    def bell(self) -> PixelChannel:
        return self.get_channel(BELL)

    def strike(self, strength: str = 'random', duration_ms: int = 5000) -> 'HighStriker':
        """
        Swing the hammer.

        Args:
            strength: 'weak', 'medium', 'strong' or 'random' (unknown values count as 'random')
            duration_ms: Upper bound on the puck simulation
        """
        min_velocity, max_velocity = self.STRIKE_VELOCITIES.get(strength, self.STRIKE_VELOCITIES['random'])
        return self.animate(BusAnimation.HIGH_STRIKER_PHYSICS, duration_ms, {
            'min_velocity': min_velocity,
            'max_velocity': max_velocity,
        })

    def celebrate_success(self, duration_ms: int = 3000) -> 'HighStriker':
        return self.animate(BusAnimation.HIGH_STRIKER_SUCCESS, duration_ms)

    def encourage_fail(self, duration_ms: int = 2000) -> 'HighStriker':
        return self.animate(BusAnimation.HIGH_STRIKER_FAIL, duration_ms)
