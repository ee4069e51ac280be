"""
Alternating pulse - neighbouring channels breathe in opposite phase
"""

import math
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from bus_system.animation_helpers import AnimationHelpers
from bus_system.bus_animation import BusAnimation
from bus_system.visualization import BusVisualization

if TYPE_CHECKING:
    from bus_system.pixel_bus import PixelBus


class AlternatingPulseVisualization(BusVisualization):
    """
    Sine breathing on every channel; odd channels (in bus order) run half a
    period behind, so when one channel peaks its neighbours are dimmest.
    """

    MIN_CHANNELS = 2

    def get_animation_type(self) -> BusAnimation:
        return BusAnimation.ALTERNATING_PULSE

    def get_default_options(self) -> Dict[str, Any]:
        return {
            'color': 0xFF00FF,
            'phase_speed': 0.1,        # Radians per frame
            'min_brightness': 0.1,
            'max_brightness': 1.0,
            'frame_delay_ms': 20,
        }

    def is_compatible(self, bus: 'PixelBus') -> bool:
        return len(bus) >= self.MIN_CHANNELS

    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        opts = self.merge_options(options)
        channels = list(bus.channels().values())

        for frame in self.frames(duration_ms, opts['frame_delay_ms']):
            phase = frame * opts['phase_speed']
            for index, channel in enumerate(channels):
                offset = math.pi if index % 2 else 0.0
                brightness = AnimationHelpers.sine_brightness(phase + offset,
                                                              opts['min_brightness'],
                                                              opts['max_brightness'])
                channel.fill(AnimationHelpers.dim_color(opts['color'], brightness)).show()

        for channel in channels:
            channel.clear().show()
