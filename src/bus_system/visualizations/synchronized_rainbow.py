"""
Synchronized rainbow - every channel shows the same rainbow phase
"""

from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from bus_system.animation_helpers import AnimationHelpers
from bus_system.bus_animation import BusAnimation
from bus_system.visualization import BusVisualization

if TYPE_CHECKING:
    from bus_system.pixel_bus import PixelBus


class SynchronizedRainbowVisualization(BusVisualization):
    """
    Flowing rainbow spread over each channel's length.

    The hue offset is shared, so a 2-pixel bell and a 15-pixel rail start
    every frame on the same color.
    """

    def get_animation_type(self) -> BusAnimation:
        return BusAnimation.SYNCHRONIZED_RAINBOW

    def get_default_options(self) -> Dict[str, Any]:
        return {
            'hue_shift_per_frame': 8,
            'frame_delay_ms': 50,
            'saturation': 1.0,
            'value': 1.0,
        }

    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        opts = self.merge_options(options)
        channels = list(bus.channels().values())

        for frame in self.frames(duration_ms, opts['frame_delay_ms']):
            hue_offset = (frame * opts['hue_shift_per_frame']) % 360
            for channel in channels:
                count = channel.pixel_count()
                for i in range(count):
                    hue = (i * 360 / count + hue_offset) % 360
                    channel.set_pixel(i, AnimationHelpers.hsv_to_pixel(hue, opts['saturation'], opts['value']))
            for channel in channels:
                channel.show()

        for channel in channels:
            channel.clear().show()
