"""
Channel chase - a single lit channel moving along the bus
"""

from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from bus_system.bus_animation import BusAnimation
from bus_system.visualization import BusVisualization

if TYPE_CHECKING:
    from bus_system.pixel_bus import PixelBus


class ChannelChaseVisualization(BusVisualization):
    """Lights one channel at a time in bus order, wrapping around"""

    def get_animation_type(self) -> BusAnimation:
        return BusAnimation.CHANNEL_CHASE

    def get_default_options(self) -> Dict[str, Any]:
        return {
            'color': 0x00FFFF,
            'frame_delay_ms': 200,
        }

    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        opts = self.merge_options(options)
        channels = list(bus.channels().values())
        if not channels:
            return

        for frame in self.frames(duration_ms, opts['frame_delay_ms']):
            lit = frame % len(channels)
            for index, channel in enumerate(channels):
                if index == lit:
                    channel.fill(opts['color'])
                else:
                    channel.clear()
                channel.show()

        for channel in channels:
            channel.clear().show()
