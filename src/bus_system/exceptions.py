"""
Bus animation errors
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bus_animation import BusAnimation
    from .pixel_bus import PixelBus


class AnimationNotFoundError(LookupError):
    """No visualization registered for a bus animation"""

    def __init__(self, animation: 'BusAnimation'):
        self.animation = animation
        super().__init__(f"No visualization registered for bus animation: {animation.display_name}")


class AnimationIncompatibleError(RuntimeError):
    """Bus is missing something the animation needs (usually a channel)"""

    def __init__(self, animation: 'BusAnimation', bus: 'PixelBus'):
        self.animation = animation
        self.bus = bus
        super().__init__(
            f"Animation '{animation.display_name}' is not compatible with this bus "
            f"(channels: {', '.join(bus.channel_names()) or 'none'})"
        )


class InvalidVisualizationError(TypeError):
    """Registered constructor does not produce a bus visualization"""
