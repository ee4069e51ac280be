"""
High striker success - victory celebration after the bell was hit
"""

from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

from bus_system.animation_helpers import AnimationHelpers
from bus_system.bus_animation import BusAnimation
from bus_system.shapes import BELL, RAIL
from bus_system.visualization import BusVisualization

if TYPE_CHECKING:
    from bus_system.pixel_bus import PixelBus


class HighStrikerSuccessVisualization(BusVisualization):
    """
    Three phases:
    1. Bell flashes in random victory colors
    2. Rail fills bottom to top, bell follows each new color
    3. Sparkles on the rail that fade out while the bell cycles colors
    """

    SPARKLE_FRAME_MS = 50
    SPARKLES_PER_FRAME = 3
    SPARKLE_FADE = 0.85

    def get_animation_type(self) -> BusAnimation:
        return BusAnimation.HIGH_STRIKER_SUCCESS

    def get_default_options(self) -> Dict[str, Any]:
        return {
            'victory_colors': [int(AnimationHelpers.GOLD), int(AnimationHelpers.ORANGE_RED),
                               int(AnimationHelpers.HOT_PINK)],
            'bell_flash_speed_ms': 100,
            'bell_flashes': 6,
            'fill_speed_ms': 50,
            'sparkle_duration_ms': 1000,
        }

    def get_required_channels(self) -> List[str]:
        return [RAIL, BELL]

    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        opts = self.merge_options(options)
        colors = opts['victory_colors']
        rail = bus.get_channel(RAIL)
        bell = bus.get_channel(BELL)
        rail_count = rail.pixel_count()

        # Phase 1: bell flashes
        for _ in range(opts['bell_flashes']):
            bell.fill(AnimationHelpers.random_color_from_palette(colors, self.rng)).show()
            self.pause(opts['bell_flash_speed_ms'])
            bell.clear().show()
            self.pause(opts['bell_flash_speed_ms'])

        # Phase 2: victory fill
        for pixel in range(rail_count):
            color = colors[pixel % len(colors)]
            rail.set_pixel(pixel, color).show()
            bell.fill(AnimationHelpers.dim_color(color, 0.8)).show()
            self.pause(opts['fill_speed_ms'])

        # Phase 3: sparkles
        iterations = int(opts['sparkle_duration_ms'] / self.SPARKLE_FRAME_MS)
        for i in range(iterations):
            for _ in range(self.SPARKLES_PER_FRAME):
                pixel = self.rng.randint(0, rail_count - 1)
                rail.set_pixel(pixel, AnimationHelpers.random_color_from_palette(colors, self.rng))

            bell.fill(colors[i % len(colors)]).show()
            rail.show()
            self.pause(self.SPARKLE_FRAME_MS)

            AnimationHelpers.fade_channel(rail, self.SPARKLE_FADE)

        rail.clear().show()
        bell.clear().show()
