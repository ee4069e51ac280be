"""
High striker fail - "try again" encouragement after a miss
"""

from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

from bus_system.animation_helpers import AnimationHelpers
from bus_system.bus_animation import BusAnimation
from bus_system.shapes import BELL, RAIL
from bus_system.visualization import BusVisualization

if TYPE_CHECKING:
    from bus_system.pixel_bus import PixelBus


class HighStrikerFailVisualization(BusVisualization):
    """
    Dim bell throughout. The rail pulses up to 70% of its height three
    times ("almost there"), then sweeps bottom to top twice.
    """

    ALMOST_THERE = 0.7
    CLIMB_STEP_MS = 30
    FADE_STEPS = 10
    FADE_FACTOR = 0.8
    PULSE_GAP_MS = 200
    SWEEPS = 2
    SWEEP_STEP_MS = 40

    def get_animation_type(self) -> BusAnimation:
        return BusAnimation.HIGH_STRIKER_FAIL

    def get_default_options(self) -> Dict[str, Any]:
        return {
            'try_again_color': int(AnimationHelpers.ORANGE),
            'dim_bell_color': 0x202020,
            'pulse_speed_ms': 150,
            'pulses': 3,
            'fade_duration_ms': 800,
        }

    def get_required_channels(self) -> List[str]:
        return [RAIL, BELL]

    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        opts = self.merge_options(options)
        color = opts['try_again_color']
        rail = bus.get_channel(RAIL)
        bell = bus.get_channel(BELL)
        rail_count = rail.pixel_count()

        bell.fill(opts['dim_bell_color']).show()

        # Phase 1: "almost there" pulses, dimmer towards the top
        target_height = int(rail_count * self.ALMOST_THERE)
        for _ in range(opts['pulses']):
            for pixel in range(target_height):
                brightness = 1.0 - (pixel / target_height) * 0.3
                rail.set_pixel(pixel, AnimationHelpers.dim_color(color, brightness)).show()
                self.pause(self.CLIMB_STEP_MS)

            self.pause(opts['pulse_speed_ms'])

            for _step in range(self.FADE_STEPS):
                AnimationHelpers.fade_channel(rail, self.FADE_FACTOR, limit=target_height)
                rail.show()
                self.pause(opts['fade_duration_ms'] / self.FADE_STEPS)

            rail.clear().show()
            self.pause(self.PULSE_GAP_MS)

        # Phase 2: encouraging sweeps over the whole rail
        for _ in range(self.SWEEPS):
            for pixel in range(rail_count):
                rail.clear()
                for lit in range(pixel + 1):
                    brightness = 0.5 + 0.5 * (lit / rail_count)
                    rail.set_pixel(lit, AnimationHelpers.dim_color(color, brightness))
                rail.show()
                self.pause(self.SWEEP_STEP_MS)

        rail.clear().show()
        bell.clear().show()
