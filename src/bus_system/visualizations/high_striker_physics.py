"""
High striker physics - carnival strength tester on a rail + bell bus

The hammer launches a puck up the rail with a random velocity. Gravity
slows it, the bell lights if the puck gets high enough while still rising,
and the puck bounces on the floor losing energy until it comes to rest.
"""

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

from bus_system.animation_helpers import AnimationHelpers
from bus_system.bus_animation import BusAnimation
from bus_system.physics import Physics, PhysicsState
from bus_system.shapes import BELL, RAIL
from bus_system.visualization import BusVisualization

if TYPE_CHECKING:
    from led_system.channel import PixelChannel
    from bus_system.pixel_bus import PixelBus


class HighStrikerPhysicsVisualization(BusVisualization):
    """
    Puck simulation with gravity, restitution and energy depletion.

    Units: position and velocity are in "rail units"; position / pixel_scale
    is the normalized height (0.0 floor, 1.0 top of the rail).

    The bell rings when the rising puck passes bell_threshold of the drawn
    rail height. Setting bell_height replaces that with a raw position in
    rail units; rail_count * bell_threshold gives the older, much lower
    target that a hit of 50 units or more almost always reaches.
    """

    def get_animation_type(self) -> BusAnimation:
        return BusAnimation.HIGH_STRIKER_PHYSICS

    def get_default_options(self) -> Dict[str, Any]:
        return {
            'min_velocity': 50,
            'max_velocity': 150,
            'gravity': 98.0,
            'restitution': 0.6,            # Fraction of speed kept per bounce
            'bell_threshold': 0.9,         # Normalized height that rings the bell
            'bell_height': None,           # Raw position that rings the bell, overrides bell_threshold
            'puck_color': 0xFF0000,
            'trail_length': 3,
            'bell_color_success': 0xFFD700,
            'bell_color_fail': 0x404040,
            'time_step': 0.02,             # Seconds of simulated time per frame
            'pixel_scale': 100.0,          # Rail units per full rail height
            'max_bounces': 5,
            'depletion_threshold': 5.0,    # Post-bounce speed below which the puck rests
            'frame_delay_ms': 20,
            'hold_ms': 500,
        }

    def get_required_channels(self) -> List[str]:
        return [RAIL, BELL]

    # ==================== Simulation ====================

    def step(self, state: PhysicsState, opts: Mapping[str, Any]) -> PhysicsState:
        """
        Advance one frame (semi-implicit Euler: velocity first, then position).

        Returns a new state; the input is not modified.
        """
        dt = opts['time_step']
        velocity = Physics.apply_gravity(state.velocity, opts['gravity'], dt)
        position = state.position + velocity * dt
        bounce_count = state.bounce_count
        target_reached = state.target_reached

        bell_height = opts.get('bell_height')
        if bell_height is None:
            bell_height = opts['pixel_scale'] * opts['bell_threshold']
        if not target_reached and velocity > 0 and position >= bell_height:
            target_reached = True

        if position <= 0 and velocity < 0:
            position = 0.0
            velocity = Physics.bounce(velocity, opts['restitution'])
            bounce_count += 1

        return replace(state, position=position, velocity=velocity,
                       bounce_count=bounce_count, target_reached=target_reached)

    def is_at_rest(self, state: PhysicsState, opts: Mapping[str, Any]) -> bool:
        """True once the bounce limit is hit or a bounce leaves too little speed"""
        if state.bounce_count >= opts['max_bounces']:
            return True
        just_bounced = state.bounce_count > 0 and state.position <= 0
        return just_bounced and Physics.is_depleted(state.velocity, opts['depletion_threshold'])

    def simulate(self, bus: 'PixelBus', duration_ms: int,
                 opts: Optional[Mapping[str, Any]] = None) -> PhysicsState:
        """
        Run the puck loop until it rests or duration_ms elapses.

        Lights the bell the moment the target is reached and draws the puck
        every frame. Returns the final state.
        """
        opts = self.merge_options(opts)
        rail = bus.get_channel(RAIL)
        bell = bus.get_channel(BELL)
        rail_count = rail.pixel_count()

        state = PhysicsState(position=0.0,
                             velocity=self.rng.uniform(opts['min_velocity'], opts['max_velocity']))

        for _frame in self.frames(duration_ms, opts['frame_delay_ms']):
            previous = state
            state = self.step(state, opts)

            if state.target_reached and not previous.target_reached:
                bell.fill(opts['bell_color_success']).show()

            if self.is_at_rest(state, opts):
                break

            pixel = Physics.position_to_pixel(state.position / opts['pixel_scale'], rail_count)
            self._draw_puck(rail, pixel, opts)

        return state

    def _draw_puck(self, rail: 'PixelChannel', pixel: int, opts: Mapping[str, Any]) -> None:
        rail.clear()
        trail_length = opts['trail_length']
        for t in range(trail_length):
            index = pixel - t
            if index < 0:
                break
            brightness = 1.0 - (t / trail_length)
            rail.set_pixel(index, AnimationHelpers.dim_color(opts['puck_color'], brightness))
        rail.show()

    # ==================== Run ====================

    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        opts = self.merge_options(options)
        state = self.simulate(bus, duration_ms, opts)

        rail = bus.get_channel(RAIL)
        bell = bus.get_channel(BELL)

        if state.target_reached:
            bell.fill(opts['bell_color_success']).show()
        else:
            bell.fill(opts['bell_color_fail']).show()

        rail.clear().show()
        self.pause(opts['hold_ms'])
        bell.clear().show()
