"""
Physics helpers for animations

Deterministic functions over floats: gravity, trajectory, bouncing and
energy depletion. Randomness (hammer impact strength) is chosen by the caller
before integration starts.
"""

import math
from dataclasses import dataclass

DEFAULT_TIME_STEP = 0.02  # seconds, one 50 FPS frame


@dataclass
class PhysicsState:
    """Puck state for a single animation run"""
    position: float = 0.0
    velocity: float = 0.0
    bounce_count: int = 0
    target_reached: bool = False


class Physics:
    """Static physics calculations (upward is positive, gravity pulls down)"""

    @staticmethod
    def trajectory(velocity: float, gravity: float, time: float) -> float:
        """
        Position after `time` seconds from a launch at `velocity`.

        s = v0*t - g*t^2/2
        """
        return velocity * time - 0.5 * gravity * time * time

    @staticmethod
    def apply_gravity(velocity: float, gravity: float, delta_time: float = DEFAULT_TIME_STEP) -> float:
        """One explicit Euler step: v = v0 - g*dt"""
        return velocity - gravity * delta_time

    @staticmethod
    def bounce(velocity: float, restitution: float) -> float:
        """
        Velocity after hitting the floor.

        Args:
            velocity: Velocity before impact (negative when falling)
            restitution: Fraction of speed kept, 0 = dead stop, 1 = perfectly elastic
        """
        return -velocity * restitution

    @staticmethod
    def is_depleted(energy: float, threshold: float = 0.1) -> bool:
        return abs(energy) < threshold

    @staticmethod
    def position_to_pixel(position: float, pixel_count: int) -> int:
        """Map a normalized position (0.0 bottom, 1.0 top) onto a pixel index"""
        position = max(0.0, min(1.0, position))
        return int(math.floor(position * (pixel_count - 1)))

    @staticmethod
    def time_to_apex(velocity: float, gravity: float) -> float:
        """t = v0/g"""
        if gravity <= 0:
            return 0.0
        return velocity / gravity

    @staticmethod
    def max_height(velocity: float, gravity: float) -> float:
        """h = v0^2/(2g)"""
        if gravity <= 0:
            return 0.0
        return (velocity * velocity) / (2 * gravity)

    @staticmethod
    def has_reached_target(position: float, target: float, tolerance: float = 0.1) -> bool:
        return abs(position - target) <= tolerance

    @staticmethod
    def impact_force(velocity: float) -> float:
        """F = m*v with unit mass"""
        return abs(velocity)

    @staticmethod
    def momentum(velocity: float, mass: float = 1.0) -> float:
        return mass * velocity

    @staticmethod
    def kinetic_energy(velocity: float, mass: float = 1.0) -> float:
        """E = m*v^2/2"""
        return 0.5 * mass * velocity * velocity
