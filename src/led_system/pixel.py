#!/usr/bin/env python3
"""
Pixel class - Packed 24-bit RGB color value

Every color that crosses a channel boundary is a Pixel. It extends int, so a
Pixel can be handed straight to the rpi_ws281x driver while still exposing
its RGB components.
"""
from typing import Optional


class Pixel(int):
    """Packed 0xRRGGBB color that IS an int

    Usage:
        pixel = Pixel(255, 0, 0)        # Red pixel
        pixel = Pixel(0xFF0000)         # Red pixel from packed int
        print(pixel.r, pixel.g, pixel.b)
        dim = pixel.scaled(0.5)         # Half brightness copy
    """

    def __new__(cls, r: int, g: Optional[int] = None, b: Optional[int] = None) -> 'Pixel':
        """Create pixel from RGB components or an already packed value

        Args:
            r: Red component (0-255) OR packed 0xRRGGBB integer
            g: Green component (0-255) OR None if r is packed
            b: Blue component (0-255) OR None if r is packed

        Raises:
            ValueError: If only some of the RGB components are given
        """
        if g is None and b is None:
            # Packed value - anything above 24 bits (e.g. a white byte) is dropped
            return int.__new__(cls, int(r) & 0xFFFFFF)
        if g is None or b is None:
            raise ValueError("Must provide either just int value or all three RGB values")
        return int.__new__(cls, ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF))

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & 0xFF

    @property
    def is_black(self) -> bool:
        return int(self) == 0

    def scaled(self, factor: float) -> 'Pixel':
        """Return a copy with every component multiplied by factor (clamped to 0.0-1.0)"""
        factor = max(0.0, min(1.0, factor))
        return Pixel(int(self.r * factor), int(self.g * factor), int(self.b * factor))

    def __repr__(self) -> str:
        return f"Pixel(0x{int(self):06X})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"
