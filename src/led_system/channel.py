#!/usr/bin/env python3
"""
PixelChannel - One named LED segment on a pixel bus

Wraps an LedStrip driver and exposes the operations a bus is allowed to
forward. Every setter writes the in-memory buffer only; show() is the flush
point that makes the buffer visible on hardware.
"""
from enum import Enum
from typing import List, Optional

from .exceptions import PixelRangeError
from .interfaces import LedStrip
from .pixel import Pixel


class ChannelShape(Enum):
    """Physical layout of a channel"""
    RGB_STRIP = "rgb-strip"
    DOUBLE_DOTS = "double-dots"
    SINGLE_DIODE = "single-diode"

    @property
    def fixed_pixel_count(self) -> Optional[int]:
        """Pixel count imposed by the shape, None for strips of any length"""
        if self is ChannelShape.DOUBLE_DOTS:
            return 2
        if self is ChannelShape.SINGLE_DIODE:
            return 1
        return None


class PixelChannel:
    """
    Named channel over a single LED driver.

    Mutating operations return the channel so calls can be chained:
        bell.fill(0xFFD700).show()
    """

    # Mutating operations a bus may broadcast or queue
    FORWARDABLE_OPERATIONS = ("fill", "clear", "set_pixel", "show", "set_brightness")
    # Read-only operations a dispatcher may forward
    QUERY_OPERATIONS = ("get_pixel", "get_brightness", "pixel_count", "frame")

    def __init__(self, name: str, strip: LedStrip, shape: ChannelShape = ChannelShape.RGB_STRIP):
        self.name = name
        self.strip = strip
        self.shape = shape

    @classmethod
    def supports(cls, operation: str) -> bool:
        return operation in cls.FORWARDABLE_OPERATIONS or operation in cls.QUERY_OPERATIONS

    # ==================== Buffer writes ====================

    def fill(self, color: int) -> 'PixelChannel':
        self.strip[:] = Pixel(color)
        return self

    def clear(self) -> 'PixelChannel':
        self.strip[:] = Pixel(0)
        return self

    def set_pixel(self, index: int, color: int) -> 'PixelChannel':
        self._check_index(index)
        self.strip[index] = Pixel(color)
        return self

    def set_brightness(self, level: int) -> 'PixelChannel':
        self.strip.set_brightness(max(0, min(255, int(level))))
        return self

    # ==================== Flush ====================

    def show(self) -> 'PixelChannel':
        self.strip.show()
        return self

    # ==================== Reads ====================

    def get_pixel(self, index: int) -> Pixel:
        self._check_index(index)
        return Pixel(self.strip[index])

    def get_brightness(self) -> int:
        return self.strip.get_brightness()

    def pixel_count(self) -> int:
        return self.strip.num_pixels()

    def frame(self) -> List[Pixel]:
        """Copy of the current buffer, one Pixel per LED"""
        return [Pixel(color) for color in self.strip[:]]

    def _check_index(self, index: int) -> None:
        count = self.strip.num_pixels()
        if not 0 <= index < count:
            raise PixelRangeError(self.name, index, count)

    def __repr__(self) -> str:
        return f"<PixelChannel '{self.name}' pixels={self.pixel_count()} shape={self.shape.value}>"
