#!/usr/bin/env python3
"""
Virtual Strip - In-memory LedStrip for development machines and tests

Behaves like the hardware adapter but keeps everything in a Python list.
show() copies the buffer into `shown` so callers can inspect what the
hardware would display.
"""
from typing import Union, List
from .interfaces import LedStrip
from .pixel import Pixel


class VirtualStrip(LedStrip):
    """LedStrip without hardware; counts writes and flushes"""

    def __init__(self, led_count: int, brightness: int = 255) -> None:
        if led_count <= 0:
            raise ValueError(f"LED count must be positive, got {led_count}")
        self._buffer: List[Pixel] = [Pixel(0) for _ in range(led_count)]
        self._brightness = brightness
        self.shown: List[Pixel] = list(self._buffer)
        self.show_count = 0
        self.write_count = 0

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        if isinstance(pos, slice):
            return list(self._buffer[pos])
        return self._buffer[pos]

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        self.write_count += 1
        if isinstance(pos, slice):
            indices = range(*pos.indices(len(self._buffer)))
            if isinstance(color, list):
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, pixel in zip(indices, color):
                    self._buffer[i] = Pixel(pixel)
            else:
                for i in indices:
                    self._buffer[i] = Pixel(color)
        else:
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._buffer[pos] = Pixel(color)

    def show(self) -> None:
        self.shown = list(self._buffer)
        self.show_count += 1

    def num_pixels(self) -> int:
        return len(self._buffer)

    def get_brightness(self) -> int:
        return self._brightness

    def set_brightness(self, brightness: int) -> None:
        self._brightness = brightness

    def __repr__(self) -> str:
        return f"<VirtualStrip pixels={len(self._buffer)} shows={self.show_count}>"
