#!/usr/bin/env python3
"""
PixelStrip Adapter - rpi_ws281x wrapper implementing LedStrip interface

This is the only file that depends on rpi_ws281x.
"""
from typing import Union, List
from .interfaces import LedStrip
from .pixel import Pixel

# Import rpi_ws281x at module level within adapter
try:
    from rpi_ws281x import PixelStrip
except ImportError:
    # Handle gracefully for development on non-Pi systems
    PixelStrip = None


class PixelStripAdapter(LedStrip):
    """Adapter that wraps rpi_ws281x PixelStrip to implement LedStrip

    Pixel IS an int, so colors pass to the driver without conversion.
    """

    def __init__(self, led_count: int, gpio_pin: int, freq_hz: int = 800000,
                 dma: int = 10, invert: bool = False, brightness: int = 255,
                 channel: int = 0) -> None:
        """Initialize PixelStrip with all standard parameters

        Args:
            led_count: Number of LEDs in the strip
            gpio_pin: GPIO pin connected to strip data line
            freq_hz: Signal frequency in hertz (default 800kHz)
            dma: DMA channel to use (default 10)
            invert: Whether to invert the signal (default False)
            brightness: Global brightness 0-255 (default 255)
            channel: PWM channel to use (default 0)

        Raises:
            ImportError: If rpi_ws281x is not available
        """
        if PixelStrip is None:
            raise ImportError("rpi_ws281x not available - run on Raspberry Pi")

        self._strip = PixelStrip(led_count, gpio_pin, freq_hz, dma,
                                 invert, brightness, channel)
        self._strip.begin()

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        result = self._strip[pos]
        if isinstance(pos, slice):
            return [Pixel(color) for color in result]
        return Pixel(result)

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if isinstance(pos, slice):
            if isinstance(color, list):
                indices = range(*pos.indices(self._strip.numPixels()))
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, pixel in zip(indices, color):
                    self._strip[i] = pixel
            else:
                self._strip[pos] = color
        else:
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._strip[pos] = color

    def show(self) -> None:
        """Render the buffer (roughly 10ms per few hundred pixels)"""
        self._strip.show()

    def num_pixels(self) -> int:
        return self._strip.numPixels()

    def get_brightness(self) -> int:
        return self._strip.getBrightness()

    def set_brightness(self, brightness: int) -> None:
        self._strip.setBrightness(brightness)
