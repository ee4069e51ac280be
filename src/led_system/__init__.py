#!/usr/bin/env python3
"""
LED System - Named pixel channels over library independent LED drivers

The main components are:

- Pixel: Packed 24-bit RGB color that extends int
- LedStrip: Abstract driver interface (slice notation, show, brightness)
- PixelStripAdapter: rpi_ws281x implementation of LedStrip
- VirtualStrip: In-memory LedStrip for development and tests
- PixelChannel: One named channel, buffer writes plus show()
- ChannelDispatcher: Helpers over a channel (set_color, status, safe, ...)

Usage:
    from led_system import PixelChannel, VirtualStrip, ChannelDispatcher

    rail = PixelChannel("rail", VirtualStrip(15))
    rail.set_pixel(0, 0xFF0000).show()

    ChannelDispatcher(rail).status("success", blinks=3)
"""

from .pixel import Pixel
from .interfaces import LedStrip
from .pixel_strip_adapter import PixelStripAdapter
from .virtual_strip import VirtualStrip
from .channel import ChannelShape, PixelChannel
from .dispatcher import ChannelDispatcher
from .exceptions import PixelRangeError, UnsupportedOperationError, ChannelNotFoundError

__all__ = [
    'Pixel',
    'LedStrip',
    'PixelStripAdapter',
    'VirtualStrip',
    'ChannelShape',
    'PixelChannel',
    'ChannelDispatcher',
    'PixelRangeError',
    'UnsupportedOperationError',
    'ChannelNotFoundError',
]

__version__ = '1.0.0'
