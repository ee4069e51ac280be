"""
Helper utilities for bus animations
"""

import math
import random
from typing import Optional, Sequence, TYPE_CHECKING

from led_system.pixel import Pixel

if TYPE_CHECKING:
    from led_system.channel import PixelChannel


class AnimationHelpers:
    """Static color helpers shared by the visualizations"""

    BLACK = Pixel(0, 0, 0)
    WHITE = Pixel(255, 255, 255)
    RED = Pixel(255, 0, 0)
    GOLD = Pixel(255, 215, 0)
    ORANGE = Pixel(255, 165, 0)
    ORANGE_RED = Pixel(255, 69, 0)
    HOT_PINK = Pixel(255, 20, 147)
    DIM_GRAY = Pixel(64, 64, 64)

    @staticmethod
    def dim_color(color: int, brightness: float) -> Pixel:
        """
        Scale a packed color by brightness.

        Args:
            color: Packed 0xRRGGBB color
            brightness: 0.0 (black) to 1.0 (unchanged), clamped
        """
        return Pixel(color).scaled(brightness)

    @staticmethod
    def random_color_from_palette(palette: Sequence[int], rng: Optional[random.Random] = None) -> Pixel:
        rng = rng or random
        return Pixel(rng.choice(list(palette)))

    @staticmethod
    def hsv_to_pixel(h: float, s: float, v: float) -> Pixel:
        """
        Convert HSV to Pixel RGB.

        Args:
            h: Hue (0-360 degrees)
            s: Saturation (0.0-1.0)
            v: Value/Brightness (0.0-1.0)
        """
        h = h % 360  # Wrap hue
        c = v * s
        x = c * (1 - abs((h / 60) % 2 - 1))
        m = v - c

        if 0 <= h < 60:
            r, g, b = c, x, 0
        elif 60 <= h < 120:
            r, g, b = x, c, 0
        elif 120 <= h < 180:
            r, g, b = 0, c, x
        elif 180 <= h < 240:
            r, g, b = 0, x, c
        elif 240 <= h < 300:
            r, g, b = x, 0, c
        else:  # 300 <= h < 360
            r, g, b = c, 0, x

        return Pixel(int((r + m) * 255), int((g + m) * 255), int((b + m) * 255))

    @staticmethod
    def sine_brightness(phase: float, min_brightness: float, max_brightness: float) -> float:
        """Breathing curve: min at phase -pi/2, max at phase pi/2"""
        return min_brightness + (max_brightness - min_brightness) * (0.5 + 0.5 * math.sin(phase))

    @staticmethod
    def fade_channel(channel: 'PixelChannel', factor: float, limit: Optional[int] = None) -> None:
        """
        Multiply every lit pixel of a channel buffer by factor.

        Black pixels are skipped so nothing gets lit by rounding. Does not show().

        Args:
            channel: Channel to fade
            factor: Brightness multiplier (0.8 keeps 80%)
            limit: Only fade pixels below this index (whole channel if None)
        """
        count = channel.pixel_count() if limit is None else min(limit, channel.pixel_count())
        for i in range(count):
            current = channel.get_pixel(i)
            if not current.is_black:
                channel.set_pixel(i, current.scaled(factor))
