#!/usr/bin/env python3
"""
Channel Dispatcher - Convenience layer over a single PixelChannel

Adds the one-liners a host application reaches for (set a color, blink a
status, run a block then show) and a safe() wrapper that keeps a failing
effect from leaving the hardware lit.
"""
import time
from typing import Any, Callable, Optional, TYPE_CHECKING

from .channel import ChannelShape, PixelChannel
from .exceptions import UnsupportedOperationError

if TYPE_CHECKING:
    from lighting_utils import ClassLogger


class ChannelDispatcher:
    """Forwards calls to one PixelChannel and adds helper operations"""

    STATUS_COLORS = {
        'success': 0x00FF00,  # Green
        'error': 0xFF0000,    # Red
        'warning': 0xFFFF00,  # Yellow
        'info': 0x0000FF,     # Blue
        'ready': 0x00FFFF,    # Cyan
    }
    DEFAULT_STATUS_COLOR = 0xFFFFFF
    STATUS_BLINK_MS = 150

    def __init__(self, channel: PixelChannel, logger: Optional['ClassLogger'] = None,
                 sleep: Callable[[float], None] = time.sleep):
        if logger is None:
            from lighting_utils import get_class_logger
            logger = get_class_logger("ChannelDispatcher")
        self.channel = channel
        self.logger = logger
        self._sleep = sleep
        self.logging_enabled = False

    def call(self, operation: str, *args: Any) -> Any:
        """
        Forward an operation to the channel by name.

        Returns the dispatcher when the channel hands back itself (chaining),
        otherwise the channel's result.

        Raises:
            UnsupportedOperationError: If the channel has no such operation
        """
        if not PixelChannel.supports(operation):
            raise UnsupportedOperationError(operation, type(self.channel).__name__)

        if self.logging_enabled:
            self.logger.debug(f"Calling {operation} on '{self.channel.name}' with {args}")

        result = getattr(self.channel, operation)(*args)
        return self if result is self.channel else result

    def enable_logging(self, enabled: bool = True) -> 'ChannelDispatcher':
        self.logging_enabled = enabled
        return self

    def set_color(self, color: int, brightness: Optional[int] = None) -> 'ChannelDispatcher':
        """Fill with one color and show, optionally setting brightness first"""
        if brightness is not None:
            self.channel.set_brightness(brightness)
        self.channel.fill(color).show()
        return self

    def off(self) -> 'ChannelDispatcher':
        """Turn off all LEDs"""
        self.channel.clear().show()
        return self

    def status(self, status: str, blinks: int = 2) -> 'ChannelDispatcher':
        """
        Blink a status color.

        Args:
            status: 'success', 'error', 'warning', 'info' or 'ready' (anything else blinks white)
            blinks: Number of on/off cycles
        """
        color = self.STATUS_COLORS.get(status, self.DEFAULT_STATUS_COLOR)
        delay = self.STATUS_BLINK_MS / 1000.0

        for i in range(blinks):
            self.channel.fill(color).show()
            self._sleep(delay)
            self.channel.clear().show()
            if i < blinks - 1:
                self._sleep(delay)

        return self

    def batch(self, callback: Callable[[PixelChannel], Any]) -> 'ChannelDispatcher':
        """Run callback against the channel, then show once"""
        callback(self.channel)
        self.channel.show()
        return self

    def safe(self, callback: Callable[['ChannelDispatcher'], Any], clear_on_error: bool = True) -> 'ChannelDispatcher':
        """
        Run callback and never let it raise.

        Failures are logged; with clear_on_error the channel is forced off so
        a broken effect does not leave LEDs lit.
        """
        try:
            callback(self)
        except Exception as e:
            self.logger.error(f"Dispatcher error on channel '{self.channel.name}': {e}", exception=e)
            if clear_on_error:
                try:
                    self.off()
                except Exception as off_error:
                    self.logger.error(f"Could not switch off channel '{self.channel.name}': {off_error}",
                                      exception=off_error)

        return self

    def brightness(self) -> int:
        return self.channel.get_brightness()

    def count(self) -> int:
        return self.channel.pixel_count()

    def shape(self) -> ChannelShape:
        return self.channel.shape

    def is_shape(self, shape: ChannelShape) -> bool:
        return self.channel.shape is shape
