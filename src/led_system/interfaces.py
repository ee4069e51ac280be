#!/usr/bin/env python3
"""
LED Strip Interface - Abstract driver contract for one pixel channel

A driver owns a pixel buffer and a hardware transport. Every setter only
touches the buffer; show() is the single call with an external effect and
must tolerate being called at animation frame rates (50 Hz and up).
"""
from abc import ABC, abstractmethod
from typing import Union, List
from .pixel import Pixel


class LedStrip(ABC):
    """Abstract driver for one addressable LED segment using Python slice notation

    Supported Operations:
        strip[5] = Pixel(255, 0, 0)                    # Single pixel
        strip[0:10] = Pixel(0, 255, 0)                 # Slice to same color
        strip[0:3] = [pixel1, pixel2, pixel3]          # Slice to different colors
        strip[:] = Pixel(0, 0, 0)                      # Clear all

        color = strip[5]                               # Get single pixel
        colors = strip[0:10]                           # Get slice of pixels

    Invalid Operations:
        strip[5] = [pixel1, pixel2]                    # Position + list (TypeError)
    """

    @abstractmethod
    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        """Get buffered pixel color(s). Returns single Pixel or list for slice."""
        pass

    @abstractmethod
    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        """Set buffered pixel(s) to color(s).

        Raises:
            TypeError: If trying to assign list to single position
            ValueError: If color list length doesn't match slice length
        """
        pass

    @abstractmethod
    def show(self) -> None:
        """Flush the buffer to the hardware."""
        pass

    @abstractmethod
    def num_pixels(self) -> int:
        """Return number of pixels in the strip."""
        pass

    @abstractmethod
    def get_brightness(self) -> int:
        """Return global brightness (0-255) applied on the next show()."""
        pass

    @abstractmethod
    def set_brightness(self, brightness: int) -> None:
        """Set global brightness (0-255). Takes effect on the next show()."""
        pass
