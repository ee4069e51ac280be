"""
Bus visualization base class

A visualization is the behavior behind one BusAnimation. It runs a complete
sequence across the channels of a bus and blocks until the sequence ends.
"""

import random
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .bus_animation import BusAnimation
    from .pixel_bus import PixelBus


# Methods every registered visualization must provide
CONTRACT_METHODS = (
    "run",
    "get_animation_type",
    "get_name",
    "get_default_options",
    "get_required_channels",
    "is_compatible",
)


class BusVisualization(ABC):
    """
    Abstract base class for bus-level animations.

    Subclasses implement run() and get_animation_type(); the rest has
    defaults. Time and randomness are injectable so a run can be replayed
    deterministically.
    """

    def __init__(self,
                 clock: Optional[Callable[[], float]] = None,
                 sleep: Optional[Callable[[float], None]] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            clock: Seconds since an arbitrary epoch (default time.monotonic)
            sleep: Blocking sleep in seconds (default time.sleep)
            rng: Random source for impact strength, sparkles, palette picks
        """
        self.clock: Callable[[], float] = clock or time.monotonic
        self.sleep: Callable[[float], None] = sleep or time.sleep
        self.rng: random.Random = rng or random.Random()

    @abstractmethod
    def run(self, bus: 'PixelBus', duration_ms: int, options: Optional[Mapping[str, Any]] = None) -> None:
        """
        Run the animation on a bus.

        Args:
            bus: Bus whose channels are animated
            duration_ms: Upper bound on the main animation loop
            options: Overrides for get_default_options()
        """
        pass

    @abstractmethod
    def get_animation_type(self) -> 'BusAnimation':
        pass

    def get_name(self) -> str:
        """Animation name derived from the class name"""
        return self.__class__.__name__.replace("Visualization", "")

    def get_default_options(self) -> Dict[str, Any]:
        return {}

    def get_required_channels(self) -> List[str]:
        return []

    def is_compatible(self, bus: 'PixelBus') -> bool:
        """Every required channel must exist on the bus (override for stricter checks)"""
        return all(bus.has_channel(name) for name in self.get_required_channels())

    def merge_options(self, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Defaults overlaid with caller options; caller keys win"""
        merged = self.get_default_options()
        merged.update(options or {})
        return merged

    def frames(self, duration_ms: float, frame_delay_ms: float) -> Iterator[int]:
        """
        Yield frame numbers until duration_ms of clock time has passed.

        The caller renders between yields; the generator sleeps
        frame_delay_ms after each frame. Breaking out of the loop ends the
        animation early without the trailing sleep.
        """
        start = self.clock()
        frame = 0
        while (self.clock() - start) * 1000 < duration_ms:
            yield frame
            frame += 1
            self.sleep(frame_delay_ms / 1000.0)

    def pause(self, milliseconds: float) -> None:
        self.sleep(milliseconds / 1000.0)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.get_animation_type().value}>"
