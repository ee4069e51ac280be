"""
Pixel bus - named channels driven together

PixelBus executes everything immediately. AnimatablePixelBus adds an async
mode in which calls are recorded and later fired as one batch through an
execution strategy.
"""

import time
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, TYPE_CHECKING

from led_system.channel import PixelChannel
from led_system.dispatcher import ChannelDispatcher
from led_system.exceptions import ChannelNotFoundError, UnsupportedOperationError

from .bus_animation import BusAnimation
from .exceptions import AnimationIncompatibleError
from .operations import ChannelCallOperation, OperationBatch, RunAnimationOperation, WaitOperation
from .strategies import ExecutionStrategy, SyncStrategy

if TYPE_CHECKING:
    from lighting_utils import ClassLogger
    from .factory import AnimationFactory


class PixelBus:
    """Ordered map of channel name -> PixelChannel with immediate execution"""

    def __init__(self,
                 channels: Optional[Mapping[str, PixelChannel]] = None,
                 factory: Optional['AnimationFactory'] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 logger: Optional['ClassLogger'] = None):
        if logger is None:
            from lighting_utils import get_class_logger
            logger = get_class_logger(self.__class__.__name__)
        self.logger = logger
        self._channels: Dict[str, PixelChannel] = {}
        self._factory = factory
        self._sleep = sleep

        for name, channel in (channels or {}).items():
            self.add_channel(name, channel)

    @property
    def factory(self) -> 'AnimationFactory':
        """Factory used to resolve animations (the shared one unless given)"""
        if self._factory is None:
            from .factory import AnimationFactory
            self._factory = AnimationFactory.shared()
        return self._factory

    # ==================== Channels ====================

    def add_channel(self, name: str, channel: PixelChannel) -> 'PixelBus':
        if name in self._channels:
            raise ValueError(f"Channel '{name}' already exists on this bus")
        self._channels[name] = channel
        return self

    def channels(self) -> Dict[str, PixelChannel]:
        """Copy of the channel map in bus order"""
        return dict(self._channels)

    def get_channel(self, name: str) -> Optional[PixelChannel]:
        return self._channels.get(name)

    def has_channel(self, name: str) -> bool:
        return name in self._channels

    def channel_names(self) -> List[str]:
        return list(self._channels)

    def dispatcher(self, name: str) -> ChannelDispatcher:
        """
        Raises:
            ChannelNotFoundError: If the bus has no such channel
        """
        return ChannelDispatcher(self._require_channel(name), sleep=self._sleep)

    # ==================== Execution ====================

    def apply(self, channel: Optional[str], operation: str, *args: Any) -> None:
        """
        Run a channel operation now.

        Args:
            channel: Target channel name, None for every channel in bus order
            operation: One of PixelChannel.FORWARDABLE_OPERATIONS
            *args: Operation arguments

        Raises:
            UnsupportedOperationError: Unknown operation name
            ChannelNotFoundError: Target channel not on the bus
        """
        self._check_operation(operation)
        targets = self._channels.values() if channel is None else [self._require_channel(channel)]
        for target in list(targets):
            getattr(target, operation)(*args)

    def run_animation(self, animation: BusAnimation, duration_ms: int = 5000,
                      options: Optional[Mapping[str, Any]] = None) -> None:
        """
        Resolve and run an animation, blocking until it finishes.

        Raises:
            AnimationNotFoundError: Nothing registered for the animation
            AnimationIncompatibleError: Bus lacks what the animation needs;
                raised before any channel is touched
        """
        visualization = self.factory.create(animation)
        if not visualization.is_compatible(self):
            raise AnimationIncompatibleError(animation, self)

        merged = visualization.merge_options(options)
        self.logger.info(f"Running {animation.display_name} for {duration_ms}ms")
        visualization.run(self, duration_ms, merged)

    def pause(self, milliseconds: float) -> None:
        self._sleep(milliseconds / 1000.0)

    # ==================== Internals ====================

    @staticmethod
    def _check_operation(operation: str) -> None:
        if operation not in PixelChannel.FORWARDABLE_OPERATIONS:
            raise UnsupportedOperationError(operation)

    def _require_channel(self, name: str) -> PixelChannel:
        if name not in self._channels:
            raise ChannelNotFoundError(name)
        return self._channels[name]

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, name: object) -> bool:
        return name in self._channels

    def __iter__(self) -> Iterator[PixelChannel]:
        return iter(list(self._channels.values()))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} channels={self.channel_names()}>"


class BusMode(Enum):
    SYNC = "sync"
    ASYNC = "async"


class AnimatablePixelBus(PixelBus):
    """
    Pixel bus with a deferred operation queue.

    In SYNC mode (the default) every call executes immediately. In ASYNC
    mode calls are appended to the queue and return the bus; fire() swaps
    the queue for an empty one and hands the captured batch to the
    execution strategy.

        bus.with_async().fill_all(0xFF0000).wait(500).clear_all().fire()

    Operation names are checked when the call is made in either mode;
    channel names and animation compatibility are checked when the
    operation executes.
    """

    def __init__(self,
                 channels: Optional[Mapping[str, PixelChannel]] = None,
                 factory: Optional['AnimationFactory'] = None,
                 strategy: Optional[ExecutionStrategy] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 logger: Optional['ClassLogger'] = None):
        super().__init__(channels, factory, sleep, logger)
        self.strategy: ExecutionStrategy = strategy or SyncStrategy()
        self.mode = BusMode.SYNC
        self._queue: List[Any] = []

    # ==================== Mode ====================

    def with_async(self) -> 'AnimatablePixelBus':
        """Start recording; a pending queue is kept"""
        self.mode = BusMode.ASYNC
        return self

    def without_async(self) -> 'AnimatablePixelBus':
        """Back to immediate execution; a pending queue is kept for a later fire()"""
        self.mode = BusMode.SYNC
        return self

    @property
    def is_async(self) -> bool:
        return self.mode is BusMode.ASYNC

    @property
    def pending_operations(self) -> List[Any]:
        return list(self._queue)

    # ==================== Recordable calls ====================

    def wait(self, milliseconds: int) -> 'AnimatablePixelBus':
        if self.is_async:
            self._queue.append(WaitOperation(milliseconds))
        else:
            self.pause(milliseconds)
        return self

    def animate(self, animation: BusAnimation, duration_ms: int = 5000,
                options: Optional[Mapping[str, Any]] = None) -> 'AnimatablePixelBus':
        if self.is_async:
            self._queue.append(RunAnimationOperation(animation, duration_ms, dict(options or {})))
        else:
            self.run_animation(animation, duration_ms, options)
        return self

    def call(self, operation: str, *args: Any, channel: Optional[str] = None) -> 'AnimatablePixelBus':
        """
        Channel operation on one channel, or on all channels when channel is None.

        Raises:
            UnsupportedOperationError: Unknown operation name, in either mode
        """
        self._check_operation(operation)
        if self.is_async:
            self._queue.append(ChannelCallOperation(channel, operation, tuple(args)))
        else:
            self.apply(channel, operation, *args)
        return self

    def fill_all(self, color: int) -> 'AnimatablePixelBus':
        return self.call("fill", color)

    def set_brightness_all(self, level: int) -> 'AnimatablePixelBus':
        return self.call("set_brightness", level)

    def clear_all(self) -> 'AnimatablePixelBus':
        """Clear then show every channel"""
        return self.call("clear").call("show")

    def show_all(self) -> 'AnimatablePixelBus':
        return self.call("show")

    # ==================== Firing ====================

    def snapshot(self) -> PixelBus:
        """Immediate bus over the current channels, detached from this bus's queue"""
        return PixelBus(self.channels(), self.factory, self._sleep, self.logger)

    def fire(self, strategy: Optional[ExecutionStrategy] = None) -> 'AnimatablePixelBus':
        """
        Drain the queue through a strategy (the bus's own unless given).

        No-op when nothing is pending. The queue is empty again before the
        strategy starts, so calls made while the batch runs form a new queue.
        """
        if not self._queue:
            return self

        operations, self._queue = self._queue, []
        batch = OperationBatch(operations, self.snapshot(), self.logger)
        strategy = strategy or self.strategy
        self.logger.debug(f"Firing {len(batch)} operations with {strategy.name} strategy")
        strategy.execute(batch)
        return self
