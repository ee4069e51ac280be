"""
Deferred bus operations

An async bus records these instead of executing. fire() hands a batch of
them, together with a snapshot of the bus, to an execution strategy.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple, TYPE_CHECKING

from .bus_animation import BusAnimation

if TYPE_CHECKING:
    from lighting_utils import ClassLogger
    from .pixel_bus import PixelBus


@dataclass(frozen=True)
class WaitOperation:
    """Block the executing thread, then continue the same batch"""
    duration_ms: int

    def execute(self, bus: 'PixelBus') -> None:
        bus.pause(self.duration_ms)


@dataclass(frozen=True)
class ChannelCallOperation:
    """Channel method call; channel=None broadcasts in bus order"""
    channel: Optional[str]
    operation: str
    args: Tuple[Any, ...] = ()

    @property
    def is_broadcast(self) -> bool:
        return self.channel is None

    def execute(self, bus: 'PixelBus') -> None:
        bus.apply(self.channel, self.operation, *self.args)


@dataclass(frozen=True)
class RunAnimationOperation:
    """Whole animation run; compatibility is checked when it executes"""
    animation: BusAnimation
    duration_ms: int = 5000
    options: Dict[str, Any] = field(default_factory=dict, hash=False)

    def execute(self, bus: 'PixelBus') -> None:
        bus.run_animation(self.animation, self.duration_ms, self.options)


class OperationBatch:
    """
    Operations captured by one fire(), bound to the bus they run against.

    The batch owns its operation tuple and a bus snapshot, so the caller's
    bus can start a new queue (or gain channels) while this one runs.
    """

    def __init__(self, operations: Sequence[Any], bus: 'PixelBus', logger: Optional['ClassLogger'] = None):
        if logger is None:
            from lighting_utils import get_class_logger
            logger = get_class_logger("OperationBatch")
        self.operations = tuple(operations)
        self.bus = bus
        self.logger = logger

    def run(self) -> None:
        """Execute every operation in order; the first failure stops the batch"""
        self.logger.debug(f"Running batch of {len(self.operations)} operations")
        for operation in self.operations:
            operation.execute(self.bus)

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self):
        return iter(self.operations)

    def __repr__(self) -> str:
        return f"<OperationBatch operations={len(self.operations)}>"
