"""
Execution strategies for fired operation batches
"""

import threading
from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lighting_utils import ClassLogger
    from .operations import OperationBatch


class ExecutionStrategy(ABC):
    """Decides where a fired batch runs"""

    name: str = ""

    def __init__(self, logger: Optional['ClassLogger'] = None):
        self.logger = logger

    @abstractmethod
    def execute(self, batch: 'OperationBatch') -> None:
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class SyncStrategy(ExecutionStrategy):
    """Run the batch on the caller's thread; errors reach the caller of fire()"""

    name = "sync"

    def execute(self, batch: 'OperationBatch') -> None:
        batch.run()


class BackgroundStrategy(ExecutionStrategy):
    """
    Run each batch on its own daemon thread and return immediately.

    Nothing is reported back to the caller of fire(); a failing batch is
    logged. join() exists for shutdown and tests.
    """

    name = "background"

    def __init__(self, logger: Optional['ClassLogger'] = None):
        if logger is None:
            from lighting_utils import get_class_logger
            logger = get_class_logger("BackgroundStrategy")
        self.logger = logger
        self._threads: List[threading.Thread] = []
        self._lock = threading.Lock()

    def execute(self, batch: 'OperationBatch') -> None:
        thread = threading.Thread(target=self._run_batch, args=(batch,),
                                  name="BusBatch", daemon=True)
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()

    def _run_batch(self, batch: 'OperationBatch') -> None:
        try:
            batch.run()
        except Exception as e:
            self.logger.error(f"Background batch failed: {e}", exception=e)

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for outstanding batches.

        Returns:
            True if every batch finished within the timeout
        """
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)
        return not any(thread.is_alive() for thread in threads)

    @property
    def active_count(self) -> int:
        with self._lock:
            return sum(1 for t in self._threads if t.is_alive())


STRATEGIES = {
    SyncStrategy.name: SyncStrategy,
    BackgroundStrategy.name: BackgroundStrategy,
}


def create_strategy(name: str, logger: Optional['ClassLogger'] = None) -> ExecutionStrategy:
    """
    Build a strategy from its configuration name.

    Raises:
        ValueError: If the name is not 'sync' or 'background'
    """
    strategy_class = STRATEGIES.get((name or "").strip().lower())
    if strategy_class is None:
        raise ValueError(f"Unknown execution strategy '{name}' (expected one of: {', '.join(STRATEGIES)})")
    return strategy_class(logger)
