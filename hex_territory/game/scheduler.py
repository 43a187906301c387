"""Timer capability used to pace automated players."""

import itertools
from abc import ABC, abstractmethod
from typing import Callable, Dict

from ..core.exceptions import SimulationError
from ..utils.validation import Validator


class Scheduler(ABC):
    """Runs callbacks repeatedly at a fixed interval until cancelled."""

    @abstractmethod
    def schedule_repeating(self, callback: Callable[[], None], interval_ms: int) -> int:
        """Invoke `callback` every `interval_ms`; return a handle for `cancel`."""
        pass

    @abstractmethod
    def cancel(self, handle: int) -> None:
        """Stop a previously scheduled callback. Unknown handles are ignored."""
        pass


class ManualScheduler(Scheduler):
    """Scheduler that only moves when told to.

    Each call to `advance` is one tick for every scheduled callback,
    whatever its interval. Callbacks added or cancelled during a tick take
    effect from the next tick.
    """

    def __init__(self):
        self._callbacks: Dict[int, Callable[[], None]] = {}
        self._intervals: Dict[int, int] = {}
        self._handles = itertools.count(1)
        self.ticks_elapsed = 0

    def schedule_repeating(self, callback: Callable[[], None], interval_ms: int) -> int:
        Validator.validate_positive(interval_ms, "interval_ms")
        handle = next(self._handles)
        self._callbacks[handle] = callback
        self._intervals[handle] = interval_ms
        return handle

    def cancel(self, handle: int) -> None:
        self._callbacks.pop(handle, None)
        self._intervals.pop(handle, None)

    @property
    def pending(self) -> int:
        """Number of active callbacks."""
        return len(self._callbacks)

    @property
    def is_idle(self) -> bool:
        return not self._callbacks

    def advance(self, ticks: int = 1) -> None:
        """Fire every active callback once per tick."""
        for _ in range(ticks):
            snapshot = list(self._callbacks.items())
            for handle, callback in snapshot:
                # cancelled earlier in this tick
                if handle in self._callbacks:
                    callback()
            self.ticks_elapsed += 1

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        """Advance until nothing is scheduled; return the ticks used."""
        used = 0
        while self._callbacks:
            if used >= max_ticks:
                raise SimulationError(
                    f"Scheduler still busy after {max_ticks} ticks",
                    error_code="TICK_LIMIT",
                    context={"pending": self.pending}
                )
            self.advance()
            used += 1
        return used
