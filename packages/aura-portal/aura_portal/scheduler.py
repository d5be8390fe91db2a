"""StageScheduler - deferred triggers measured from a single reference instant."""
from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

# Host clocks hand over float milliseconds; absorb representation error.
_EPSILON = 1e-6


@dataclass(eq=False)
class TriggerHandle:
    """A scheduled callback. Compared by identity."""

    offset: float
    seq: int
    callback: Callable[[], None]
    fired: bool = False
    cancelled: bool = False

    @property
    def pending(self) -> bool:
        return not (self.fired or self.cancelled)


class StageScheduler:
    """Fires callbacks once the clock passes their offset.

    Triggers fire in ascending offset order, ties in registration order.
    The scheduler never reads a clock itself: the host calls ``advance``
    with the elapsed time in milliseconds.
    """

    def __init__(self) -> None:
        self._queue: list[tuple[float, int, TriggerHandle]] = []
        self._counter = itertools.count()
        self._now = 0.0

    @property
    def now(self) -> float:
        return self._now

    def schedule(self, offset_ms: float, callback: Callable[[], None]) -> TriggerHandle:
        """Register ``callback`` to fire when the clock reaches ``offset_ms``."""
        if not math.isfinite(offset_ms) or offset_ms < 0:
            raise ValueError(f"offset must be a non-negative number, got {offset_ms!r}")
        handle = TriggerHandle(offset=offset_ms, seq=next(self._counter), callback=callback)
        heapq.heappush(self._queue, (handle.offset, handle.seq, handle))
        return handle

    def advance(self, now_ms: float) -> int:
        """Move the clock to ``now_ms`` and fire every trigger now due.

        A clock that moves backwards is held at its latest value. Returns the
        number of callbacks fired.
        """
        if now_ms > self._now:
            self._now = now_ms
        fired = 0
        while self._queue and self._queue[0][0] <= self._now + _EPSILON:
            _, _, handle = heapq.heappop(self._queue)
            # Cancelled by an earlier callback in this batch.
            if handle.cancelled:
                continue
            handle.fired = True
            fired += 1
            handle.callback()
        return fired

    def cancel(self, handle: TriggerHandle) -> bool:
        """Cancel one trigger. Returns False if it already fired or was cancelled."""
        if not handle.pending:
            return False
        handle.cancelled = True
        return True

    def cancel_all(self, handles: Iterable[TriggerHandle] | None = None) -> int:
        """Cancel the given triggers, or every pending one when ``handles`` is None.

        Safe to call repeatedly and after some triggers have fired.
        """
        if handles is None:
            targets = [entry[2] for entry in self._queue]
            self._queue.clear()
        else:
            targets = list(handles)
        cancelled = sum(1 for handle in targets if self.cancel(handle))
        if cancelled:
            logger.debug("released %d pending trigger(s)", cancelled)
        return cancelled

    def pending(self) -> list[TriggerHandle]:
        """Pending triggers in firing order."""
        return [entry[2] for entry in sorted(self._queue) if entry[2].pending]

    def next_due(self) -> float | None:
        """Offset of the next pending trigger, or None."""
        for offset, _, handle in sorted(self._queue):
            if handle.pending:
                return offset
        return None
