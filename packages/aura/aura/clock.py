"""Clock and TickContext for the fixed-timestep render loop."""

import random
from typing import Callable

from aura.types import TickContext


class Clock:
    """Counts fixed-length ticks. Tick 0 is before the first tick runs."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        # Divide rather than multiply by dt so whole-second ticks land exactly.
        return self._tick_number / self._tps

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
            random=rng,
        )
