"""Engine - render loop, pacing, and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Callable

from aura.clock import Clock
from aura.types import System, TickContext
from aura.world import World

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, tps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def _run_hooks(self, hooks: list[Callable[[World, TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in hooks:
            hook(self._world, ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        try:
            for _ in range(n):
                self._tick()
                if self._stop_requested:
                    logger.debug("stop requested at tick %d", self._clock.tick_number)
                    break
        finally:
            self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        dt = self._clock.dt
        try:
            while not self._stop_requested:
                start = time.monotonic()
                self._tick()
                if self._stop_requested:
                    break
                elapsed = time.monotonic() - start
                sleep_time = dt - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)
                else:
                    logger.debug(
                        "tick %d overran its %.4fs budget by %.4fs",
                        self._clock.tick_number, dt, -sleep_time,
                    )
        finally:
            self._run_hooks(self._stop_hooks)
