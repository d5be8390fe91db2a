"""Shared type aliases and protocols for the aura engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    """Read-only view of the clock handed to every system.

    ``elapsed`` is in seconds since the engine started ticking.
    """

    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from aura.world import World

System = Callable[["World", TickContext], None]
