"""aura - Fixed-timestep loop and entity storage for the aura visualization engine."""

from aura.clock import Clock
from aura.engine import Engine
from aura.types import DeadEntityError, EntityId, TickContext
from aura.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
]
