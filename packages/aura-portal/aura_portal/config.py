"""Portal configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PortalConfig:
    """Immutable configuration for a portal transition.

    Attributes:
        duration_ms: Total transition length; stage onsets scale with it.
        particle_count: Particles spawned when the text dissolves.
        particle_spread: Fraction of the viewport the particles scatter across.
        particle_stagger: Seconds between consecutive particle start times.
        particle_lifetime: Seconds each particle animates for.
        navigation_target: Route requested when no completion callback is given.
        text_limit: Longest manifestation text shown without truncation.
    """

    duration_ms: float = 2500.0
    particle_count: int = 50
    particle_spread: float = 0.3
    particle_stagger: float = 0.01
    particle_lifetime: float = 0.5
    navigation_target: str = "/universe"
    text_limit: int = 60

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration_ms) or self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive and finite")
        if self.particle_count < 0:
            raise ValueError("particle_count must not be negative")
        if self.particle_spread < 0:
            raise ValueError("particle_spread must not be negative")
        if self.particle_stagger < 0:
            raise ValueError("particle_stagger must not be negative")
        if self.particle_lifetime <= 0:
            raise ValueError("particle_lifetime must be positive")
        if self.text_limit < 3:
            raise ValueError("text_limit must leave room for the ellipsis")
