"""Progress -> visual parameters."""
from __future__ import annotations

import math
from dataclasses import dataclass

MIN_PARTICLES = 8
MAX_PARTICLES = 20


@dataclass(frozen=True)
class VisualState:
    size_multiplier: float
    glow_multiplier: float
    pulse_speed: float
    particle_count: int
    rotation_speed: float
    emissive_intensity: float


def clamp_progress(progress: float) -> float:
    """Clamp to [0, 100]. NaN counts as no progress."""
    if math.isnan(progress):
        return 0.0
    return min(max(float(progress), 0.0), 100.0)


def map_progress(progress: float, glow: float) -> VisualState:
    """Derive a sphere's look from its progress percentage and base glow.

    Cheap and pure; call it every tick instead of caching.
    """
    p = clamp_progress(progress) / 100
    return VisualState(
        size_multiplier=1 + p * 0.3,
        glow_multiplier=1 + p * 1.5,
        pulse_speed=1 + p * 2,
        particle_count=math.floor(MIN_PARTICLES + p * (MAX_PARTICLES - MIN_PARTICLES)),
        rotation_speed=0.5 + p,
        emissive_intensity=glow * (1 + p * 0.5),
    )
