"""Particle field spawned when the manifestation text dissolves."""
from __future__ import annotations

import logging
import random
from typing import Sequence

from aura_portal.motion import clamp01, ease_out, keyframe
from aura_portal.types import ParticleFrame, ParticleSpec

logger = logging.getLogger(__name__)

_FALLBACK_SEED = 0


def default_rng() -> random.Random:
    """Platform randomness, or a fixed-seed generator when none is available."""
    rng = random.SystemRandom()
    try:
        rng.random()
    except (NotImplementedError, OSError):
        logger.warning("no platform randomness source; particle field will be deterministic")
        return random.Random(_FALLBACK_SEED)
    return rng


def generate_particles(
    gradient: Sequence[str],
    viewport: tuple[float, float],
    count: int = 50,
    rng: random.Random | None = None,
    spread: float = 0.3,
    stagger: float = 0.01,
    lifetime: float = 0.5,
) -> list[ParticleSpec]:
    """Scatter ``count`` particles from the origin across the viewport.

    Each destination is uniform within ``spread`` of the viewport extent,
    centered on the origin. Particle ``i`` starts ``i * stagger`` seconds
    after the batch.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    width, height = viewport
    if rng is None:
        rng = default_rng()
    colors = (gradient[0], gradient[1])

    particles = []
    for i in range(count):
        dx = (rng.random() - 0.5) * spread * width
        dy = (rng.random() - 0.5) * spread * height
        particles.append(ParticleSpec(
            index=i,
            destination=(dx, dy),
            delay=i * stagger,
            lifetime=lifetime,
            colors=colors,
        ))
    return particles


def particle_state(spec: ParticleSpec, t: float) -> ParticleFrame:
    """Where a particle is ``t`` seconds after its batch started.

    Position eases out toward the destination; opacity and scale follow
    their keyframes over the same eased progress.
    """
    local = clamp01((t - spec.delay) / spec.lifetime)
    u = ease_out(local)
    ox, oy = spec.origin
    dx, dy = spec.destination
    return ParticleFrame(
        x=ox + (dx - ox) * u,
        y=oy + (dy - oy) * u,
        opacity=keyframe(spec.opacity, u),
        scale=keyframe(spec.scale, u),
    )
