"""Satellite positions on the tilted orbit around a sphere."""
from __future__ import annotations

import math

from aura_orbit.components import Vec3

ORBIT_RADIUS_FACTOR = 1.5


def orbit_positions(particle_count: int, size: float) -> list[Vec3]:
    """Spread ``particle_count`` satellites evenly around a sphere of ``size``.

    The curve is a circle of radius ``1.5 * size`` in x/z, bobbing in y at
    half the angular rate and half the radius.
    """
    radius = size * ORBIT_RADIUS_FACTOR
    positions: list[Vec3] = []
    for i in range(particle_count):
        angle = (i / particle_count) * math.pi * 2
        positions.append((
            math.cos(angle) * radius,
            math.sin(angle * 0.5) * radius * 0.5,
            math.sin(angle) * radius,
        ))
    return positions
