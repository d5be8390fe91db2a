"""aura-orbit - Progress-driven sphere visuals for the aura engine."""
from __future__ import annotations

from aura_orbit.animator import FrameAnimator, lerp
from aura_orbit.components import DreamSphere, InteractionState, RenderParameters
from aura_orbit.mapping import VisualState, clamp_progress, map_progress
from aura_orbit.orbit import orbit_positions
from aura_orbit.systems import make_frame_system

__all__ = [
    "DreamSphere",
    "FrameAnimator",
    "InteractionState",
    "RenderParameters",
    "VisualState",
    "clamp_progress",
    "lerp",
    "make_frame_system",
    "map_progress",
    "orbit_positions",
]
