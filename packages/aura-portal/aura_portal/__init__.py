"""aura-portal - Staged, cancellable portal transition for the aura engine."""
from __future__ import annotations

from aura_portal.config import PortalConfig
from aura_portal.machine import TransitionStateMachine
from aura_portal.motion import EASINGS, ease, keyframe
from aura_portal.particles import default_rng, generate_particles, particle_state
from aura_portal.scheduler import StageScheduler, TriggerHandle
from aura_portal.systems import make_portal_system
from aura_portal.text import display_text
from aura_portal.types import (
    STAGE_ORDER,
    STAGE_VISUALS,
    ArchetypeTheme,
    ParticleFrame,
    ParticleSpec,
    StageVisual,
    TransitionError,
    TransitionStage,
    TransitionTimeline,
)

__all__ = [
    "ArchetypeTheme",
    "EASINGS",
    "ParticleFrame",
    "ParticleSpec",
    "PortalConfig",
    "STAGE_ORDER",
    "STAGE_VISUALS",
    "StageScheduler",
    "StageVisual",
    "TransitionError",
    "TransitionStage",
    "TransitionStateMachine",
    "TransitionTimeline",
    "TriggerHandle",
    "default_rng",
    "display_text",
    "ease",
    "generate_particles",
    "keyframe",
    "make_portal_system",
    "particle_state",
]
