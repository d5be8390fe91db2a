"""Core data types for the portal transition."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class TransitionStage(Enum):
    """Phases of the portal transition, in the order they are entered."""

    TEXT = "text"
    DISSOLVE = "dissolve"
    SYMBOL = "symbol"
    EXPAND = "expand"
    COMPLETE = "complete"


STAGE_ORDER: tuple[TransitionStage, ...] = tuple(TransitionStage)

# Stage onsets as percentages of the total duration. 800/1300/1800/2300 of 2500.
_ONSET_PERCENT: dict[TransitionStage, int] = {
    TransitionStage.TEXT: 0,
    TransitionStage.DISSOLVE: 32,
    TransitionStage.SYMBOL: 52,
    TransitionStage.EXPAND: 72,
    TransitionStage.COMPLETE: 92,
}


class TransitionError(RuntimeError):
    """Raised on lifecycle misuse of a transition (double start, advance before start)."""


@dataclass(frozen=True)
class TransitionTimeline:
    """Stage onset offsets in milliseconds, scaled from a total duration."""

    duration: float = 2500.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration) or self.duration <= 0:
            raise ValueError(f"duration must be positive and finite, got {self.duration!r}")

    def onset(self, stage: TransitionStage) -> float:
        return self.duration * _ONSET_PERCENT[stage] / 100

    @property
    def dissolve_at(self) -> float:
        return self.onset(TransitionStage.DISSOLVE)

    @property
    def symbol_at(self) -> float:
        return self.onset(TransitionStage.SYMBOL)

    @property
    def expand_at(self) -> float:
        return self.onset(TransitionStage.EXPAND)

    @property
    def complete_at(self) -> float:
        return self.onset(TransitionStage.COMPLETE)

    def onsets(self) -> list[tuple[TransitionStage, float]]:
        """All ``(stage, offset)`` pairs in entry order, starting with TEXT at 0."""
        return [(stage, self.onset(stage)) for stage in STAGE_ORDER]

    def stage_at(self, offset: float) -> TransitionStage:
        """Stage that is active ``offset`` ms into the transition."""
        current = TransitionStage.TEXT
        for stage, onset in self.onsets():
            if offset >= onset:
                current = stage
        return current


@dataclass(frozen=True)
class ArchetypeTheme:
    """Symbol, title and two-color gradient of the user's chosen archetype."""

    emoji: str
    title: str
    gradient: tuple[str, str]

    def __post_init__(self) -> None:
        if len(self.gradient) != 2:
            raise ValueError(
                f"gradient needs exactly two colors, got {len(self.gradient)}"
            )
        object.__setattr__(self, "gradient", tuple(self.gradient))


@dataclass(frozen=True)
class ParticleSpec:
    """One dissolving particle. Offsets in pixels, times in seconds."""

    index: int
    destination: tuple[float, float]
    delay: float
    lifetime: float
    colors: tuple[str, str]
    origin: tuple[float, float] = (0.0, 0.0)
    opacity: tuple[float, ...] = (1.0, 1.0, 0.0)
    scale: tuple[float, ...] = (1.0, 1.5, 0.0)


@dataclass(frozen=True)
class ParticleFrame:
    """Resolved state of a particle at one instant."""

    x: float
    y: float
    opacity: float
    scale: float


@dataclass(frozen=True)
class StageVisual:
    """Target look of the primary layer while a stage is active.

    ``rotation`` is in degrees, ``transition`` is how long the layer takes to
    reach this look, in seconds.
    """

    opacity: float
    scale: float
    rotation: float
    status: str
    easing: str
    transition: float


STAGE_VISUALS: dict[TransitionStage, StageVisual] = {
    TransitionStage.TEXT: StageVisual(
        opacity=1.0, scale=1.0, rotation=0.0,
        status="Your manifestation begins...", easing="ease_out", transition=0.5,
    ),
    TransitionStage.DISSOLVE: StageVisual(
        opacity=1.0, scale=1.0, rotation=0.0,
        status="Breaking through reality...", easing="ease_out", transition=0.5,
    ),
    TransitionStage.SYMBOL: StageVisual(
        opacity=1.0, scale=1.0, rotation=0.0,
        status="Your universe is forming...", easing="ease_out", transition=0.4,
    ),
    TransitionStage.EXPAND: StageVisual(
        opacity=0.0, scale=3.0, rotation=180.0,
        status="Entering your new reality...", easing="ease_in", transition=0.5,
    ),
    # Fade to black: opacity is the black overlay's.
    TransitionStage.COMPLETE: StageVisual(
        opacity=1.0, scale=1.0, rotation=0.0,
        status="", easing="linear", transition=0.3,
    ),
}
