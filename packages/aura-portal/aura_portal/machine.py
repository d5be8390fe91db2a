"""TransitionStateMachine - the timed portal sequence.

Words -> particles -> symbol -> universe. Every stage trigger and the
terminal trigger are registered on one scheduler when the machine starts,
so a single ``stop()`` releases all of them.
"""
from __future__ import annotations

import logging
import random
from functools import partial
from typing import Callable

from aura_portal.config import PortalConfig
from aura_portal.particles import generate_particles
from aura_portal.scheduler import StageScheduler, TriggerHandle
from aura_portal.text import display_text
from aura_portal.types import (
    STAGE_ORDER,
    STAGE_VISUALS,
    ArchetypeTheme,
    ParticleSpec,
    StageVisual,
    TransitionError,
    TransitionStage,
    TransitionTimeline,
)

logger = logging.getLogger(__name__)

StageCallback = Callable[[TransitionStage], None]


class TransitionStateMachine:
    """Narrates the portal stages for one manifestation.

    The machine is single-use: it can be started once and stopped any number
    of times. On the terminal trigger it calls ``on_complete`` when one was
    given, otherwise it requests navigation to the configured target through
    ``navigate``.
    """

    def __init__(
        self,
        text: str,
        archetype: ArchetypeTheme,
        *,
        duration: float | None = None,
        timeline: TransitionTimeline | None = None,
        on_complete: Callable[[], None] | None = None,
        navigate: Callable[[str], None] | None = None,
        config: PortalConfig | None = None,
        viewport: tuple[float, float] = (1280.0, 720.0),
        rng: random.Random | None = None,
        scheduler: StageScheduler | None = None,
    ) -> None:
        self._config = config if config is not None else PortalConfig()
        if timeline is None:
            timeline = TransitionTimeline(
                duration if duration is not None else self._config.duration_ms
            )
        elif duration is not None and duration != timeline.duration:
            raise ValueError("duration conflicts with the given timeline")
        self._timeline = timeline
        self._text = text
        self._archetype = archetype
        self._on_complete = on_complete
        self._navigate = navigate
        self._viewport = viewport
        self._rng = rng
        self._scheduler = scheduler if scheduler is not None else StageScheduler()

        self._stage: TransitionStage | None = None
        self._particles: list[ParticleSpec] = []
        self._handles: list[TriggerHandle] = []
        self._origin = 0.0
        self._on_stage_change: StageCallback | None = None
        self._on_terminal: Callable[[], None] | None = None
        self._started = False
        self._stopped = False
        self._finished = False
        self._requested_route: str | None = None

    # --- Queries ---

    @property
    def timeline(self) -> TransitionTimeline:
        return self._timeline

    @property
    def archetype(self) -> ArchetypeTheme:
        return self._archetype

    @property
    def scheduler(self) -> StageScheduler:
        return self._scheduler

    @property
    def stage(self) -> TransitionStage | None:
        return self._stage

    @property
    def started(self) -> bool:
        return self._started

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def particles(self) -> tuple[ParticleSpec, ...]:
        """The dissolve batch. Empty outside the DISSOLVE stage."""
        return tuple(self._particles)

    @property
    def display_text(self) -> str:
        return display_text(self._text, self._config.text_limit)

    @property
    def visual(self) -> StageVisual | None:
        if self._stage is None:
            return None
        return STAGE_VISUALS[self._stage]

    @property
    def status_text(self) -> str:
        visual = self.visual
        return visual.status if visual is not None else ""

    @property
    def requested_route(self) -> str | None:
        """Route navigation was requested to, if the terminal fired without ``on_complete``."""
        return self._requested_route

    # --- Lifecycle ---

    def start(
        self,
        on_stage_change: StageCallback | None = None,
        on_terminal: Callable[[], None] | None = None,
    ) -> None:
        """Enter TEXT and register every later stage and the terminal trigger.

        Raises TransitionError if the machine was already started or stopped.
        """
        if self._started:
            raise TransitionError("transition already started; machines are single-use")
        if self._stopped:
            raise TransitionError("transition was stopped; machines are single-use")
        self._started = True
        self._on_stage_change = on_stage_change
        self._on_terminal = on_terminal
        self._origin = self._scheduler.now

        for stage, offset in self._timeline.onsets()[1:]:
            self._handles.append(
                self._scheduler.schedule(self._origin + offset, partial(self._enter, stage))
            )
        self._handles.append(
            self._scheduler.schedule(self._origin + self._timeline.duration, self._finish)
        )
        logger.debug(
            "portal started for %r (duration %.0fms)",
            self._archetype.title, self._timeline.duration,
        )
        self._enter(TransitionStage.TEXT)

    def advance(self, now_ms: float) -> int:
        """Drive the machine to ``now_ms`` milliseconds after ``start()``."""
        if not self._started:
            raise TransitionError("advance() called before start()")
        if self._stopped:
            return 0
        return self._scheduler.advance(self._origin + now_ms)

    def stop(self) -> None:
        """Cancel every trigger that has not fired. Idempotent."""
        if self._stopped:
            return
        self._stopped = True
        released = self._scheduler.cancel_all(self._handles)
        self._particles = []
        if released:
            logger.debug(
                "portal stopped in stage %s; %d trigger(s) released",
                self._stage.value if self._stage else None, released,
            )

    def __enter__(self) -> TransitionStateMachine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # --- Trigger callbacks ---

    def _enter(self, stage: TransitionStage) -> None:
        if self._stopped:
            return
        expected = STAGE_ORDER[0] if self._stage is None else self._next_stage(self._stage)
        if stage is not expected:
            raise TransitionError(f"stage {stage.value} entered out of order")
        self._stage = stage
        if stage is TransitionStage.DISSOLVE:
            self._particles = generate_particles(
                self._archetype.gradient,
                self._viewport,
                count=self._config.particle_count,
                rng=self._rng,
                spread=self._config.particle_spread,
                stagger=self._config.particle_stagger,
                lifetime=self._config.particle_lifetime,
            )
        else:
            self._particles = []
        logger.debug("portal stage -> %s", stage.value)
        if self._on_stage_change is not None:
            self._on_stage_change(stage)

    def _finish(self) -> None:
        if self._stopped or self._finished:
            return
        self._finished = True
        if self._on_terminal is not None:
            self._on_terminal()
        if self._on_complete is not None:
            logger.info("portal complete")
            self._on_complete()
            return
        target = self._config.navigation_target
        self._requested_route = target
        logger.info("portal complete - entering %s", target)
        if self._navigate is not None:
            self._navigate(target)

    @staticmethod
    def _next_stage(stage: TransitionStage) -> TransitionStage | None:
        i = STAGE_ORDER.index(stage)
        return STAGE_ORDER[i + 1] if i + 1 < len(STAGE_ORDER) else None
