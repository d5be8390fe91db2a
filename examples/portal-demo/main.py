"""Portal Demo — the onboarding portal followed by the dream universe.

Exercises aura, aura-portal, and aura-orbit.

Controls:
  Esc     Quit (tears the portal down if it is still running)
  R       Replay the portal
  Up/Down Raise/lower progress of the selected dream
  Click   Select a dream (universe)
"""
from __future__ import annotations

import logging
import sys

import pygame

from aura import Engine
from aura_orbit import DreamSphere, FrameAnimator, RenderParameters, make_frame_system
from aura_portal import ArchetypeTheme, TransitionStateMachine

from ui.constants import ARCHETYPE, BG_COLOR, DREAMS, FPS, MANIFESTATION, SCREEN_H, SCREEN_W, TPS
from ui.portal_view import draw_portal
from ui.universe_view import draw_universe, sphere_radius, to_screen

logger = logging.getLogger("portal-demo")


class DemoState:
    """Holds the engine, the running portal and the universe spheres."""

    def __init__(self) -> None:
        self.engine = Engine(tps=TPS, seed=42)
        self.mode = "portal"
        self.stage_started_at = 0.0
        self.selected: int | None = None
        self.hovered: int | None = None
        self.machine: TransitionStateMachine | None = None
        self.portal_origin_ms: float | None = None

        for dream in DREAMS:
            sphere = DreamSphere(
                position=dream["position"],
                size=1.0,
                color=dream["color"],
                glow=1.0,
                progress=dream["progress"],
                title=dream["title"],
            )
            eid = self.engine.world.spawn(sphere)
            self.engine.world.attach(eid, FrameAnimator(
                on_click=lambda eid=eid: self._select(eid),
                on_pointer_over=lambda eid=eid: self._hover(eid, True),
                on_pointer_out=lambda eid=eid: self._hover(eid, False),
            ))

        self.engine.add_system(make_frame_system())
        self.engine.add_system(self._portal_system)
        self.start_portal()

    def start_portal(self) -> None:
        if self.machine is not None:
            self.machine.stop()
        self.mode = "portal"
        self.machine = TransitionStateMachine(
            MANIFESTATION,
            ArchetypeTheme(**ARCHETYPE),
            on_complete=self._enter_universe,
            viewport=(SCREEN_W, SCREEN_H),
            rng=self.engine.random,
        )
        self.portal_origin_ms = None

    def _portal_system(self, world, ctx) -> None:
        machine = self.machine
        if machine is None or machine.stopped or machine.finished:
            return
        if self.portal_origin_ms is None:
            self.portal_origin_ms = ctx.elapsed_ms
            machine.start(on_stage_change=self._on_stage)
        machine.advance(ctx.elapsed_ms - self.portal_origin_ms)

    def _on_stage(self, stage) -> None:
        self.stage_started_at = self.engine.clock.elapsed
        logger.info("stage: %s", stage.value)

    def _enter_universe(self) -> None:
        self.mode = "universe"

    def _select(self, eid: int) -> None:
        self.selected = None if self.selected == eid else eid
        for other, (sphere,) in self.engine.world.query(DreamSphere):
            sphere.selected = other == self.selected

    def _hover(self, eid: int, hovered: bool) -> None:
        self.engine.world.get(eid, DreamSphere).hovered = hovered
        self.hovered = eid if hovered else None

    def sphere_at(self, pos: tuple[int, int]) -> int | None:
        for eid, (sphere, params) in self.engine.world.query(DreamSphere, RenderParameters):
            cx, cy = to_screen(params.position[0], params.position[1])
            radius = sphere_radius(sphere, params)
            if (pos[0] - cx) ** 2 + (pos[1] - cy) ** 2 <= radius ** 2:
                return eid
        return None

    def update_pointer(self, pos: tuple[int, int]) -> None:
        target = self.sphere_at(pos) if self.mode == "universe" else None
        if target == self.hovered:
            return
        if self.hovered is not None:
            self.engine.world.get(self.hovered, FrameAnimator).pointer_out()
        if target is not None:
            self.engine.world.get(target, FrameAnimator).pointer_over()

    def nudge_progress(self, delta: float) -> None:
        if self.selected is None:
            return
        sphere = self.engine.world.get(self.selected, DreamSphere)
        sphere.progress = min(max(sphere.progress + delta, 0), 100)

    def shutdown(self) -> None:
        if self.machine is not None:
            self.machine.stop()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Portal Demo — aura")
    clock = pygame.time.Clock()
    fonts = {
        "title": pygame.font.SysFont("sans", 34, bold=True),
        "symbol": pygame.font.SysFont("sans", 120, bold=True),
        "body": pygame.font.SysFont("sans", 20),
        "small": pygame.font.SysFont("monospace", 14),
    }

    state = DemoState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    try:
        while running:
            dt = clock.tick(FPS) / 1000.0
            accumulator += dt

            # --- Events ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        state.start_portal()
                    elif event.key == pygame.K_UP:
                        state.nudge_progress(5)
                    elif event.key == pygame.K_DOWN:
                        state.nudge_progress(-5)

                elif event.type == pygame.MOUSEMOTION:
                    state.update_pointer(event.pos)

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if state.mode == "universe" and state.hovered is not None:
                        state.engine.world.get(state.hovered, FrameAnimator).click()

            # --- Tick ---
            while accumulator >= tick_interval:
                state.engine.step()
                accumulator -= tick_interval

            # --- Render ---
            screen.fill(BG_COLOR)
            if state.mode == "portal" and state.machine is not None:
                stage_elapsed = state.engine.clock.elapsed - state.stage_started_at
                draw_portal(screen, fonts, state.machine, stage_elapsed)
            else:
                draw_universe(screen, fonts, state.engine.world)
            pygame.display.flip()
    finally:
        state.shutdown()
        pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
