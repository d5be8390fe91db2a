"""Portal transition renderer."""
from __future__ import annotations

import math

import pygame

from aura_portal import TransitionStage, TransitionStateMachine, ease, particle_state

from ui.constants import SCREEN_H, SCREEN_W, TEXT_COLOR, TEXT_DIM, hex_to_rgb


def _blend(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return tuple(int(x + (y - x) * t) for x, y in zip(a, b))  # type: ignore[return-value]


def draw_portal(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    machine: TransitionStateMachine,
    stage_elapsed: float,
) -> None:
    """Draw the current stage. ``stage_elapsed`` is seconds since the stage began."""
    stage = machine.stage
    visual = machine.visual
    if stage is None or visual is None:
        return
    cx, cy = SCREEN_W // 2, SCREEN_H // 2
    first, second = (hex_to_rgb(c) for c in machine.archetype.gradient)
    t = ease(visual.easing, stage_elapsed / visual.transition)

    if stage is TransitionStage.TEXT:
        color = _blend((0, 0, 0), _blend(first, second, 0.5), t)
        text = fonts["title"].render(machine.display_text, True, color)
        scale = 0.8 + 0.2 * t
        size = (max(1, int(text.get_width() * scale)), max(1, int(text.get_height() * scale)))
        text = pygame.transform.smoothscale(text, size)
        surface.blit(text, text.get_rect(center=(cx, cy)))

    elif stage is TransitionStage.DISSOLVE:
        for spec in machine.particles:
            frame = particle_state(spec, stage_elapsed)
            if frame.opacity <= 0 or frame.scale <= 0:
                continue
            color = _blend(first, second, spec.index / max(len(machine.particles) - 1, 1))
            color = _blend((0, 0, 0), color, frame.opacity)
            pygame.draw.circle(
                surface, color, (int(cx + frame.x), int(cy + frame.y)), max(1, int(4 * frame.scale)),
            )

    elif stage in (TransitionStage.SYMBOL, TransitionStage.EXPAND):
        if stage is TransitionStage.SYMBOL:
            scale, opacity, spin = t, t, 0.0
        else:
            scale = 1 + (visual.scale - 1) * t
            opacity = 1 - t
            spin = math.radians(visual.rotation) * t
        pulse = 1 + 0.1 * math.sin(stage_elapsed * math.pi * 2)
        outer = max(1, int(128 * scale * (1 + 0.2 * math.sin(stage_elapsed * math.pi))))
        inner = max(1, int(96 * scale * (1 - 0.1 * math.sin(stage_elapsed * math.pi * 4 / 3))))
        pygame.draw.circle(surface, _blend((0, 0, 0), first, opacity), (cx, cy), outer, 4)
        pygame.draw.circle(surface, _blend((0, 0, 0), second, opacity), (cx, cy), inner, 2)
        glyph = fonts["symbol"].render(machine.archetype.emoji, True, _blend((0, 0, 0), TEXT_COLOR, opacity))
        glyph = pygame.transform.rotozoom(glyph, -math.degrees(spin), max(scale * pulse, 0.01))
        surface.blit(glyph, glyph.get_rect(center=(cx, cy)))
        title = fonts["body"].render(machine.archetype.title.upper(), True, _blend((0, 0, 0), TEXT_DIM, opacity))
        surface.blit(title, title.get_rect(center=(cx, cy + 170)))

    if machine.status_text:
        status = fonts["small"].render(machine.status_text.upper(), True, TEXT_DIM)
        surface.blit(status, status.get_rect(center=(cx, SCREEN_H - 48)))
