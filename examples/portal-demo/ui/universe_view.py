"""Dream universe renderer: spheres, orbits, rings and labels."""
from __future__ import annotations

import math

import pygame

from aura import World
from aura_orbit import DreamSphere, RenderParameters

from ui.constants import (
    LABEL_OUTLINE,
    SCREEN_H,
    SCREEN_W,
    SPHERE_PIXELS,
    TEXT_COLOR,
    WORLD_SCALE,
    hex_to_rgb,
)


def to_screen(x: float, y: float) -> tuple[int, int]:
    return int(SCREEN_W / 2 + x * WORLD_SCALE), int(SCREEN_H / 2 - y * WORLD_SCALE)


def _rotate(point: tuple[float, float, float], rot_x: float, rot_y: float) -> tuple[float, float, float]:
    x, y, z = point
    cos_y, sin_y = math.cos(rot_y), math.sin(rot_y)
    x, z = x * cos_y + z * sin_y, -x * sin_y + z * cos_y
    cos_x, sin_x = math.cos(rot_x), math.sin(rot_x)
    y, z = y * cos_x - z * sin_x, y * sin_x + z * cos_x
    return x, y, z


def sphere_radius(sphere: DreamSphere, params: RenderParameters) -> int:
    return max(2, int(SPHERE_PIXELS * sphere.size * params.scale))


def draw_universe(surface: pygame.Surface, fonts: dict[str, pygame.font.Font], world: World) -> None:
    for _, (sphere, params) in world.query(DreamSphere, RenderParameters):
        color = hex_to_rgb(params.color)
        cx, cy = to_screen(params.position[0], params.position[1])
        radius = sphere_radius(sphere, params)

        # Light halo grows with the glow multiplier.
        halo = pygame.Surface((radius * 6, radius * 6), pygame.SRCALPHA)
        alpha = min(120, int(12 * params.light_intensity))
        pygame.draw.circle(halo, (*color, alpha), (radius * 3, radius * 3), int(radius * 1.8))
        surface.blit(halo, halo.get_rect(center=(cx, cy)))

        if params.ring_opacity is not None:
            inner, outer = (int(r * WORLD_SCALE) for r in params.ring_radii)
            ring = pygame.Surface((outer * 2 + 2, outer * 2 + 2), pygame.SRCALPHA)
            pygame.draw.circle(ring, (*color, int(255 * params.ring_opacity)), (outer + 1, outer + 1), outer, outer - inner)
            surface.blit(ring, ring.get_rect(center=(cx, cy)))

        shade = min(1.0, 0.4 + params.emissive_intensity * 0.2)
        pygame.draw.circle(surface, tuple(int(c * shade) for c in color), (cx, cy), radius)

        rot_x, rot_y = params.rotation
        for pos in params.orbit:
            x, y, z = _rotate(pos, rot_x, rot_y)
            px, py = to_screen(params.position[0] + x, params.position[1] + y)
            pygame.draw.circle(surface, color, (px, py), 3 if z >= 0 else 2)

        if params.label_visible:
            _draw_label(surface, fonts["body"], params.label, (cx, cy - radius - 24), TEXT_COLOR)
            if params.progress_label is not None:
                _draw_label(surface, fonts["small"], params.progress_label, (cx, cy - radius - 44), color)


def _draw_label(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    center: tuple[int, int],
    color: tuple[int, int, int],
) -> None:
    outline = font.render(text, True, LABEL_OUTLINE)
    for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        surface.blit(outline, outline.get_rect(center=(center[0] + dx, center[1] + dy)))
    label = font.render(text, True, color)
    surface.blit(label, label.get_rect(center=center))
