"""FrameAnimator - per-tick sphere animation."""
from __future__ import annotations

import math
from typing import Callable

from aura_orbit.components import DreamSphere, RenderParameters, Vec3
from aura_orbit.mapping import clamp_progress, map_progress
from aura_orbit.orbit import orbit_positions

SMOOTHING = 0.1
PULSE_AMPLITUDE = 0.08
HIGHLIGHT_BOOST = 2.0
RING_MIN_PROGRESS = 25.0


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


class FrameAnimator:
    """Animates one sphere. Holds the smoothed emissive intensity across ticks.

    When no ``initial_intensity`` is given the first tick starts from the
    sphere's own emissive intensity, as a freshly created material would.
    """

    def __init__(
        self,
        initial_intensity: float | None = None,
        on_click: Callable[[], None] | None = None,
        on_pointer_over: Callable[[], None] | None = None,
        on_pointer_out: Callable[[], None] | None = None,
    ) -> None:
        self._intensity = initial_intensity
        self._on_click = on_click
        self._on_pointer_over = on_pointer_over
        self._on_pointer_out = on_pointer_out
        self._orbit_key: tuple[int, float] | None = None
        self._orbit: tuple[Vec3, ...] = ()

    @property
    def intensity(self) -> float | None:
        return self._intensity

    def reset(self, intensity: float | None = None) -> None:
        self._intensity = intensity

    # --- Event sinks ---

    def click(self) -> None:
        if self._on_click is not None:
            self._on_click()

    def pointer_over(self) -> None:
        if self._on_pointer_over is not None:
            self._on_pointer_over()

    def pointer_out(self) -> None:
        if self._on_pointer_out is not None:
            self._on_pointer_out()

    # --- Tick ---

    def _orbit_for(self, particle_count: int, size: float) -> tuple[Vec3, ...]:
        key = (particle_count, size)
        if key != self._orbit_key:
            self._orbit = tuple(orbit_positions(particle_count, size))
            self._orbit_key = key
        return self._orbit

    def advance(self, elapsed: float, sphere: DreamSphere) -> RenderParameters:
        """Animate ``sphere`` at ``elapsed`` seconds of render-clock time."""
        visual = map_progress(sphere.progress, sphere.glow)
        interaction = sphere.interaction

        pulse = 1 + math.sin(elapsed * visual.pulse_speed) * PULSE_AMPLITUDE
        rotation = (
            math.sin(elapsed * 0.2) * 0.3,
            elapsed * visual.rotation_speed * 0.3,
        )

        target = visual.emissive_intensity
        if interaction.active:
            target *= HIGHLIGHT_BOOST
        current = self._intensity if self._intensity is not None else visual.emissive_intensity
        self._intensity = lerp(current, target, SMOOTHING)

        progress = clamp_progress(sphere.progress)
        progress_label = None
        if interaction.active and progress > 0:
            progress_label = f"{progress:g}%"
        ring_opacity = None
        if progress > RING_MIN_PROGRESS:
            ring_opacity = 0.1 + progress / 100 * 0.2

        return RenderParameters(
            position=sphere.position,
            color=sphere.color,
            scale=pulse * visual.size_multiplier,
            rotation=rotation,
            emissive_intensity=self._intensity,
            orbit=self._orbit_for(visual.particle_count, sphere.size),
            label_visible=interaction.active,
            label=sphere.title,
            progress_label=progress_label,
            light_intensity=visual.glow_multiplier * 3,
            light_distance=sphere.size * 8,
            ring_opacity=ring_opacity,
            ring_radii=(sphere.size * 1.2, sphere.size * 1.4),
        )
