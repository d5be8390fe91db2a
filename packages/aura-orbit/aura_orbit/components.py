"""Sphere input and render output components."""
from __future__ import annotations

from dataclasses import dataclass

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class InteractionState:
    hovered: bool = False
    selected: bool = False

    @property
    def active(self) -> bool:
        return self.hovered or self.selected


@dataclass
class DreamSphere:
    """Host-supplied inputs for one visualized goal, refreshed every tick.

    ``progress`` is a percentage; values outside [0, 100] are clamped when
    the sphere is animated.
    """

    position: Vec3 = (0.0, 0.0, 0.0)
    size: float = 1.0
    color: str = "#ffffff"
    glow: float = 1.0
    progress: float = 0.0
    title: str = ""
    selected: bool = False
    hovered: bool = False

    @property
    def interaction(self) -> InteractionState:
        return InteractionState(hovered=self.hovered, selected=self.selected)


@dataclass(frozen=True)
class RenderParameters:
    """Everything the rendering layer needs to draw a sphere for one tick.

    ``rotation`` is ``(x, y)`` in radians for the orbiting particle group.
    ``ring_opacity`` is None while the outer glow ring is hidden.
    """

    position: Vec3
    color: str
    scale: float
    rotation: tuple[float, float]
    emissive_intensity: float
    orbit: tuple[Vec3, ...]
    label_visible: bool
    label: str
    progress_label: str | None
    light_intensity: float
    light_distance: float
    ring_opacity: float | None
    ring_radii: tuple[float, float]
