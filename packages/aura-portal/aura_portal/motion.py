"""Easing functions and keyframe interpolation for stage and particle animation."""
from __future__ import annotations

from typing import Callable, Sequence


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def clamp01(t: float) -> float:
    return min(max(t, 0.0), 1.0)


def keyframe(values: Sequence[float], t: float) -> float:
    """Interpolate evenly spaced keyframes at ``t`` in [0, 1]."""
    if not values:
        raise ValueError("keyframe needs at least one value")
    if len(values) == 1:
        return values[0]
    pos = clamp01(t) * (len(values) - 1)
    i = min(int(pos), len(values) - 2)
    frac = pos - i
    return values[i] + (values[i + 1] - values[i]) * frac


def ease(name: str, t: float) -> float:
    """Apply a named easing to ``t`` clamped to [0, 1]. Unknown names raise KeyError."""
    return EASINGS[name](clamp01(t))
