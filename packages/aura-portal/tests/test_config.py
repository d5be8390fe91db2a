"""Tests for PortalConfig validation."""
from __future__ import annotations

import pytest

from aura_portal.config import PortalConfig


def test_defaults() -> None:
    cfg = PortalConfig()
    assert cfg.duration_ms == 2500
    assert cfg.particle_count == 50
    assert cfg.navigation_target == "/universe"
    assert cfg.text_limit == 60


@pytest.mark.parametrize("kwargs", [
    {"duration_ms": 0},
    {"duration_ms": -1},
    {"duration_ms": float("inf")},
    {"particle_count": -1},
    {"particle_spread": -0.1},
    {"particle_stagger": -0.01},
    {"particle_lifetime": 0},
    {"text_limit": 2},
])
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        PortalConfig(**kwargs)


def test_frozen() -> None:
    cfg = PortalConfig()
    with pytest.raises(AttributeError):
        cfg.particle_count = 10  # type: ignore[misc]
