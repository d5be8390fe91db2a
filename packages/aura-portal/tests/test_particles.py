"""Tests for the dissolve particle field."""
from __future__ import annotations

import random
from unittest.mock import patch

import pytest

from aura_portal.motion import EASINGS, keyframe
from aura_portal.particles import default_rng, generate_particles, particle_state

GRADIENT = ("#ff00aa", "#00ccff")
VIEWPORT = (1000.0, 600.0)


class TestGenerate:
    def test_default_batch(self) -> None:
        particles = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(1))
        assert len(particles) == 50
        assert [p.index for p in particles] == list(range(50))

    def test_destinations_within_spread(self) -> None:
        particles = generate_particles(GRADIENT, VIEWPORT, count=500, rng=random.Random(2))
        for p in particles:
            dx, dy = p.destination
            assert abs(dx) <= 0.15 * VIEWPORT[0]
            assert abs(dy) <= 0.15 * VIEWPORT[1]
            assert p.origin == (0.0, 0.0)

    def test_dispersal_centered_on_origin(self) -> None:
        particles = generate_particles(GRADIENT, VIEWPORT, count=2000, rng=random.Random(3))
        mean_x = sum(p.destination[0] for p in particles) / len(particles)
        mean_y = sum(p.destination[1] for p in particles) / len(particles)
        # Uniform on [-150, 150]: standard error of the mean is ~1.9px.
        assert abs(mean_x) < 15
        assert abs(mean_y) < 10
        assert any(p.destination[0] < 0 for p in particles)
        assert any(p.destination[0] > 0 for p in particles)

    def test_stagger_and_curves(self) -> None:
        particles = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(4))
        assert particles[0].delay == 0
        assert particles[10].delay == pytest.approx(0.1)
        assert particles[49].delay == pytest.approx(0.49)
        assert particles[3].opacity == (1.0, 1.0, 0.0)
        assert particles[3].scale == (1.0, 1.5, 0.0)
        assert particles[3].colors == GRADIENT

    def test_seeded_rng_is_reproducible(self) -> None:
        a = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(9))
        b = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(9))
        assert a == b

    def test_zero_count(self) -> None:
        assert generate_particles(GRADIENT, VIEWPORT, count=0) == []

    def test_negative_count(self) -> None:
        with pytest.raises(ValueError):
            generate_particles(GRADIENT, VIEWPORT, count=-1)


class TestDefaultRng:
    def test_platform_rng(self) -> None:
        assert isinstance(default_rng(), random.SystemRandom)

    def test_falls_back_when_platform_source_missing(self) -> None:
        with patch("random._urandom", side_effect=NotImplementedError):
            rng = default_rng()
        assert not isinstance(rng, random.SystemRandom)
        assert rng.random() == random.Random(0).random()

    def test_generation_never_fails_without_platform_source(self) -> None:
        with patch("random._urandom", side_effect=NotImplementedError):
            particles = generate_particles(GRADIENT, VIEWPORT, count=5)
        assert len(particles) == 5


class TestParticleState:
    def test_before_delay_at_origin(self) -> None:
        spec = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(5))[20]
        frame = particle_state(spec, 0.1)
        assert (frame.x, frame.y) == (0.0, 0.0)
        assert frame.opacity == 1.0
        assert frame.scale == 1.0

    def test_end_of_life_at_destination_and_invisible(self) -> None:
        spec = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(5))[20]
        frame = particle_state(spec, spec.delay + spec.lifetime + 0.01)
        assert frame.x == pytest.approx(spec.destination[0])
        assert frame.y == pytest.approx(spec.destination[1])
        assert frame.opacity == 0.0
        assert frame.scale == 0.0

    def test_peak_scale_mid_flight(self) -> None:
        spec = generate_particles(GRADIENT, VIEWPORT, rng=random.Random(5))[0]
        # ease_out(t) == 0.5 at t = 1 - sqrt(0.5)
        t = (1 - 0.5 ** 0.5) * spec.lifetime
        frame = particle_state(spec, t)
        assert frame.scale == pytest.approx(1.5)
        assert frame.opacity == pytest.approx(1.0)


class TestMotion:
    def test_keyframe_endpoints(self) -> None:
        assert keyframe((1.0, 1.5, 0.0), 0.0) == 1.0
        assert keyframe((1.0, 1.5, 0.0), 0.5) == 1.5
        assert keyframe((1.0, 1.5, 0.0), 1.0) == 0.0
        assert keyframe((1.0, 1.5, 0.0), 0.75) == pytest.approx(0.75)

    def test_keyframe_single_value(self) -> None:
        assert keyframe((3.0,), 0.4) == 3.0

    def test_easings_hit_endpoints(self) -> None:
        for fn in EASINGS.values():
            assert fn(0.0) == 0.0
            assert fn(1.0) == 1.0
