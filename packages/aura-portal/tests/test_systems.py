"""Tests for make_portal_system driven by the engine."""
from __future__ import annotations

import random

from aura import Engine

from aura_portal import ArchetypeTheme, TransitionStateMachine, make_portal_system

THEME = ArchetypeTheme(emoji="*", title="The Healer", gradient=("#10b981", "#3b82f6"))


def test_engine_drives_stages_and_stops() -> None:
    engine = Engine(tps=20, seed=1)
    ticks: list[tuple[int, str]] = []
    routes: list[str] = []
    machine = TransitionStateMachine(
        "Healthy and whole", THEME, rng=random.Random(0), navigate=routes.append,
    )

    engine.add_system(make_portal_system(
        machine,
        on_stage_change=lambda s: ticks.append((engine.clock.tick_number, s.value)),
        on_terminal=lambda: ticks.append((engine.clock.tick_number, "terminal")),
    ))
    engine.run(200)

    # Started on tick 1; 50ms per tick.
    assert ticks == [
        (1, "text"),
        (17, "dissolve"),
        (27, "symbol"),
        (37, "expand"),
        (47, "complete"),
        (51, "terminal"),
    ]
    assert routes == ["/universe"]
    assert engine.clock.tick_number == 51


def test_keep_running_after_finish() -> None:
    engine = Engine(tps=20, seed=1)
    machine = TransitionStateMachine("x", THEME, duration=100)
    engine.add_system(make_portal_system(machine, stop_on_finish=False))
    engine.run(10)
    assert machine.finished
    assert engine.clock.tick_number == 10


def test_stopped_machine_is_skipped() -> None:
    engine = Engine(tps=20, seed=1)
    machine = TransitionStateMachine("x", THEME)
    seen: list[str] = []
    engine.add_system(make_portal_system(machine, on_stage_change=lambda s: seen.append(s.value)))
    engine.run(5)
    machine.stop()
    engine.run(100)
    assert seen == ["text"]
    assert not machine.finished
