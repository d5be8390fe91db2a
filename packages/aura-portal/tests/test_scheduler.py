"""Tests for aura_portal.scheduler — StageScheduler."""
from __future__ import annotations

import pytest

from aura_portal.scheduler import StageScheduler


class TestSchedule:
    def test_fires_when_due(self) -> None:
        s = StageScheduler()
        fired: list[str] = []
        s.schedule(100, lambda: fired.append("a"))
        assert s.advance(99) == 0
        assert fired == []
        assert s.advance(100) == 1
        assert fired == ["a"]

    def test_fires_once(self) -> None:
        s = StageScheduler()
        fired: list[str] = []
        handle = s.schedule(10, lambda: fired.append("a"))
        s.advance(20)
        s.advance(30)
        assert fired == ["a"]
        assert handle.fired
        assert not handle.pending

    def test_order_by_offset_then_registration(self) -> None:
        s = StageScheduler()
        fired: list[str] = []
        s.schedule(300, lambda: fired.append("late"))
        s.schedule(100, lambda: fired.append("early"))
        s.schedule(200, lambda: fired.append("tie-1"))
        s.schedule(200, lambda: fired.append("tie-2"))
        s.advance(1000)
        assert fired == ["early", "tie-1", "tie-2", "late"]

    def test_zero_offset_fires_on_first_advance(self) -> None:
        s = StageScheduler()
        fired: list[int] = []
        s.schedule(0, lambda: fired.append(1))
        s.advance(0)
        assert fired == [1]

    @pytest.mark.parametrize("offset", [-1, float("nan"), float("inf")])
    def test_invalid_offset(self, offset: float) -> None:
        with pytest.raises(ValueError):
            StageScheduler().schedule(offset, lambda: None)

    def test_clock_never_moves_backwards(self) -> None:
        s = StageScheduler()
        s.advance(500)
        s.advance(100)
        assert s.now == 500

    def test_callback_may_schedule_due_trigger(self) -> None:
        s = StageScheduler()
        fired: list[str] = []

        def chain() -> None:
            fired.append("first")
            s.schedule(50, lambda: fired.append("second"))

        s.schedule(10, chain)
        s.advance(100)
        assert fired == ["first", "second"]

    def test_float_jitter_tolerated(self) -> None:
        s = StageScheduler()
        fired: list[int] = []
        s.schedule(1300, lambda: fired.append(1))
        s.advance(1299.9999999999998)
        assert fired == [1]


class TestCancel:
    def test_cancel_prevents_fire(self) -> None:
        s = StageScheduler()
        fired: list[str] = []
        handle = s.schedule(10, lambda: fired.append("a"))
        assert s.cancel(handle) is True
        s.advance(100)
        assert fired == []
        assert handle.cancelled

    def test_cancel_after_fire_is_noop(self) -> None:
        s = StageScheduler()
        handle = s.schedule(10, lambda: None)
        s.advance(10)
        assert s.cancel(handle) is False
        assert not handle.cancelled

    def test_cancel_all_is_idempotent(self) -> None:
        s = StageScheduler()
        handles = [s.schedule(t, lambda: None) for t in (10, 20, 30)]
        s.advance(15)
        assert s.cancel_all(handles) == 2
        assert s.cancel_all(handles) == 0
        assert s.pending() == []

    def test_cancel_all_without_handles_clears_queue(self) -> None:
        s = StageScheduler()
        fired: list[int] = []
        for t in (10, 20):
            s.schedule(t, lambda: fired.append(1))
        assert s.cancel_all() == 2
        s.advance(100)
        assert fired == []
        assert s.next_due() is None

    def test_cancel_from_callback_stops_rest_of_batch(self) -> None:
        s = StageScheduler()
        fired: list[str] = []
        handles = []

        def teardown() -> None:
            fired.append("teardown")
            s.cancel_all(handles)

        handles.append(s.schedule(10, teardown))
        handles.append(s.schedule(20, lambda: fired.append("too late")))
        s.advance(100)
        assert fired == ["teardown"]


class TestQueries:
    def test_pending_in_firing_order(self) -> None:
        s = StageScheduler()
        b = s.schedule(20, lambda: None)
        a = s.schedule(10, lambda: None)
        assert s.pending() == [a, b]
        assert s.next_due() == 10

    def test_next_due_skips_cancelled(self) -> None:
        s = StageScheduler()
        a = s.schedule(10, lambda: None)
        s.schedule(20, lambda: None)
        s.cancel(a)
        assert s.next_due() == 20
