"""Tests for the deferred callback queue."""

from scicalc.timers import DeferredQueue


def test_runs_only_when_due(clock):
    q = DeferredQueue(clock=clock)
    fired = []
    q.call_later(1.0, lambda: fired.append("a"))

    assert q.run_due() == 0
    clock.advance(0.5)
    assert q.run_due() == 0
    clock.advance(0.5)
    assert q.run_due() == 1
    assert fired == ["a"]
    assert len(q) == 0


def test_runs_in_due_order(clock):
    q = DeferredQueue(clock=clock)
    fired = []
    q.call_later(2.0, lambda: fired.append("late"))
    q.call_later(1.0, lambda: fired.append("early"))
    q.call_later(1.0, lambda: fired.append("early-2"))

    clock.advance(5.0)
    assert q.run_due() == 3
    assert fired == ["early", "early-2", "late"]


def test_next_due_in(clock):
    q = DeferredQueue(clock=clock)
    assert q.next_due_in() is None
    q.call_later(2.0, lambda: None)
    clock.advance(0.5)
    assert q.next_due_in() == 1.5
    clock.advance(3.0)
    assert q.next_due_in() == 0.0


def test_negative_delay_is_immediate(clock):
    q = DeferredQueue(clock=clock)
    fired = []
    q.call_later(-1.0, lambda: fired.append(1))
    assert q.run_due() == 1
