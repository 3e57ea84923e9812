"""
Unit tests for src/services/debounce.py

Uses a fake scheduler so no event loop or real timer is needed.
"""
from src.services.debounce import Debouncer


class _FakeHandle:
    def __init__(self, fn):
        self.fn = fn
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class _FakeScheduler:
    def __init__(self):
        self.handles = []
        self.delays = []

    def __call__(self, delay, fn):
        handle = _FakeHandle(fn)
        self.handles.append(handle)
        self.delays.append(delay)
        return handle

    def fire_pending(self):
        pending, self.handles = self.handles, []
        for handle in pending:
            if not handle.cancelled:
                handle.fn()


def test_call_is_deferred():
    calls = []
    scheduler = _FakeScheduler()
    debounced = Debouncer(calls.append, delay=0.5, schedule=scheduler)
    debounced("a")
    assert calls == []
    assert debounced.pending
    assert scheduler.delays == [0.5]


def test_only_last_call_fires():
    calls = []
    scheduler = _FakeScheduler()
    debounced = Debouncer(calls.append, delay=0.5, schedule=scheduler)
    debounced("t")
    debounced("te")
    debounced("tes")
    assert [h.cancelled for h in scheduler.handles] == [True, True, False]
    scheduler.fire_pending()
    assert calls == ["tes"]
    assert not debounced.pending


def test_cancel_drops_pending_call():
    calls = []
    scheduler = _FakeScheduler()
    debounced = Debouncer(calls.append, schedule=scheduler)
    debounced("x")
    debounced.cancel()
    scheduler.fire_pending()
    assert calls == []
    assert not debounced.pending


def test_default_delay_is_half_a_second():
    scheduler = _FakeScheduler()
    Debouncer(lambda: None, schedule=scheduler)()
    assert scheduler.delays == [0.5]


def test_calls_after_quiet_period_each_fire():
    calls = []
    scheduler = _FakeScheduler()
    debounced = Debouncer(calls.append, schedule=scheduler)
    debounced("a")
    scheduler.fire_pending()
    debounced("b")
    scheduler.fire_pending()
    assert calls == ["a", "b"]
