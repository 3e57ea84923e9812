"""Debounce helper for UI event handlers (search-as-you-type)."""
import logging
from typing import Callable

from config import SEARCH_DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


def _ui_timer_schedule(delay: float, fn: Callable[[], None]):
    """Schedule *fn* once after *delay* seconds on the NiceGUI event loop."""
    from nicegui import ui

    return ui.timer(delay, fn, once=True)


class Debouncer:
    """Coalesce rapid calls into one, fired after *delay* seconds of quiet.

    Each call cancels the pending invocation (if any) and schedules a new
    one with the latest arguments. ``schedule(delay, fn)`` must return a
    handle with a ``cancel()`` method; by default it's a one-shot ``ui.timer``.
    """

    def __init__(
        self,
        callback: Callable[..., None],
        delay: float = SEARCH_DEBOUNCE_SECONDS,
        schedule: Callable | None = None,
    ):
        self._callback = callback
        self._delay = delay
        self._schedule = schedule or _ui_timer_schedule
        self._handle = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args, **kwargs) -> None:
        self.cancel()

        def _fire():
            self._handle = None
            self._callback(*args, **kwargs)

        self._handle = self._schedule(self._delay, _fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


def debounce(callback: Callable[..., None], delay: float = SEARCH_DEBOUNCE_SECONDS) -> Debouncer:
    """Shorthand for ``Debouncer(callback, delay)``."""
    return Debouncer(callback, delay)
