"""Trailing-edge debounce over the host scheduler."""

from __future__ import annotations

from vlist.runtime.scheduler import Scheduler, TimerCallback


class Debouncer:
    """Collapse bursts of `trigger` calls into one callback after a quiet period."""

    def __init__(self, scheduler: Scheduler, delay_seconds: float, callback: TimerCallback) -> None:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        self._scheduler = scheduler
        self._delay_seconds = delay_seconds
        self._callback = callback
        self._timer_id: int | None = None

    @property
    def pending(self) -> bool:
        return self._timer_id is not None

    def trigger(self) -> None:
        """Restart the quiet period."""
        self.cancel()
        self._timer_id = self._scheduler.call_later(self._delay_seconds, self._fire)

    def cancel(self) -> None:
        if self._timer_id is not None:
            self._scheduler.cancel(self._timer_id)
            self._timer_id = None

    def flush(self) -> None:
        """Run a pending callback now."""
        if self._timer_id is not None:
            self.cancel()
            self._callback()

    def _fire(self) -> None:
        self._timer_id = None
        self._callback()
