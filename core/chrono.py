# core/chrono.py
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

log = logging.getLogger(__name__)


def format_seconds(seconds: float) -> str:
    total = int(round(max(0.0, seconds)))
    return f"{total // 60:02d}:{total % 60:02d}"


class SessionClock:
    """
    Wall-clock countdown. Remaining time is derived from the start instant on every
    tick, so it does not drift with the frame rate of whoever calls tick().
    """

    def __init__(self, now: Callable[[], float] = time.monotonic):
        self._now = now
        self._duration = 0.0
        self._start = 0.0
        self._elapsed = 0.0
        self._remaining = 0.0
        self._running = False

    def start(self, duration: float, now: Optional[float] = None):
        if self._running:
            log.warning("Session clock is already running")
            return
        self._running = True
        self._duration = float(duration)
        self._start = self._now() if now is None else now
        self._elapsed = 0.0
        self._remaining = self._duration

    def tick(self, now: Optional[float] = None):
        if not self._running:
            return
        t = self._now() if now is None else now
        self._elapsed = t - self._start
        self._remaining = self._duration - self._elapsed
        if self._remaining <= 0:
            self._remaining = 0.0
            self._running = False

    def stop(self):
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def start_instant(self) -> float:
        return self._start

    def is_finished(self) -> bool:
        return self._remaining <= 0

    def remaining_formatted(self) -> str:
        if self._remaining <= 0:
            return "00:00"
        return format_seconds(self._remaining)
