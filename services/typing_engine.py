# services/typing_engine.py
from __future__ import annotations
import logging
import time
from typing import Callable, Iterable, List, Optional

from app.calculation import AccuracyCounter
from app.config import Settings
from app.errors import StoreError
from app.state import Keystroke, Result, SessionState, Snapshot
from core.chrono import SessionClock, format_seconds
from services.line_chunker import chunk_lines, visible_window

log = logging.getLogger(__name__)


class TypingEngine:
    """
    Session state machine: menu -> awaiting start -> active -> finished.

    The shell forwards UI actions (enter_typing, cancel, confirm_start,
    return_to_menu) and, once per frame, the typed characters through update().
    Everything the shell draws comes from snapshot().
    """

    def __init__(self, corpus, store=None, settings: Optional[Settings] = None,
                 now: Callable[[], float] = time.monotonic):
        self.corpus = corpus
        self.store = store
        self.settings = settings or Settings()
        self._now = now

        self.state = SessionState.MENU
        self.lines: List[str] = []
        self.line_offset = 0
        self.cursor = 0
        self.typed_text = ""
        self.correct_text = ""
        self.counter = AccuracyCounter()
        self.clock = SessionClock(now)
        self.keystrokes: List[Keystroke] = []
        self.result: Optional[Result] = None
        self.best: Optional[Result] = None
        self.is_new_record = False

    # ---------------- Actions ----------------
    def enter_typing(self) -> bool:
        if self.state is not SessionState.MENU:
            log.debug("enter_typing ignored in %s", self.state.name)
            return False
        self.typed_text = ""
        self.state = SessionState.AWAITING_START
        return True

    def cancel(self) -> bool:
        if self.state not in (SessionState.AWAITING_START, SessionState.ACTIVE):
            log.debug("cancel ignored in %s", self.state.name)
            return False
        if self.state is SessionState.ACTIVE:
            log.info("Session abandoned after %.1f s", self.clock.elapsed)
            self.clock.stop()
            self._clear_session()
        self.state = SessionState.MENU
        return True

    def confirm_start(self, now: Optional[float] = None) -> bool:
        """Fresh words, fresh counters, then start the countdown. LoadError propagates."""
        if self.state is not SessionState.AWAITING_START:
            log.debug("confirm_start ignored in %s", self.state.name)
            return False
        self.reset()
        self.clock.start(self.settings.session_seconds, now)
        self.state = SessionState.ACTIVE
        log.info("Session started: %d lines, %.0f s", len(self.lines), self.settings.session_seconds)
        return True

    def return_to_menu(self) -> bool:
        if self.state is not SessionState.FINISHED:
            log.debug("return_to_menu ignored in %s", self.state.name)
            return False
        self.state = SessionState.MENU
        return True

    def reset(self):
        pool = self.corpus.new_pool(self.settings.sample_size)
        self._clear_session()
        self.lines = chunk_lines(pool, self.settings.words_per_line)

    def _clear_session(self):
        self.lines = []
        self.line_offset = 0
        self.cursor = 0
        self.typed_text = ""
        self.correct_text = ""
        self.counter = AccuracyCounter()
        self.clock = SessionClock(self._now)
        self.keystrokes = []
        self.result = None
        self.best = None
        self.is_new_record = False

    # ---------------- Per frame ----------------
    def update(self, events: Iterable[str] = (), now: Optional[float] = None):
        """One frame: clock first, then the batch of typed characters."""
        if self.state is not SessionState.ACTIVE:
            return
        if self.tick(now):
            return
        for text in events:
            if self.state is not SessionState.ACTIVE:
                break
            self.feed(text, now)

    def tick(self, now: Optional[float] = None) -> bool:
        """Advance the clock. Returns True if the session ended on this tick."""
        if self.state is not SessionState.ACTIVE:
            return False
        self.clock.tick(now)
        if self.clock.is_finished():
            self._finish()
            return True
        return False

    def feed(self, text: str, now: Optional[float] = None):
        if self.state is not SessionState.ACTIVE or not text:
            return
        line = self.current_line
        if line is None or self.cursor >= len(line):
            # nothing left to match against
            self._finish()
            return

        ch = text[0]
        ok = ch == line[self.cursor]
        self.counter.record_attempt(ok)
        self.keystrokes.append(Keystroke(self._elapsed(now), ch, ok))
        self.typed_text = text
        if not ok:
            return

        self.correct_text += ch
        self.cursor += 1
        if self.cursor >= len(line):
            self._next_line()

    def _next_line(self):
        self.correct_text = ""
        self.cursor = 0
        self.line_offset += 1
        if self.line_offset >= len(self.lines):
            self._finish()

    def _elapsed(self, now: Optional[float]) -> float:
        t = self._now() if now is None else now
        return max(0.0, t - self.clock.start_instant)

    def _finish(self):
        if self.state is SessionState.FINISHED:
            return
        self.clock.stop()
        self.state = SessionState.FINISHED
        self.result = Result.now(self.counter.correct, self.counter.accuracy_percent())
        log.info("Session finished: %d chars, %.2f%% accuracy",
                 self.result.typing_speed, self.result.accuracy)
        if self.store is None:
            return

        try:
            self.is_new_record = self.store.save_if_better(self.result)
        except StoreError as e:
            log.error("Failed to save result: %s", e)
        if self.is_new_record:
            log.info("New record!")
        try:
            self.best = self.store.load_best()
        except StoreError as e:
            log.warning("Failed to load best result: %s", e)
            self.best = None

    # ---------------- Read-only views ----------------
    @property
    def current_line(self) -> Optional[str]:
        if 0 <= self.line_offset < len(self.lines):
            return self.lines[self.line_offset]
        return None

    @property
    def visible_lines(self) -> List[str]:
        return visible_window(self.lines, self.line_offset, self.settings.visible_lines)

    def remaining_formatted(self) -> str:
        if self.state in (SessionState.ACTIVE, SessionState.FINISHED):
            return self.clock.remaining_formatted()
        return format_seconds(self.settings.session_seconds)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            state=self.state,
            visible_lines=self.visible_lines,
            current_line=self.current_line or "",
            cursor=self.cursor,
            typed_text=self.typed_text,
            correct_text=self.correct_text,
            remaining=self.remaining_formatted(),
            attempted=self.counter.attempted,
            correct=self.counter.correct,
            accuracy=self.counter.accuracy_percent(),
            result=self.result,
            best=self.best,
            is_new_record=self.is_new_record,
            keystrokes=list(self.keystrokes),
        )
