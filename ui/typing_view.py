# ui/typing_view.py
from __future__ import annotations
import html

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QLabel, QVBoxLayout, QHBoxLayout, QPushButton, QStackedLayout
)

from app.state import SessionState, Snapshot
from app.validation import is_typed_char
from ui.session_summary import SessionSummary

_COLORS = {
    "ok": "#22c55e",
    "mut": "#9aa1a9",
    "text": "#e5e7eb",
}


def span(txt: str, color: str) -> str:
    return f'<span style="color:{color}">{html.escape(txt)}</span>'


class TypingView(QWidget):
    """Draws engine snapshots and turns key presses into actions / typed text."""
    startClicked = Signal()
    enterPressed = Signal()
    escapePressed = Signal()
    charTyped = Signal(str)

    def __init__(self, session_seconds: float = 60.0, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.StrongFocus)
        self._pages = QStackedLayout(self)

        self._pages.addWidget(self._build_menu())
        self._pages.addWidget(self._build_awaiting())
        self._pages.addWidget(self._build_active())
        self.summary = SessionSummary(session_seconds, self)
        self._pages.addWidget(self.summary)

        self._page_for = {
            SessionState.MENU: 0,
            SessionState.AWAITING_START: 1,
            SessionState.ACTIVE: 2,
            SessionState.FINISHED: 3,
        }
        self._last_state = None

    # ---------------- Pages ----------------
    def _build_menu(self) -> QWidget:
        page = QWidget(self)
        v = QVBoxLayout(page)
        v.addStretch(1)
        title = QLabel("Typing speed test", page)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 34px;")
        v.addWidget(title)

        btn = QPushButton("START", page)
        btn.setFixedSize(150, 50)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.clicked.connect(self.startClicked)
        h = QHBoxLayout()
        h.addStretch(1)
        h.addWidget(btn)
        h.addStretch(1)
        v.addLayout(h)
        v.addStretch(1)
        return page

    def _build_awaiting(self) -> QWidget:
        page = QWidget(self)
        v = QVBoxLayout(page)
        v.addStretch(1)
        for text, size in (("Press Enter to start", 28), ("Esc to exit", 16)):
            lab = QLabel(text, page)
            lab.setAlignment(Qt.AlignCenter)
            lab.setStyleSheet(f"font-size: {size}px;")
            v.addWidget(lab)
        self.lblBudget = QLabel("", page)
        self.lblBudget.setAlignment(Qt.AlignCenter)
        self.lblBudget.setStyleSheet("font-size: 28px;")
        v.addWidget(self.lblBudget)
        v.addStretch(1)
        return page

    def _build_active(self) -> QWidget:
        page = QWidget(self)
        v = QVBoxLayout(page)
        v.setSpacing(20)

        self.lblLines = QLabel("", page)
        self.lblLines.setObjectName("lblLines")
        self.lblLines.setTextFormat(Qt.RichText)
        self.lblLines.setWordWrap(True)
        self.lblLines.setStyleSheet("font-size: 26px; line-height: 1.35;")
        v.addWidget(QLabel("Text:", page))
        v.addWidget(self.lblLines, 1)

        self.lblTyped = QLabel("", page)
        self.lblTyped.setStyleSheet("font-size: 26px;")
        v.addWidget(QLabel("Your input:", page))
        v.addWidget(self.lblTyped)

        self.lblStats = QLabel("", page)
        v.addWidget(self.lblStats)

        self.lblTimer = QLabel("", page)
        self.lblTimer.setObjectName("lblTimer")
        self.lblTimer.setAlignment(Qt.AlignCenter)
        self.lblTimer.setStyleSheet("font-size: 28px;")
        v.addWidget(self.lblTimer)
        return page

    # ---------------- Rendering ----------------
    def render_snapshot(self, snap: Snapshot):
        self._pages.setCurrentIndex(self._page_for[snap.state])
        if snap.state is SessionState.AWAITING_START:
            self.lblBudget.setText(snap.remaining)
        elif snap.state is SessionState.ACTIVE:
            self._render_active(snap)
        elif snap.state is SessionState.FINISHED and self._last_state is not SessionState.FINISHED:
            self.summary.show_snapshot(snap)
        self._last_state = snap.state

    def _render_active(self, snap: Snapshot):
        parts = []
        for i, line in enumerate(snap.visible_lines):
            if i == 0:
                parts.append(span(line[:snap.cursor], _COLORS["ok"]) +
                             span(line[snap.cursor:], _COLORS["text"]))
            else:
                parts.append(span(line, _COLORS["mut"]))
        self.lblLines.setText("<br>".join(parts))
        self.lblTyped.setText(snap.typed_text)
        self.lblStats.setText(f"Correct: {snap.correct}/{snap.attempted}  ({snap.accuracy:.1f} %)")
        self.lblTimer.setText(snap.remaining)

    # ---------------- Input ----------------
    def keyPressEvent(self, ev):
        if ev.modifiers() & (Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier):
            return super().keyPressEvent(ev)
        key = ev.key()
        if key in (Qt.Key_Return, Qt.Key_Enter):
            self.enterPressed.emit()
            return
        if key == Qt.Key_Escape:
            self.escapePressed.emit()
            return
        t = ev.text()
        if is_typed_char(t):
            self.charTyped.emit(t)
            return
        super().keyPressEvent(ev)
