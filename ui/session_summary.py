# ui/session_summary.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel

from app.state import Result, Snapshot
from utils.graph_helper import make_speed_plot, show_keystrokes


def describe_result(title: str, result: Result) -> str:
    return (f"{title}\nTyping speed: {result.typing_speed} chars/min\n"
            f"Accuracy: {result.accuracy:.2f}%")


def describe_best(best: Optional[Result]) -> str:
    if best is None or best.typing_speed <= 0:
        return ""
    return describe_result("Best result:", best)


class SessionSummary(QWidget):
    """Results page: this session, the stored best, and correct chars per second."""

    def __init__(self, session_seconds: float = 60.0, parent=None):
        super().__init__(parent)
        self._session_seconds = session_seconds

        root = QVBoxLayout(self)
        root.setSpacing(18)

        row = QHBoxLayout()
        self.lblCurrent = QLabel("", self)
        self.lblCurrent.setObjectName("lblCurrent")
        self.lblBest = QLabel("", self)
        self.lblBest.setObjectName("lblBest")
        for lab in (self.lblCurrent, self.lblBest):
            lab.setStyleSheet("font-size: 22px;")
            row.addWidget(lab, 1)
        root.addLayout(row)

        self.lblRecord = QLabel("", self)
        self.lblRecord.setAlignment(Qt.AlignCenter)
        root.addWidget(self.lblRecord)

        self.plot, self.curve = make_speed_plot()
        root.addWidget(self.plot, stretch=1)

        hint = QLabel("Press Enter to return to the menu", self)
        hint.setAlignment(Qt.AlignCenter)
        root.addWidget(hint)

    def show_snapshot(self, snap: Snapshot):
        result = snap.result or Result()
        self.lblCurrent.setText(describe_result("Current result:", result))
        self.lblBest.setText(describe_best(snap.best))
        self.lblRecord.setText("New record!" if snap.is_new_record else "")
        show_keystrokes(self.curve, snap.keystrokes, self._session_seconds)
