# ui/main_window.py
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QMessageBox
from PySide6.QtCore import Qt, QTimer

from app.errors import LoadError
from app.state import SessionState
from services.typing_engine import TypingEngine
from ui.typing_view import TypingView

log = logging.getLogger(__name__)

FRAME_MS = 16


class MainWindow(QMainWindow):
    def __init__(self, engine: TypingEngine):
        super().__init__()
        self.setWindowTitle("Typing Speed Test")
        self.resize(800, 600)
        self.engine = engine
        self._pending: list[str] = []

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 40, 16, 16)

        self.view = TypingView(engine.settings.session_seconds, self)
        self.view.startClicked.connect(self._on_start_clicked)
        self.view.enterPressed.connect(self._on_enter)
        self.view.escapePressed.connect(self._on_escape)
        self.view.charTyped.connect(self._pending.append)
        root_v.addWidget(self.view, 1)
        self.setCentralWidget(root)

        self.setStyleSheet("QWidget { background: #0f1115; color: #e5e7eb; }")
        self.menuBar().setVisible(False)
        try:
            self.setFocusPolicy(Qt.NoFocus)
        except Exception:
            pass
        self.view.setFocus()

        # frame loop: one batch of input, one clock tick, one redraw
        self._frame = QTimer(self)
        self._frame.setInterval(FRAME_MS)
        self._frame.timeout.connect(self._on_frame)
        self._frame.start()
        self.view.render_snapshot(self.engine.snapshot())

    # ---------------- Actions ----------------
    def _on_start_clicked(self):
        self.engine.enter_typing()
        self.view.setFocus()

    def _on_enter(self):
        state = self.engine.state
        if state is SessionState.AWAITING_START:
            self._pending.clear()
            try:
                self.engine.confirm_start()
            except LoadError as e:
                log.error("Cannot start session: %s", e)
                QMessageBox.critical(self, "Word corpus", str(e))
                self.engine.cancel()
        elif state is SessionState.FINISHED:
            self.engine.return_to_menu()
        elif state is SessionState.MENU:
            self.engine.enter_typing()

    def _on_escape(self):
        self._pending.clear()
        self.engine.cancel()

    # ---------------- Frame ----------------
    def _on_frame(self):
        events = list(self._pending)
        self._pending.clear()
        self.engine.update(events)
        self.view.render_snapshot(self.engine.snapshot())
