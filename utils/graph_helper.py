from typing import Sequence
import pyqtgraph as pg

from app.calculation import keystrokes_per_second
from app.state import Keystroke


def make_speed_plot(color: str = "#eab308"):
    """Static chart of correct keystrokes per second; returns (widget, curve)."""
    plot = pg.PlotWidget()
    plot.setBackground(None)
    plot.setMouseEnabled(x=False, y=False)
    plot.hideButtons()
    plot.showGrid(x=False, y=True, alpha=0.15)
    plot.setLabel("left", "chars/s")
    plot.setLabel("bottom", "second")
    curve = plot.plot([], [], pen=pg.mkPen(color, width=2), stepMode="center",
                      fillLevel=0, brush=pg.mkBrush(color + "40"))
    return plot, curve


def show_keystrokes(curve, keystrokes: Sequence[Keystroke], duration: float):
    counts = keystrokes_per_second(keystrokes, duration)
    # step mode wants one more x edge than bars
    curve.setData(list(range(len(counts) + 1)), counts)
