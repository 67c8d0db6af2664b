"""Qt frontend bootstrap and tick wiring."""

from __future__ import annotations

import logging

from stackviz.app.controller import StackController
from stackviz.qt.window import MainWindow
from stackviz.runtime.time import TickClock

try:
    from PyQt6.QtCore import QTimer
    from PyQt6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)


def run_qt_app(controller: StackController, *, frame_interval_ms: int = 16) -> int:
    """Show the main window and drive controller ticks until the window closes."""
    app = QApplication.instance() or QApplication([])
    app.setStyleSheet(
        """
        QWidget { font-size: 16px; }
        QLineEdit { padding: 6px 12px; border-radius: 8px; }
        QComboBox { padding: 6px 8px; }
        QListWidget { font-family: Consolas, monospace; }
        """
    )
    window = MainWindow(controller)
    clock = TickClock()

    def _on_frame() -> None:
        if controller.tick(clock.next()):
            window.sync_ui()

    timer = QTimer(window)
    timer.timeout.connect(_on_frame)
    timer.start(frame_interval_ms)
    window.show()
    logger.info("qt_frontend_started frame_interval_ms=%d", frame_interval_ms)
    return app.exec()
