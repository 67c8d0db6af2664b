"""Main Qt window: controls, stack canvas and history panel."""

from __future__ import annotations

from stackviz.app.commands import CommandType, UICommand
from stackviz.app.controller import StackController
from stackviz.core.models import INPUT_PLACEHOLDER, OperationResult, StackError, ValueKind
from stackviz.qt.canvas import StackCanvas
from stackviz.ui.theme import BUTTON_COLORS, status_color, theme_for

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QKeySequence, QShortcut
    from PyQt6.QtWidgets import (
        QComboBox,
        QHBoxLayout,
        QLabel,
        QLineEdit,
        QListWidget,
        QMainWindow,
        QMessageBox,
        QPushButton,
        QScrollArea,
        QSlider,
        QVBoxLayout,
        QWidget,
    )
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

# Failures the user must acknowledge; the rest only update the status line.
_DIALOG_ERRORS = frozenset(
    {
        StackError.EMPTY_INPUT,
        StackError.CAPACITY_EXCEEDED,
        StackError.TYPE_MISMATCH,
        StackError.PARSE_ERROR,
        StackError.EMPTY_STACK,
        StackError.ALREADY_EMPTY,
    }
)


class MainWindow(QMainWindow):
    def __init__(self, controller: StackController) -> None:
        super().__init__()
        self._controller = controller
        self._syncing = False
        self.setWindowTitle("Stack Visualizer")
        self.resize(1100, 850)
        self.setMinimumSize(900, 650)

        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        self._title = QLabel("STACK VISUALIZER")
        self._title.setContentsMargins(40, 20, 0, 20)
        root.addWidget(self._title)

        controls = QHBoxLayout()
        controls.setContentsMargins(20, 15, 20, 15)
        self._input = QLineEdit()
        self._input.setPlaceholderText(INPUT_PLACEHOLDER)
        self._input.setMinimumHeight(44)
        self._kind = QComboBox()
        self._kind.addItems([kind.value for kind in ValueKind])
        self._kind.setMinimumHeight(44)
        controls.addWidget(self._input, 5)
        controls.addWidget(self._kind, 2)

        self._buttons: dict[str, QPushButton] = {}
        for action_id, label, shortcut in (
            ("push", "PUSH", "Alt+P"),
            ("pop", "POP", "Alt+O"),
            ("peek", "PEEK", "Alt+E"),
            ("clear", "CLEAR", "Alt+C"),
            ("toggle_theme", "THEME", "Alt+T"),
        ):
            button = QPushButton(label)
            button.setMinimumSize(110, 46)
            button.setToolTip(shortcut)
            button.setShortcut(QKeySequence(shortcut))
            button.setStyleSheet(
                f"QPushButton {{ background: {BUTTON_COLORS[action_id]}; color: white;"
                " font-weight: bold; border-radius: 8px; }"
                "QPushButton:disabled { background: #9ca3af; }"
            )
            controls.addWidget(button, 1)
            self._buttons[action_id] = button

        controls.addWidget(QLabel("Speed:"))
        self._speed = QSlider(Qt.Orientation.Horizontal)
        low, high = controller.session.limits.speed_range
        self._speed.setRange(low, high)
        self._speed.setValue(controller.session.animation.speed)
        self._speed.setTickPosition(QSlider.TickPosition.TicksBelow)
        self._speed.setTickInterval(3)
        self._speed.setMinimumWidth(120)
        controls.addWidget(self._speed, 2)
        self._operations = QLabel("")
        controls.addWidget(self._operations, 1)
        root.addLayout(controls)

        self._canvas = StackCanvas(controller)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(self._canvas)
        root.addWidget(scroll, 1)

        self._status = QLabel("")
        self._status.setContentsMargins(20, 4, 20, 4)
        root.addWidget(self._status)

        history_title = QLabel("Operation History")
        history_title.setContentsMargins(20, 10, 0, 0)
        root.addWidget(history_title)
        self._history = QListWidget()
        self._history.setMaximumHeight(160)
        root.addWidget(self._history)
        self.setCentralWidget(central)

        self._buttons["push"].clicked.connect(self._on_push)
        self._input.returnPressed.connect(self._on_push)
        for action_id in ("pop", "peek", "clear", "toggle_theme"):
            self._buttons[action_id].clicked.connect(
                lambda _checked=False, action=action_id: self._run(UICommand(CommandType(action)))
            )
        self._kind.currentTextChanged.connect(self._on_kind_changed)
        self._speed.valueChanged.connect(
            lambda value: self._run(UICommand(CommandType.SET_SPEED, str(value)))
        )
        QShortcut(QKeySequence("Alt+Return"), self, activated=self._on_push)
        self.sync_ui()

    def sync_ui(self) -> None:
        ui = self._controller.ui_state()
        theme = theme_for(ui.dark_mode)
        self._syncing = True
        try:
            self._kind.setCurrentText(ui.selected_kind.value)
            self._kind.setEnabled(ui.kind_selector_enabled)
        finally:
            self._syncing = False
        self._buttons["push"].setEnabled(ui.buttons.push)
        self._buttons["pop"].setEnabled(ui.buttons.pop)
        self._buttons["peek"].setEnabled(ui.buttons.peek)
        self._buttons["clear"].setEnabled(ui.buttons.clear)
        self._operations.setText(ui.operation_label)
        self._status.setText(ui.status)
        self._status.setStyleSheet(f"color: {status_color(ui.status_is_error, ui.dark_mode)};")
        self._title.setStyleSheet(
            f"font-size: 32px; font-weight: bold; color: white; background: {theme.title_bg};"
        )
        self.centralWidget().setStyleSheet(f"background: {theme.window_bg}; color: {theme.text};")
        entries = [f"• {entry}" for entry in ui.history]
        if [self._history.item(i).text() for i in range(self._history.count())] != entries:
            self._history.clear()
            self._history.addItems(entries)
            self._history.scrollToBottom()
        self._canvas.updateGeometry()
        self._canvas.update()

    def _on_push(self) -> None:
        result = self._controller.push(self._input.text())
        if result.ok:
            self._input.clear()
        self._after(result)

    def _on_kind_changed(self, text: str) -> None:
        if self._syncing:
            return
        self._run(UICommand(CommandType.SELECT_KIND, text))

    def _run(self, command: UICommand) -> None:
        self._after(self._controller.handle_command(command))

    def _after(self, result: OperationResult) -> None:
        if result.error in _DIALOG_ERRORS:
            QMessageBox.information(self, "Stack Visualizer", result.message)
        self.sync_ui()
