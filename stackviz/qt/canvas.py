"""Qt canvas painting the stack, animations and indicators."""

from __future__ import annotations

from stackviz.app.controller import StackController
from stackviz.app.ui_state import VisualizerUIState
from stackviz.core.animation import AnimationMode
from stackviz.ui.layout import ROUNDNESS, Rect, StackLayout, preferred_canvas_height
from stackviz.ui.theme import Theme, theme_for

try:
    from PyQt6.QtCore import QPointF, QRectF, QSize, Qt
    from PyQt6.QtGui import QColor, QFont, QPainter, QPen, QPolygonF
    from PyQt6.QtWidgets import QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class StackCanvas(QWidget):
    def __init__(self, controller: StackController) -> None:
        super().__init__()
        self._controller = controller
        self.setMinimumWidth(400)

    def sizeHint(self) -> QSize:  # type: ignore[override]
        size = self._controller.ui_state().stack.size
        return QSize(600, int(preferred_canvas_height(size)))

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        ui = self._controller.ui_state()
        theme = theme_for(ui.dark_mode)
        layout = StackLayout(float(self.width()), float(self.height()))
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(theme.window_bg))
        self._draw_base(painter, layout, theme)
        self._draw_elements(painter, layout, theme, ui)
        if ui.indicators.peek_active and ui.indicators.peek_slot is not None:
            self._fill_round(painter, layout.slot_rect(ui.indicators.peek_slot), QColor(theme.peek_highlight))
        if ui.indicators.push_arrow_active and ui.indicators.push_arrow_slot is not None:
            self._draw_arrow(painter, layout, theme, ui.indicators.push_arrow_slot)
        painter.end()

    def _draw_base(self, painter: QPainter, layout: StackLayout, theme: Theme) -> None:
        base = layout.base_rect()
        self._fill_round(painter, base, QColor(theme.accent))
        painter.setPen(QPen(QColor(theme.base_border), 3))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRoundedRect(_qrect(base), ROUNDNESS / 2, ROUNDNESS / 2)

    def _draw_elements(
        self, painter: QPainter, layout: StackLayout, theme: Theme, ui: VisualizerUIState
    ) -> None:
        elements = ui.stack.elements
        animating_top = ui.animation.mode is not AnimationMode.IDLE
        for index, value in enumerate(elements):
            rect = layout.slot_rect(index)
            alpha = 1.0
            fill = QColor(theme.element_bg)
            if animating_top and index == len(elements) - 1:
                alpha = max(0.0, min(1.0, ui.animation.opacity))
                fill = QColor(theme.accent)
                fill.setAlphaF(alpha)

            shadow = QColor(theme.shadow)
            shadow.setAlphaF(shadow.alphaF() * alpha)
            self._fill_round(painter, Rect(rect.x + 5, rect.y + 5, rect.w, rect.h), shadow)
            self._fill_round(painter, rect, fill)

            painter.setPen(QPen(QColor(theme.element_border), 2.0))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRoundedRect(_qrect(rect), ROUNDNESS / 2, ROUNDNESS / 2)

            text_color = QColor(theme.text)
            text_color.setAlphaF(alpha)
            painter.setPen(text_color)
            painter.setFont(QFont("Segoe UI", 16, QFont.Weight.Bold))
            painter.drawText(_qrect(rect), Qt.AlignmentFlag.AlignCenter, str(value))

    def _draw_arrow(self, painter: QPainter, layout: StackLayout, theme: Theme, slot: int) -> None:
        arrow = layout.push_arrow(slot)
        color = QColor(theme.accent)
        painter.setPen(QPen(color, 3))
        painter.drawLine(QPointF(arrow.start_x, arrow.y), QPointF(arrow.end_x, arrow.y))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawPolygon(
            QPolygonF(
                [
                    QPointF(arrow.end_x, arrow.y),
                    QPointF(arrow.end_x - arrow.head_length, arrow.y - arrow.head_half_width),
                    QPointF(arrow.end_x - arrow.head_length, arrow.y + arrow.head_half_width),
                ]
            )
        )

    def _fill_round(self, painter: QPainter, rect: Rect, color: QColor) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawRoundedRect(_qrect(rect), ROUNDNESS / 2, ROUNDNESS / 2)


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.w, rect.h)
