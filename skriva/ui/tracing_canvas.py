"""Tracing surface: draws glyph guides and traced progress, forwards pointer input."""

from __future__ import annotations

import math
from typing import List, Optional

from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from skriva.core.geometry import Point, Stroke
from skriva.core.session import SessionController, SessionState
from skriva.ui.colors import TraceColors, outline_hex, rainbow_hex
from skriva.ui.models import GlyphFrame, layout_row

# Guide lines in glyph space: ascender, x-height, baseline.
_GUIDE_Y = (150.0, 300.0, 450.0)
_ARROW_LENGTH = 40.0


class TracingCanvas(QWidget):
    """Renders the session snapshot and feeds mouse/touch input to the controller."""

    def __init__(self, controller: SessionController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._frames: List[GlyphFrame] = []
        self.setMinimumSize(320, 240)
        self.setMouseTracking(False)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

    def refresh(self) -> None:
        """Recompute the layout for the loaded content and repaint."""
        engine = self._controller.engine
        count = len(engine.units) if engine else 0
        self._frames = layout_row(count, self.width(), self.height())
        self.update()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.refresh()

    # --- input -----------------------------------------------------------

    def _active_frame(self) -> Optional[GlyphFrame]:
        engine = self._controller.engine
        unit = engine.active_unit if engine else None
        if unit is None or not self._frames:
            return None
        return self._frames[engine.units.index(unit)]

    def _glyph_pos(self, event) -> Optional[Point]:
        frame = self._active_frame()
        if frame is None:
            return None
        pos = event.position()
        return frame.to_glyph(pos.x(), pos.y())

    def mousePressEvent(self, event) -> None:
        pos = self._glyph_pos(event)
        if pos is not None and self._controller.on_pointer_down(pos):
            self.update()

    def mouseMoveEvent(self, event) -> None:
        pos = self._glyph_pos(event)
        if pos is None:
            return
        self._controller.on_pointer_move(pos)
        self.update()

    def mouseReleaseEvent(self, event) -> None:
        self._controller.on_pointer_up()
        self.update()

    # --- painting --------------------------------------------------------

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(TraceColors.BG_TOP))
        gradient.setColorAt(1.0, QColor(TraceColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)

        engine = self._controller.engine
        if engine is None or len(self._frames) != len(engine.units):
            painter.end()
            return

        self._paint_guides(painter)
        snapshot = self._controller.get_snapshot()
        library = self._controller.library
        for i, (unit, frame) in enumerate(zip(engine.units, self._frames)):
            strokes = library.get_strokes(unit.character)
            is_active = unit.position == snapshot.active_character_index
            progress_list = engine.progress_for(i)
            outline = outline_hex(sum(progress_list) / len(progress_list), is_active)
            for stroke in strokes:
                self._paint_outline(painter, frame, stroke, outline)
            for stroke, progress in zip(strokes, progress_list):
                self._paint_progress(painter, frame, stroke, progress)
            if is_active and snapshot.target is not None and snapshot.heading is not None:
                self._paint_arrow(painter, frame, snapshot.target, snapshot.heading)

        if snapshot.state is SessionState.COMPLETE:
            painter.setPen(QColor(TraceColors.PRIMARY_DARK))
            font = painter.font()
            font.setPointSize(28)
            font.setBold(True)
            painter.setFont(font)
            painter.drawText(self.rect(), Qt.AlignHCenter | Qt.AlignTop, "⭐")
        painter.end()

    def _paint_guides(self, painter: QPainter) -> None:
        first, last = self._frames[0], self._frames[-1]
        x0 = first.left
        x1 = last.left + last.size
        for i, y in enumerate(_GUIDE_Y):
            color = TraceColors.GUIDE_MIDDLE if i == 1 else TraceColors.GUIDE_LINE
            pen = QPen(QColor(color), 2)
            if i == 1:
                pen.setStyle(Qt.DashLine)
            painter.setPen(pen)
            wy = first.to_widget(Point(0.0, y)).y
            painter.drawLine(QPointF(x0, wy), QPointF(x1, wy))

    def _paint_outline(self, painter: QPainter, frame: GlyphFrame, stroke: Stroke, color: str) -> None:
        pen = QPen(QColor(color), max(2.0, 36 * frame.scale))
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        painter.setPen(pen)
        painter.drawPath(_path(frame, stroke.points))

    def _paint_progress(self, painter: QPainter, frame: GlyphFrame, stroke: Stroke, progress: float) -> None:
        count = int(math.floor(len(stroke) * min(progress, 1.0)))
        if count < 2:
            return
        width = max(2.0, 24 * frame.scale)
        for i in range(count - 1):
            pen = QPen(QColor(rainbow_hex(i / len(stroke))), width)
            pen.setCapStyle(Qt.RoundCap)
            painter.setPen(pen)
            a = frame.to_widget(stroke.points[i])
            b = frame.to_widget(stroke.points[i + 1])
            painter.drawLine(QPointF(a.x, a.y), QPointF(b.x, b.y))

    def _paint_arrow(self, painter: QPainter, frame: GlyphFrame, target: Point, heading: Point) -> None:
        angle = math.atan2(heading.y - target.y, heading.x - target.x)
        tip = Point(target.x + math.cos(angle) * _ARROW_LENGTH, target.y + math.sin(angle) * _ARROW_LENGTH)
        wings = [
            Point(tip.x - math.cos(angle + s) * 15, tip.y - math.sin(angle + s) * 15)
            for s in (math.pi / 6, -math.pi / 6)
        ]
        pen = QPen(QColor(TraceColors.ARROW), max(2.0, 8 * frame.scale))
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)
        painter.setBrush(QColor(TraceColors.ARROW))
        start = frame.to_widget(target)
        painter.drawEllipse(QPointF(start.x, start.y), 14 * frame.scale, 14 * frame.scale)
        painter.drawPath(_path(frame, [target, tip]))
        for wing in wings:
            painter.drawPath(_path(frame, [tip, wing]))
        painter.setBrush(Qt.NoBrush)


def _path(frame: GlyphFrame, points) -> QPainterPath:
    path = QPainterPath()
    first = frame.to_widget(points[0])
    path.moveTo(first.x, first.y)
    for p in points[1:]:
        w = frame.to_widget(p)
        path.lineTo(w.x, w.y)
    return path
