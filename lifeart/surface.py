"""Immediate-mode drawing surface over ``QPainter``.

Entities draw through a tiny sketch-style vocabulary (fill, stroke, ellipse,
line, push/pop…).  :class:`PainterSurface` maps that vocabulary onto a
``QPainter`` while keeping the fill/stroke state persistent between calls,
the way a sketch canvas does.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from PyQt5 import QtCore, QtGui

__all__ = ["PainterSurface", "clamp", "clamp01", "map_blend_mode"]


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def map_blend_mode(name: str | None) -> QtGui.QPainter.CompositionMode:
    mode = (name or "").lower()
    mapping = {
        "source": QtGui.QPainter.CompositionMode_Source,
        "normal": QtGui.QPainter.CompositionMode_SourceOver,
        "source-over": QtGui.QPainter.CompositionMode_SourceOver,
        "screen": QtGui.QPainter.CompositionMode_Screen,
        "lighten": QtGui.QPainter.CompositionMode_Lighten,
        "lighter": QtGui.QPainter.CompositionMode_Plus,
        "multiply": QtGui.QPainter.CompositionMode_Multiply,
        "add": QtGui.QPainter.CompositionMode_Plus,
        "additive": QtGui.QPainter.CompositionMode_Plus,
        "plus": QtGui.QPainter.CompositionMode_Plus,
    }
    return mapping.get(mode, QtGui.QPainter.CompositionMode_SourceOver)


def _to_qcolor(r: float, g: float, b: float, a: float = 255.0) -> QtGui.QColor:
    return QtGui.QColor(
        int(round(clamp(r, 0.0, 255.0))),
        int(round(clamp(g, 0.0, 255.0))),
        int(round(clamp(b, 0.0, 255.0))),
        int(round(clamp(a, 0.0, 255.0))),
    )


class PainterSurface:
    """Sketch-style drawing state bound to an active ``QPainter``."""

    def __init__(self, painter: QtGui.QPainter) -> None:
        self._painter = painter
        self._fill: Optional[QtGui.QColor] = QtGui.QColor(255, 255, 255)
        self._stroke: Optional[QtGui.QColor] = None
        self._weight = 1.0
        self._stack: List[Tuple[Optional[QtGui.QColor], Optional[QtGui.QColor], float]] = []
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)
        self._apply_brush()
        self._apply_pen()

    @property
    def painter(self) -> QtGui.QPainter:
        return self._painter

    # ------------------------------------------------------------------ state
    def _apply_brush(self) -> None:
        if self._fill is None:
            self._painter.setBrush(QtCore.Qt.NoBrush)
        else:
            self._painter.setBrush(self._fill)

    def _apply_pen(self) -> None:
        if self._stroke is None or self._weight <= 0.0:
            self._painter.setPen(QtCore.Qt.NoPen)
            return
        pen = QtGui.QPen(self._stroke, self._weight)
        pen.setCapStyle(QtCore.Qt.RoundCap)
        self._painter.setPen(pen)

    def push(self) -> None:
        self._stack.append((self._fill, self._stroke, self._weight))
        self._painter.save()

    def pop(self) -> None:
        if not self._stack:
            return
        self._painter.restore()
        self._fill, self._stroke, self._weight = self._stack.pop()

    def fill(self, r: float, g: float, b: float, a: float = 255.0) -> None:
        self._fill = _to_qcolor(r, g, b, a)
        self._apply_brush()

    def no_fill(self) -> None:
        self._fill = None
        self._apply_brush()

    def stroke(self, r: float, g: float, b: float, a: float = 255.0) -> None:
        self._stroke = _to_qcolor(r, g, b, a)
        self._apply_pen()

    def no_stroke(self) -> None:
        self._stroke = None
        self._apply_pen()

    def stroke_weight(self, weight: float) -> None:
        self._weight = max(0.0, float(weight))
        if self._stroke is not None:
            self._apply_pen()

    def blend_mode(self, name: str) -> None:
        self._painter.setCompositionMode(map_blend_mode(name))

    # ------------------------------------------------------------------ transforms
    def translate(self, x: float, y: float) -> None:
        self._painter.translate(x, y)

    def rotate(self, angle: float) -> None:
        """Rotate by ``angle`` radians."""

        self._painter.rotate(math.degrees(angle))

    # ------------------------------------------------------------------ primitives
    def ellipse(self, x: float, y: float, w: float, h: Optional[float] = None) -> None:
        """Draw an ellipse centred on ``(x, y)`` with diameters ``w`` and ``h``."""

        if h is None:
            h = w
        self._painter.drawEllipse(QtCore.QPointF(x, y), abs(w) / 2.0, abs(h) / 2.0)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self._stroke is None or self._weight <= 0.0:
            return
        self._painter.drawLine(QtCore.QLineF(x1, y1, x2, y2))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._painter.drawRect(QtCore.QRectF(x, y, w, h))

    def image(self, img: QtGui.QImage, x: float = 0.0, y: float = 0.0) -> None:
        self._painter.drawImage(QtCore.QPointF(x, y), img)
