"""Static background grain and scratch lines, rendered once per canvas size."""

from __future__ import annotations

import random
from typing import Mapping, Optional

from PyQt5 import QtGui

from lifeart.control.profile import coerce_float, coerce_int
from lifeart.surface import PainterSurface

__all__ = ["generate_texture"]

_DOT_COLOR = (30, 20, 40)
_LINE_COLOR = (40, 30, 50, 10)


def _scatter_dots(surface: PainterSurface, rng: random.Random, width: int, height: int, cfg: Mapping[str, object]) -> None:
    count = max(0, coerce_int(cfg.get("dots"), 10000))
    dot_min = coerce_float(cfg.get("dotMin"), 0.5)
    dot_max = coerce_float(cfg.get("dotMax"), 2.0)
    alpha_min = coerce_float(cfg.get("alphaMin"), 5.0)
    alpha_max = coerce_float(cfg.get("alphaMax"), 15.0)
    for _ in range(count):
        x = rng.uniform(0, width)
        y = rng.uniform(0, height)
        size = rng.uniform(dot_min, dot_max)
        surface.fill(*_DOT_COLOR, rng.uniform(alpha_min, alpha_max))
        surface.ellipse(x, y, size)


def _grid_dots(surface: PainterSurface, rng: random.Random, width: int, height: int, cfg: Mapping[str, object]) -> None:
    step = max(1, coerce_int(cfg.get("gridStep"), 3))
    density = coerce_float(cfg.get("gridDensity"), 0.12)
    dot_min = coerce_float(cfg.get("dotMin"), 0.5)
    dot_max = coerce_float(cfg.get("dotMax"), 2.0)
    alpha_min = coerce_float(cfg.get("alphaMin"), 5.0)
    alpha_max = coerce_float(cfg.get("alphaMax"), 15.0)
    for gy in range(0, height, step):
        for gx in range(0, width, step):
            if rng.random() >= density:
                continue
            surface.fill(*_DOT_COLOR, rng.uniform(alpha_min, alpha_max))
            surface.ellipse(gx + rng.uniform(0, step), gy + rng.uniform(0, step), rng.uniform(dot_min, dot_max))


def _scratches(surface: PainterSurface, rng: random.Random, width: int, height: int, cfg: Mapping[str, object]) -> None:
    count = max(0, coerce_int(cfg.get("lines"), 50))
    span = coerce_float(cfg.get("lineSpan"), 100.0)
    surface.stroke(*_LINE_COLOR)
    for _ in range(count):
        x1 = rng.uniform(0, width)
        y1 = rng.uniform(0, height)
        surface.line(x1, y1, x1 + rng.uniform(-span, span), y1 + rng.uniform(-span, span))


def generate_texture(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    settings: Optional[Mapping[str, object]] = None,
) -> QtGui.QImage:
    """Return an opaque ``QImage`` holding the background grain.

    ``settings`` is the ``texture`` section; ``mode`` selects ``"scatter"``
    (fixed dot count) or ``"grid"`` (cell scan with a placement probability).
    """

    cfg = settings or {}
    rng = rng or random.Random()
    width = max(1, int(width))
    height = max(1, int(height))
    image = QtGui.QImage(width, height, QtGui.QImage.Format_ARGB32_Premultiplied)
    image.fill(QtGui.QColor(0, 0, 0))
    painter = QtGui.QPainter(image)
    try:
        surface = PainterSurface(painter)
        surface.no_stroke()
        if str(cfg.get("mode", "scatter")).lower() == "grid":
            _grid_dots(surface, rng, width, height, cfg)
        else:
            _scatter_dots(surface, rng, width, height, cfg)
        _scratches(surface, rng, width, height, cfg)
    finally:
        painter.end()
    return image
