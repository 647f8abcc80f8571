"""Qt widget hosting the scene: frame timer, persistent canvas, resize wiring.

The scene draws into an off-screen ``QImage`` that survives between paints so
the translucent black overlay of every frame leaves fading trails.  The
widget then blits that canvas onto itself.
"""

from __future__ import annotations

from typing import Mapping, Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from lifeart.control.profile import coerce_int
from lifeart.scene import Scene
from lifeart.surface import PainterSurface

__all__ = ["ArtworkViewWidget", "new_canvas"]


def new_canvas(width: int, height: int) -> QtGui.QImage:
    canvas = QtGui.QImage(max(1, int(width)), max(1, int(height)), QtGui.QImage.Format_ARGB32_Premultiplied)
    canvas.fill(QtGui.QColor("black"))
    return canvas


class ArtworkViewWidget(QtWidgets.QWidget):
    """Raster widget repainting the scene on a ``QTimer`` tick."""

    def __init__(
        self,
        settings: Mapping[str, object],
        parent: Optional[QtWidgets.QWidget] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(parent)
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)
        self.setAutoFillBackground(False)
        self.scene = Scene(settings, seed=seed)
        canvas_cfg = self.scene.state.get("canvas", {})
        self._resizable = bool(canvas_cfg.get("resizable", False)) if isinstance(canvas_cfg, Mapping) else False
        self._canvas: Optional[QtGui.QImage] = None
        self._timer = QtCore.QTimer(self)
        self._frame_interval_ms = 16
        self._timer.timeout.connect(self.update)
        system = self.scene.state.get("system", {})
        fps = coerce_int(system.get("fps"), 60) if isinstance(system, Mapping) else 60
        self.set_fps(fps)

    def set_fps(self, fps: int) -> None:
        """Update the refresh interval; ``fps <= 0`` pauses the animation."""

        interval_ms = int(round(1000.0 / fps)) if fps > 0 else 0
        if interval_ms <= 0:
            if self._timer.isActive():
                self._timer.stop()
            self._frame_interval_ms = 0
            return
        self._frame_interval_ms = interval_ms
        if self._timer.isActive():
            self._timer.setInterval(interval_ms)
        else:
            self._timer.start(interval_ms)

    @property
    def canvas(self) -> Optional[QtGui.QImage]:
        return self._canvas

    def _ensure_scene(self) -> None:
        width = max(1, self.width())
        height = max(1, self.height())
        if not self.scene.initialized:
            self.scene.initialize(width, height)
            self._canvas = new_canvas(width, height)
        elif self._canvas is None:
            self._canvas = new_canvas(width, height)

    def render_frame(self) -> None:
        """Advance the scene by one frame onto the persistent canvas."""

        self._ensure_scene()
        painter = QtGui.QPainter(self._canvas)
        try:
            self.scene.render_frame(PainterSurface(painter))
        finally:
            painter.end()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # type: ignore[override]
        del event
        self.render_frame()
        painter = QtGui.QPainter(self)
        try:
            painter.drawImage(0, 0, self._canvas)
        finally:
            painter.end()

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        size = event.size()
        width = max(1, size.width())
        height = max(1, size.height())
        if self.scene.initialized and self._resizable:
            self.scene.on_resize(width, height)
            self._canvas = new_canvas(width, height)
        self.update()
