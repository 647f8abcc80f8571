"""Render frames without a window and write them as PNG files.

The Qt ``offscreen`` platform is selected before Qt is imported so the tool
runs on machines without a display.

Usage:
  lifeart-capture --variant fixed-700 --frames 300 --every 60 --out frames/
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtGui

from lifeart.control.profile import coerce_int
from lifeart.main import _install_debug_silencer, add_common_arguments, settings_from_args
from lifeart.scene import Scene
from lifeart.surface import PainterSurface
from lifeart.view.view_widget import new_canvas

__all__ = ["render_frames", "main"]


def _ensure_gui_application() -> QtGui.QGuiApplication:
    app = QtGui.QGuiApplication.instance()
    if app is None:
        app = QtGui.QGuiApplication([sys.argv[0] if sys.argv else "lifeart-capture"])
    return app


def _parse_size(value: str) -> Tuple[int, int]:
    try:
        width_text, height_text = value.lower().split("x", 1)
        width, height = int(width_text), int(height_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("width and height must be positive")
    return width, height


def canvas_size(settings: dict, size: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
    """Explicit size, else the preset canvas, else 900x900."""

    if size is not None:
        return size
    canvas = settings.get("canvas", {})
    width = coerce_int(canvas.get("width"), 0)
    height = coerce_int(canvas.get("height"), 0)
    if width <= 0 or height <= 0:
        return 900, 900
    return width, height


def render_frames(
    scene: Scene,
    width: int,
    height: int,
    frames: int,
    out_dir: Path,
    *,
    every: int = 1,
) -> List[Path]:
    """Render ``frames`` frames and save every ``every``-th one (and the last)."""

    if frames <= 0:
        raise ValueError("frames must be positive")
    if every <= 0:
        raise ValueError("every must be positive")
    _ensure_gui_application()
    out_dir.mkdir(parents=True, exist_ok=True)
    if not scene.initialized:
        scene.initialize(width, height)
    canvas = new_canvas(int(scene.width), int(scene.height))
    written: List[Path] = []
    for index in range(1, frames + 1):
        painter = QtGui.QPainter(canvas)
        try:
            scene.render_frame(PainterSurface(painter))
        finally:
            painter.end()
        if index % every == 0 or index == frames:
            path = out_dir / f"frame_{index:05d}.png"
            if not canvas.save(str(path), "PNG"):
                raise OSError(f"could not write {path}")
            written.append(path)
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeart-capture", description=__doc__.splitlines()[0])
    add_common_arguments(parser)
    parser.add_argument("--frames", type=int, default=120, help="Number of frames to simulate.")
    parser.add_argument("--every", type=int, default=30, help="Save one frame out of this many.")
    parser.add_argument("--size", type=_parse_size, default=None, help="Canvas size as WIDTHxHEIGHT.")
    parser.add_argument("--out", type=Path, default=Path("output"), help="Directory receiving the PNG files.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    if args.frames <= 0 or args.every <= 0:
        raise SystemExit("--frames and --every must be positive")
    if not args.verbose:
        _install_debug_silencer()
    settings = settings_from_args(args)
    width, height = canvas_size(settings, args.size)
    scene = Scene(settings)
    written = render_frames(scene, width, height, args.frames, args.out, every=args.every)
    for path in written:
        print(f"wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
