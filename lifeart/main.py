# -*- coding: utf-8 -*-
import argparse
import io
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence


def _handle_qt_import_error(exc: ImportError) -> NoReturn:
    """Exit with a helpful message when the Qt bindings cannot be imported."""

    details = str(exc)
    message_lines = [
        "Unable to start LifeArt: importing PyQt5 failed.",
        "Check that PyQt5 is installed and that the system OpenGL libraries are available.",
    ]
    if "libGL.so.1" in details:
        message_lines.append("Hint: the system library libGL.so.1 is missing. Install the Mesa/OpenGL packages.")
    message_lines.append(f"Original error: {details}")
    raise SystemExit("\n".join(message_lines)) from exc


try:
    from PyQt5 import QtCore, QtGui, QtWidgets
    from PyQt5.QtCore import Qt
except ImportError as exc:  # pragma: no cover - environment dependent
    _handle_qt_import_error(exc)

from lifeart.control.config import DEFAULT_VARIANT, VARIANTS
from lifeart.control.profile import coerce_float, coerce_int, load_profile, merge_state, resolve_settings
from lifeart.view.view_widget import ArtworkViewWidget

DEBUG_MARKER = "[LifeArt][DEBUG]"


class _DebugSilencer(io.TextIOBase):
    """stdout wrapper dropping ``[LifeArt][DEBUG]`` lines unless ``--verbose`` is given."""

    def __init__(self, stream, marker: str = DEBUG_MARKER) -> None:
        super().__init__()
        self._stream = stream
        self._marker = marker
        self._pending = ""

    @property
    def encoding(self) -> str:  # type: ignore[override]
        return getattr(self._stream, "encoding", "utf-8")

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return self._stream.isatty()

    def write(self, text: str) -> int:  # type: ignore[override]
        *lines, self._pending = (self._pending + text).split("\n")
        for line in lines:
            if self._marker not in line:
                self._stream.write(line + "\n")
        return len(text)

    def flush(self) -> None:
        if self._pending and self._marker not in self._pending:
            self._stream.write(self._pending)
        self._pending = ""
        self._stream.flush()


def _install_debug_silencer() -> None:
    # warnings go to stderr, so only stdout carries debug lines
    if not isinstance(sys.stdout, _DebugSilencer):
        sys.stdout = _DebugSilencer(sys.stdout)


def add_common_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default=DEFAULT_VARIANT,
        help="Preset controlling canvas size, entity counts and which entities move.",
    )
    parser.add_argument("--profile", type=Path, default=None, help="JSON file overriding preset values.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible layouts and motion.")
    parser.add_argument("--verbose", action="store_true", help="Show debug diagnostics.")
    return parser


def settings_from_args(args: argparse.Namespace) -> dict:
    """Resolve the preset, then the profile, then individual flags."""

    overrides: dict = {}
    if args.profile is not None:
        try:
            overrides = load_profile(args.profile)
        except ValueError as exc:
            print(f"[LifeArt][WARN] {exc}. Using the '{args.variant}' preset.", file=sys.stderr)
            overrides = {}
    settings = resolve_settings(args.variant, overrides)
    flag_overrides: dict = {"system": {}}
    if args.seed is not None:
        flag_overrides["system"]["seed"] = args.seed
    if getattr(args, "fps", None) is not None:
        flag_overrides["system"]["fps"] = args.fps
    return merge_state(settings, flag_overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeart", description="Generative life artwork.")
    add_common_arguments(parser)
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second (default 60).")
    return parser


class ViewWindow(QtWidgets.QMainWindow):
    def __init__(self, screen: QtGui.QScreen, settings: dict):
        super().__init__(None)
        self.setWindowTitle("LifeArt")
        self._target_screen = screen
        self._settings = settings
        self.view = ArtworkViewWidget(settings, self)
        self.setCentralWidget(self.view)
        self._apply_screen_geometry(screen)
        QtWidgets.QShortcut(Qt.Key_Escape, self, activated=self.close)

    def _fixed_size(self) -> Optional[tuple[int, int]]:
        canvas = self._settings.get("canvas", {})
        if bool(canvas.get("resizable", False)):
            return None
        width = coerce_int(canvas.get("width"), 0)
        height = coerce_int(canvas.get("height"), 0)
        if width <= 0 or height <= 0:
            return None
        return width, height

    def _apply_screen_geometry(self, screen: QtGui.QScreen):
        if window_handle := self.windowHandle():
            window_handle.setScreen(screen)
        geometry = screen.geometry()
        fixed = self._fixed_size()
        if fixed is not None:
            width, height = fixed
            self.setFixedSize(width, height)
        else:
            ratio = coerce_float(self._settings.get("canvas", {}).get("screenRatio"), 0.8)
            ratio = max(0.1, min(1.0, ratio))
            width = int(geometry.width() * ratio)
            height = int(geometry.height() * ratio)
            self.resize(width, height)
        left = geometry.left() + (geometry.width() - width) // 2
        top = geometry.top() + (geometry.height() - height) // 2
        self.move(left, top)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the application and return the exit code."""

    args = build_parser().parse_args(list(argv) if argv is not None else None)
    if not args.verbose:
        _install_debug_silencer()
    settings = settings_from_args(args)

    # Write unhandled exceptions from the event loop to run_exception.txt.
    def _write_unhandled(exc_type, exc_value, exc_tb):
        try:
            import traceback as _tb

            with (Path.cwd() / "run_exception.txt").open("w", encoding="utf-8") as f:
                _tb.print_exception(exc_type, exc_value, exc_tb, file=f)
        except OSError:
            pass
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _write_unhandled
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    qt_argv: List[str] = [sys.argv[0] if sys.argv else "lifeart"]
    app = QtWidgets.QApplication(qt_argv)
    window = ViewWindow(QtGui.QGuiApplication.primaryScreen(), settings)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
