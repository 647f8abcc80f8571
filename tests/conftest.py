"""Shared test fixtures."""

from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from lifeart.context import FrameContext


class RecordingSurface:
    """Surface double that records every drawing call as ``(name, args)``."""

    def __init__(self) -> None:
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def _record(*args):
            self.calls.append((name, args))

        return _record

    def named(self, name):
        return [args for call, args in self.calls if call == name]

    def names(self):
        return [call for call, _ in self.calls]


def constant_noise(value: float):
    def _sample(*coords):
        return value

    return _sample


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def ctx():
    """100x100 canvas with a seeded random source and a flat 0.5 noise field."""
    return FrameContext(width=100.0, height=100.0, rng=random.Random(7), noise=constant_noise(0.5))


@pytest.fixture
def seeded_ctx():
    from lifeart.noise import NoiseField

    return FrameContext(width=700.0, height=700.0, rng=random.Random(1234), noise=NoiseField(1234))


@pytest.fixture(scope="session")
def qt_app():
    from PyQt5 import QtWidgets

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(["lifeart-tests"])
    return app
