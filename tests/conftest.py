"""Shared fixtures for the game and UI tests."""

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from games.guess_number import GameState


class FixedRandom(random.Random):
    """Random source whose randint always yields the queued values in order."""

    def __init__(self, *values: int) -> None:
        super().__init__(0)
        self._values = list(values)

    def randint(self, a: int, b: int) -> int:
        if self._values:
            return self._values.pop(0)
        return super().randint(a, b)


@pytest.fixture
def make_state():
    def _make(*targets: int) -> GameState:
        return GameState(rng=FixedRandom(*targets))

    return _make


@pytest.fixture
def state(make_state) -> GameState:
    return make_state(50)


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
