"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from chesslite.game.state import GameState

# UI tests never open real windows.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication for the whole run, styled like the real app."""
    from PyQt6.QtWidgets import QApplication

    from chesslite.ui.bootstrap import _configure_application

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
        _configure_application(app)
    yield app


@pytest.fixture
def game() -> GameState:
    """A session set up at the starting position."""
    state = GameState()
    state.setup()
    return state


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close windows a UI test left open."""
    if "ui" not in Path(str(request.node.fspath)).parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
