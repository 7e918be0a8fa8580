"""Shared pytest fixtures: players, controllers, event and status recorders,
and the Qt plumbing the UI tests need."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any, NamedTuple

import pytest

from tictactoe.game.controller import GameController
from tictactoe.game.interfaces import GameEvent
from tictactoe.game.player import Player

if TYPE_CHECKING:
    from tictactoe.ui.board.board_widget import BoardWidget
    from tictactoe.ui.panels.player_panel import PlayerPanel

# Headless Linux needs the offscreen Qt platform before any widget exists.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


# ── Recorders ────────────────────────────────────────────────────────────────


class EventRecorder:
    """Collects ``(event name, payload)`` pairs from a controller."""

    def __init__(self) -> None:
        self.log: list[tuple[str, dict[str, Any]]] = []

    def attach(self, ctrl: GameController) -> EventRecorder:
        for event in GameEvent:
            ctrl.on(event, self._listener(event.value))
        return self

    def _listener(self, name: str):
        return lambda payload: self.log.append((name, payload))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.log]


class StatusRecorder:
    """Stands in for a status-line setter."""

    def __init__(self) -> None:
        self.history: list[str] = []

    def __call__(self, text: str) -> None:
        self.history.append(text)


class SyncedWidgets(NamedTuple):
    controller: GameController
    board: BoardWidget
    panel: PlayerPanel
    status: StatusRecorder


# ── Game fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def alice() -> Player:
    return Player("Alice", "X")


@pytest.fixture
def bob() -> Player:
    return Player("Bob", "O")


@pytest.fixture
def controller(alice: Player, bob: Player) -> GameController:
    """Started game, Alice (X) to move against Bob (O)."""
    ctrl = GameController()
    ctrl.init(alice, bob)
    return ctrl


@pytest.fixture
def recorder() -> EventRecorder:
    """Unattached recorder; call ``attach(ctrl)`` once the setup moves are made."""
    return EventRecorder()


# ── Qt fixtures ──────────────────────────────────────────────────────────────


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication for the whole session."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def synced(qapp) -> SyncedWidgets:
    """Unstarted controller wired to a board widget and player panel."""
    from tictactoe.ui.board.board_widget import BoardWidget
    from tictactoe.ui.game_sync import GameSync
    from tictactoe.ui.panels.player_panel import PlayerPanel

    parts = SyncedWidgets(
        controller=GameController(),
        board=BoardWidget(),
        panel=PlayerPanel(),
        status=StatusRecorder(),
    )
    GameSync(
        controller=parts.controller,
        board_widget=parts.board,
        player_panel=parts.panel,
        set_status=parts.status,
    ).connect()
    return parts


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Every test starts and ends in English."""
    from tictactoe.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close top-level widgets left behind by a UI test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
