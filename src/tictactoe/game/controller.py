"""GameController — the central orchestrator of a tic-tac-toe session.

Coordinates: Players, Board, Rules.
Emits events via a synchronous registry so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from tictactoe.core.board import Board
from tictactoe.core.rules import Rules
from tictactoe.game.events import EventBus, Listener, Payload
from tictactoe.game.interfaces import GameEvent, GamePhase, IGameController, IPlayer
from tictactoe.game.player import Player

_LOGGER = logging.getLogger(__name__)


class Players(NamedTuple):
    player1: IPlayer
    player2: IPlayer


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates rounds: places markers, detects wins and draws,
    keeps score, switches turns, notifies listeners.

    Events and payload keys:

    * ``start``   — ``current_player``
    * ``move``    — ``index``, ``marker``, ``current_player``
    * ``switch``  — ``current_player``
    * ``win``     — ``winner``, ``pattern``
    * ``draw``    — (empty)
    * ``reset``   — ``current_player``
    * ``invalid`` — ``index``

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Listeners run inline, before the triggering call
    returns.
    """

    __slots__ = (
        "_board",
        "_player1",
        "_player2",
        "_current",
        "_game_over",
        "_started",
        "_events",
    )

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board()
        self._player1: IPlayer = Player("Player 1", "X")
        self._player2: IPlayer = Player("Player 2", "O")
        self._current: IPlayer = self._player1
        self._game_over = True
        self._started = False
        self._events = EventBus()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> IPlayer:
        return self._current

    @property
    def players(self) -> Players:
        return Players(self._player1, self._player2)

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def phase(self) -> GamePhase:
        if not self._started:
            return GamePhase.NOT_STARTED
        if self._game_over:
            return GamePhase.GAME_OVER
        return GamePhase.IN_PROGRESS

    # ── Event registry ───────────────────────────────────────────────────

    def on(self, event: GameEvent | str, callback: Listener) -> None:
        """Subscribe *callback* to *event* (see class docstring)."""
        self._events.on(event, callback)

    def _emit(self, event: GameEvent | str, payload: Payload | None = None) -> None:
        self._events.emit(event, payload)

    # ── IGameController impl ─────────────────────────────────────────────

    def init(self, player1: IPlayer, player2: IPlayer) -> None:
        if player1.marker == player2.marker:
            # Win attribution falls back to player1 in this case.
            _LOGGER.warning(
                "Both players use marker %r; wins will be credited to %s",
                player1.marker,
                player1.name,
            )
        self._player1 = player1
        self._player2 = player2
        self._current = player1
        self._game_over = False
        self._started = True
        self._board.reset()
        _LOGGER.debug("New game: %s vs %s", player1.name, player2.name)
        self._emit(GameEvent.START, {"current_player": self._current})

    def play_round(self, index: int) -> None:
        if self._game_over:
            return

        mover = self._current
        if not self._board.set_cell(index, mover.marker):
            self._emit(GameEvent.INVALID, {"index": index})
            return

        _LOGGER.debug("%s placed %s on cell %d", mover.name, mover.marker, index)
        self._emit(
            GameEvent.MOVE,
            {"index": index, "marker": mover.marker, "current_player": mover},
        )

        line = Rules.winner(self._board)
        if line is not None:
            winner = (
                self._player1
                if self._player1.marker == line.marker
                else self._player2
            )
            winner.increment_score()
            self._game_over = True
            _LOGGER.debug("%s wins on %s", winner.name, line.pattern)
            self._emit(GameEvent.WIN, {"winner": winner, "pattern": line.pattern})
            return

        if self._board.is_full():
            self._game_over = True
            _LOGGER.debug("Board full, game drawn")
            self._emit(GameEvent.DRAW, {})
            return

        self._switch_turn()

    def reset(self, keep_scores: bool = True) -> None:
        self._board.reset()
        self._current = self._player1
        self._game_over = False
        self._started = True
        if not keep_scores:
            self._player1.reset_score()
            self._player2.reset_score()
        self._emit(GameEvent.RESET, {"current_player": self._current})

    def end_game(self) -> None:
        self._game_over = True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _switch_turn(self) -> None:
        self._current = (
            self._player2 if self._current is self._player1 else self._player1
        )
        self._emit(GameEvent.SWITCH, {"current_player": self._current})
