"""UI/game state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from tictactoe.game.controller import GameController
from tictactoe.game.events import Payload
from tictactoe.game.interfaces import GameEvent
from tictactoe.ui.board.board_widget import BoardWidget
from tictactoe.ui.i18n import t
from tictactoe.ui.panels.player_panel import PlayerPanel


class GameSync:
    """Applies controller events to UI widgets."""

    __slots__ = (
        "_controller",
        "_board_widget",
        "_player_panel",
        "_set_status",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        board_widget: BoardWidget,
        player_panel: PlayerPanel,
        set_status: Callable[[str], None],
    ) -> None:
        self._controller = controller
        self._board_widget = board_widget
        self._player_panel = player_panel
        self._set_status = set_status

    def connect(self) -> None:
        """Subscribe to every controller event. Call once per controller."""
        ctrl = self._controller
        ctrl.on(GameEvent.START, self.on_start)
        ctrl.on(GameEvent.MOVE, self.on_move)
        ctrl.on(GameEvent.SWITCH, self.on_switch)
        ctrl.on(GameEvent.WIN, self.on_win)
        ctrl.on(GameEvent.DRAW, self.on_draw)
        ctrl.on(GameEvent.RESET, self.on_reset)
        ctrl.on(GameEvent.INVALID, self.on_invalid)

    # ── Event handlers ───────────────────────────────────────────────────

    def on_start(self, payload: Payload) -> None:
        self.render_board()
        self._announce_turn(payload)
        self.update_scores()

    def on_move(self, _payload: Payload) -> None:
        self.render_board()
        name = self._controller.current_player.name
        self._set_status(t().status_turn.format(name=name))

    def on_switch(self, payload: Payload) -> None:
        self._announce_turn(payload)

    def on_win(self, payload: Payload) -> None:
        self.render_board()
        self._board_widget.highlight_pattern(payload["pattern"])
        self._set_status(t().status_wins.format(name=payload["winner"].name))
        self.update_scores()

    def on_draw(self, _payload: Payload) -> None:
        self.render_board()
        self._set_status(t().status_draw)

    def on_reset(self, _payload: Payload) -> None:
        self.render_board()
        self._set_status(t().status_board_cleared)

    def on_invalid(self, _payload: Payload) -> None:
        self._set_status(t().status_invalid_move)

    # ── Rendering ────────────────────────────────────────────────────────

    def render_board(self) -> None:
        self._board_widget.set_cells(self._controller.board.get_board())

    def update_scores(self) -> None:
        player1, player2 = self._controller.players
        self._player_panel.set_scores(player1.score, player2.score)

    def _announce_turn(self, payload: Payload) -> None:
        player = payload["current_player"]
        self._set_status(
            t().status_turn_with_marker.format(name=player.name, marker=player.marker)
        )
