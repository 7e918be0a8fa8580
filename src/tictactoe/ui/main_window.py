"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from tictactoe.game.controller import GameController
from tictactoe.game.player import Player
from tictactoe.ui.board.board_widget import BoardWidget
from tictactoe.ui.game_sync import GameSync
from tictactoe.ui.i18n import set_language, t
from tictactoe.ui.panels.control_panel import ControlPanel
from tictactoe.ui.panels.player_panel import PlayerPanel
from tictactoe.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for the tic-tac-toe game."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        set_language(self._settings.language)

        self.setWindowTitle(t().window_title)
        self.setMinimumSize(360, 480)

        self._controller = controller if controller is not None else GameController()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self._game_sync = GameSync(
            controller=self._controller,
            board_widget=self._board_widget,
            player_panel=self._player_panel,
            set_status=self._set_status,
        )
        self._game_sync.connect()

        self._game_sync.render_board()
        self._set_status(t().status_press_start)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._player_panel = PlayerPanel(
            self._settings.player1_default_name,
            self._settings.player2_default_name,
            self._settings.player1_marker,
            self._settings.player2_marker,
        )
        root.addWidget(self._player_panel)

        self._board_widget = BoardWidget()
        root.addWidget(self._board_widget, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_start = QAction(s.menu_start, self)
        self._act_start.setShortcut("Ctrl+N")
        self._act_start.triggered.connect(self._on_start)
        self._menu_game.addAction(self._act_start)

        self._act_reset = QAction(s.menu_reset, self)
        self._act_reset.setShortcut("Ctrl+R")
        self._act_reset.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_reset)

        self._act_reset_scores = QAction(s.menu_reset_scores, self)
        self._act_reset_scores.triggered.connect(self._on_reset_scores)
        self._menu_game.addAction(self._act_reset_scores)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_widget.cell_clicked.connect(self._on_cell_clicked)
        self._control_panel.start_clicked.connect(self._on_start)
        self._control_panel.reset_clicked.connect(self._on_reset)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def player_panel(self) -> PlayerPanel:
        return self._player_panel

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _make_players(self) -> tuple[Player, Player]:
        s = self._settings
        name1, name2 = self._player_panel.player_names()
        return (
            Player(name1 or s.player1_default_name, s.player1_marker),
            Player(name2 or s.player2_default_name, s.player2_marker),
        )

    def _on_start(self) -> None:
        player1, player2 = self._make_players()
        _LOGGER.info("Starting game: %s vs %s", player1.name, player2.name)
        self._controller.init(player1, player2)
        self._game_sync.render_board()
        self._game_sync.update_scores()

    def _on_reset(self) -> None:
        self._controller.reset(True)
        self._game_sync.render_board()
        self._set_status(t().status_game_reset)
        self._game_sync.update_scores()

    def _on_reset_scores(self) -> None:
        self._controller.reset(False)
        self._game_sync.update_scores()

    def _on_cell_clicked(self, index: int) -> None:
        self._controller.play_round(index)

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)
