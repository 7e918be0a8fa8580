"""Tests for MainWindow wiring between widgets and the controller."""

from __future__ import annotations

import pytest

from tictactoe.core.board import EMPTY
from tictactoe.game.controller import GameController
from tictactoe.ui.i18n import t
from tictactoe.ui.main_window import MainWindow
from tictactoe.ui.settings import AppSettings


@pytest.fixture
def window(qapp) -> MainWindow:
    return MainWindow()


def _click_cells(window: MainWindow, *indices: int) -> None:
    for index in indices:
        window.board_widget.cell_button(index).click()


class TestStartup:
    def test_press_start_status(self, window: MainWindow) -> None:
        assert window.status_text() == "Press Start"

    def test_clicks_ignored_before_start(self, window: MainWindow) -> None:
        _click_cells(window, 0)
        assert window.controller.board.get_cell(0) == EMPTY
        assert window.board_widget.cell_button(0).text() == ""


class TestStart:
    def test_start_uses_default_names(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        p1, p2 = window.controller.players
        assert (p1.name, p1.marker) == ("Player 1", "X")
        assert (p2.name, p2.marker) == ("Player 2", "O")
        assert window.status_text() == "Player 1's turn (X)"

    def test_start_uses_typed_names(self, window: MainWindow) -> None:
        window.player_panel.set_player_names("  Alice ", "Bob")
        window.control_panel.start_button.click()
        p1, p2 = window.controller.players
        assert (p1.name, p2.name) == ("Alice", "Bob")
        assert window.status_text() == "Alice's turn (X)"

    def test_custom_settings(self, qapp) -> None:
        settings = AppSettings(player1_default_name="Ann", player2_default_name="Ben")
        window = MainWindow(settings)
        window.control_panel.start_button.click()
        assert [p.name for p in window.controller.players] == ["Ann", "Ben"]

    def test_injected_controller(self, qapp) -> None:
        ctrl = GameController()
        window = MainWindow(controller=ctrl)
        assert window.controller is ctrl


class TestPlay:
    def test_cell_click_plays_round(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 4)
        assert window.controller.board.get_cell(4) == "X"
        assert window.board_widget.cell_button(4).text() == "X"
        assert not window.board_widget.cell_button(4).isEnabled()
        assert window.status_text() == "Player 2's turn (O)"

    def test_win_updates_status_scores_and_highlight(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 0, 3, 1, 4, 2)
        assert window.status_text() == "Player 1 wins!"
        assert window.player_panel.scores_text() == ("1", "0")
        assert all(window.board_widget.is_highlighted(i) for i in (0, 1, 2))

    def test_draw_status(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
        assert window.status_text() == "It's a draw!"
        assert window.player_panel.scores_text() == ("0", "0")

    def test_invalid_move_status(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 0)
        window.controller.play_round(0)
        assert window.status_text() == t().status_invalid_move


class TestReset:
    def test_reset_keeps_scores(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 0, 3, 1, 4, 2)
        window.control_panel.reset_button.click()

        assert window.status_text() == "Game reset - click Start to play"
        assert window.player_panel.scores_text() == ("1", "0")
        assert all(
            window.board_widget.cell_button(i).text() == "" for i in range(9)
        )
        assert not window.board_widget.is_highlighted(0)
        assert window.controller.current_player is window.controller.players.player1

    def test_reset_scores_action(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 0, 3, 1, 4, 2)
        window._act_reset_scores.trigger()
        assert window.player_panel.scores_text() == ("0", "0")
        assert window.status_text() == "Board cleared"

    def test_restart_keeps_new_players_scoreless(self, window: MainWindow) -> None:
        window.control_panel.start_button.click()
        _click_cells(window, 0, 3, 1, 4, 2)
        window.control_panel.start_button.click()
        assert window.player_panel.scores_text() == ("0", "0")
        assert window.status_text() == "Player 1's turn (X)"


class TestLanguage:
    def test_russian_status(self, qapp) -> None:
        window = MainWindow(AppSettings(language="Russian"))
        assert window.status_text() == "Нажмите «Старт»"
        assert window.windowTitle() == "Крестики-нолики"


class TestPlayerLabels:
    def test_default_markers_in_labels(self, window: MainWindow) -> None:
        assert window.player_panel.labels_text() == ("Player 1 (X)", "Player 2 (O)")

    def test_custom_markers_in_labels(self, qapp) -> None:
        settings = AppSettings(player1_marker="O", player2_marker="X")
        window = MainWindow(settings)
        assert window.player_panel.labels_text() == ("Player 1 (O)", "Player 2 (X)")
        window.control_panel.start_button.click()
        assert window.controller.current_player.marker == "O"
