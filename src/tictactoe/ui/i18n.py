"""Internationalisation strings for the tic-tac-toe UI.

Usage::

    from tictactoe.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_start)                       # "Старт"
    print(t().status_wins.format(name="Bob"))  # "Bob побеждает!"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_start: str
    menu_reset: str
    menu_reset_scores: str
    menu_quit: str

    status_press_start: str
    status_turn_with_marker: str  # "{name}'s turn ({marker})"
    status_turn: str  # "{name}'s turn"
    status_wins: str  # "{name} wins!"
    status_draw: str
    status_board_cleared: str
    status_game_reset: str
    status_invalid_move: str

    # ── PlayerPanel ──────────────────────────────────────────────────────
    player1_label: str  # "Player 1 ({marker})"
    player2_label: str
    score_label: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_start: str
    btn_reset: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Tic-Tac-Toe",
    menu_game="&Game",
    menu_start="&Start",
    menu_reset="&Reset Board",
    menu_reset_scores="Reset &Scores",
    menu_quit="&Quit",
    status_press_start="Press Start",
    status_turn_with_marker="{name}'s turn ({marker})",
    status_turn="{name}'s turn",
    status_wins="{name} wins!",
    status_draw="It's a draw!",
    status_board_cleared="Board cleared",
    status_game_reset="Game reset - click Start to play",
    status_invalid_move="Invalid move - cell already taken!",
    player1_label="Player 1 ({marker})",
    player2_label="Player 2 ({marker})",
    score_label="Score:",
    btn_start="Start",
    btn_reset="Reset",
)

_RU = Strings(
    window_title="Крестики-нолики",
    menu_game="&Игра",
    menu_start="&Старт",
    menu_reset="&Очистить доску",
    menu_reset_scores="Сбросить &счёт",
    menu_quit="&Выход",
    status_press_start="Нажмите «Старт»",
    status_turn_with_marker="Ход: {name} ({marker})",
    status_turn="Ход: {name}",
    status_wins="{name} побеждает!",
    status_draw="Ничья!",
    status_board_cleared="Доска очищена",
    status_game_reset="Игра сброшена — нажмите «Старт»",
    status_invalid_move="Недопустимый ход — клетка занята!",
    player1_label="Игрок 1 ({marker})",
    player2_label="Игрок 2 ({marker})",
    score_label="Счёт:",
    btn_start="Старт",
    btn_reset="Сброс",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
