"""Core domain layer — board and rules with zero external dependencies.

Quick start::

    from tictactoe.core import Board, Rules

    board = Board()
    for index in (0, 4, 1, 5, 2):
        board.set_cell(index, "X" if index in (0, 1, 2) else "O")
    print(Rules.winner(board))
"""

from tictactoe.core.board import BOARD_CELLS, EMPTY, Board
from tictactoe.core.rules import WIN_PATTERNS, Rules, WinningLine, WinPattern

__all__ = [
    # Constants
    "BOARD_CELLS",
    "EMPTY",
    "WIN_PATTERNS",
    # Types
    "WinPattern",
    # Domain objects
    "Board",
    "Rules",
    "WinningLine",
]
