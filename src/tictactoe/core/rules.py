"""Win detection over a board snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tictactoe.core.board import EMPTY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tictactoe.core.board import Board

WinPattern = tuple[int, int, int]

# Rows, columns, diagonals. Scan order decides which line is reported.
WIN_PATTERNS: tuple[WinPattern, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinningLine:
    """A completed line: the marker that filled it and the cell triple."""

    marker: str
    pattern: WinPattern


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def find_winning_line(cells: Sequence[str]) -> WinningLine | None:
        """First pattern whose three cells hold the same non-empty marker."""
        for pattern in WIN_PATTERNS:
            a, b, c = pattern
            if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
                return WinningLine(marker=cells[a], pattern=pattern)
        return None

    @staticmethod
    def winner(board: Board) -> WinningLine | None:
        return Rules.find_winning_line(board.get_board())

    @staticmethod
    def is_draw(board: Board) -> bool:
        """Full board with no completed line."""
        return board.is_full() and Rules.winner(board) is None
