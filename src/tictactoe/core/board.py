"""Board - marker placement on a 3x3 grid."""

from __future__ import annotations

BOARD_CELLS = 9
EMPTY = ""


class Board:
    """Mutable 9-cell board, indexed 0..8 row by row.

    A cell holds either :data:`EMPTY` or a marker string.  Once a marker is
    placed it stays until :meth:`reset`.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[str] = [EMPTY] * BOARD_CELLS

    # -- Element access -----------------------------------------------------

    def get_board(self) -> list[str]:
        """Independent copy of all 9 cells."""
        return self._cells.copy()

    def get_cell(self, index: int) -> str | None:
        """Value at *index*, or ``None`` when the index is off the board."""
        if 0 <= index < BOARD_CELLS:
            return self._cells[index]
        return None

    def set_cell(self, index: int, marker: str) -> bool:
        """Place *marker* on an empty cell. Returns False if rejected."""
        if index < 0 or index >= BOARD_CELLS:
            return False
        if self._cells[index] != EMPTY:
            return False
        self._cells[index] = marker
        return True

    # -- Query helpers ------------------------------------------------------

    def is_full(self) -> bool:
        return all(cell != EMPTY for cell in self._cells)

    def available_moves(self) -> list[int]:
        """Indices of empty cells, ascending."""
        return [i for i, cell in enumerate(self._cells) if cell == EMPTY]

    # -- Mutation / copying -------------------------------------------------

    def reset(self) -> None:
        self._cells = [EMPTY] * BOARD_CELLS

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return BOARD_CELLS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(3):
            cells = self._cells[row * 3 : row * 3 + 3]
            rows.append(" ".join(cell or "." for cell in cells))
        return "\n".join(rows)
