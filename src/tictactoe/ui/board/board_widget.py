"""BoardWidget — 3x3 grid of clickable cells."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from tictactoe.core.board import BOARD_CELLS, EMPTY
from tictactoe.ui.styles.theme import BoardTheme


class BoardWidget(QWidget):
    """Renders board cells and reports clicks by cell index.

    Signals:
        cell_clicked(int): Index 0..8 of the clicked cell.
    """

    cell_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._cells: list[str] = [EMPTY] * BOARD_CELLS
        self._winning: set[int] = set()
        self._buttons: list[QPushButton] = []
        self._setup_ui()
        self._refresh()

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        for index in range(BOARD_CELLS):
            btn = QPushButton()
            btn.setMinimumSize(96, 96)
            btn.setSizePolicy(
                QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
            )
            btn.clicked.connect(
                lambda _checked=False, i=index: self.cell_clicked.emit(i)
            )
            layout.addWidget(btn, index // 3, index % 3)
            self._buttons.append(btn)

    # ── Public API ───────────────────────────────────────────────────────

    def set_cells(self, cells: Sequence[str]) -> None:
        """Show *cells* and drop any winning-line highlight."""
        self._cells = list(cells)
        self._winning.clear()
        self._refresh()

    def highlight_pattern(self, pattern: Iterable[int]) -> None:
        self._winning = set(pattern)
        self._refresh()

    def cell_button(self, index: int) -> QPushButton:
        return self._buttons[index]

    def is_highlighted(self, index: int) -> bool:
        return index in self._winning

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        for index, btn in enumerate(self._buttons):
            marker = self._cells[index]
            btn.setText(marker)
            btn.setEnabled(marker == EMPTY)
            btn.setStyleSheet(
                self._theme.cell_style(marker, winning=index in self._winning)
            )
