"""Visual theme constants and QSS styles for the tic-tac-toe UI."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the 3x3 grid."""

    cell: QColor
    cell_hover: QColor
    cell_taken: QColor
    cell_win: QColor  # winning line highlight
    marker_x: QColor
    marker_o: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            cell=QColor(60, 60, 60),
            cell_hover=QColor(80, 80, 80),
            cell_taken=QColor(50, 50, 50),
            cell_win=QColor(58, 125, 68),  # green
            marker_x=QColor(230, 126, 34),  # orange
            marker_o=QColor(52, 152, 219),  # blue
        )

    def cell_style(self, marker: str, *, winning: bool = False) -> str:
        """QSS for a single cell button."""
        if winning:
            background = self.cell_win
        elif marker:
            background = self.cell_taken
        else:
            background = self.cell
        color = self.marker_o if marker == "O" else self.marker_x
        return (
            f"QPushButton {{ background-color: {background.name()};"
            f" color: {color.name()}; font-size: 36px; font-weight: bold; }}"
            f"QPushButton:hover {{ background-color: {self.cell_hover.name()}; }}"
            f"QPushButton:disabled {{ background-color: {background.name()};"
            f" color: {color.name()}; }}"
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    padding: 4px 6px;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
