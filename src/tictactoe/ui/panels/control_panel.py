"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from tictactoe.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: start and reset."""

    start_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont()
        btn_font.setPointSize(10)

        self._btn_start = QPushButton()
        self._btn_start.setFont(btn_font)
        self._btn_start.setMinimumHeight(36)
        self._btn_start.setStyleSheet(
            "QPushButton { background-color: #3a7d44; }"
            "QPushButton:hover { background-color: #4a9d54; }"
        )
        self._btn_start.clicked.connect(self.start_clicked)
        layout.addWidget(self._btn_start)

        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_start.setText(s.btn_start)
        self._btn_reset.setText(s.btn_reset)

    @property
    def start_button(self) -> QPushButton:
        return self._btn_start

    @property
    def reset_button(self) -> QPushButton:
        return self._btn_reset
