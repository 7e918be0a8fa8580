"""PlayerPanel — name entry and score display for both players."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFormLayout, QHBoxLayout, QLabel, QLineEdit, QWidget

from tictactoe.ui.i18n import t


class _PlayerRow(QWidget):
    """Name field followed by the player's score."""

    def __init__(self, default_name: str) -> None:
        super().__init__()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText(default_name)
        self.name_edit.setMaxLength(24)
        layout.addWidget(self.name_edit, stretch=1)

        self.score_caption = QLabel()
        layout.addWidget(self.score_caption)

        self.score_value = QLabel("0")
        score_font = QFont()
        score_font.setPointSize(14)
        score_font.setBold(True)
        self.score_value.setFont(score_font)
        self.score_value.setMinimumWidth(28)
        layout.addWidget(self.score_value)


class PlayerPanel(QWidget):
    """Two player rows: editable names, read-only scores."""

    def __init__(
        self,
        player1_default: str = "Player 1",
        player2_default: str = "Player 2",
        player1_marker: str = "X",
        player2_marker: str = "O",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._markers = (player1_marker, player2_marker)
        self._form = QFormLayout(self)
        self._form.setContentsMargins(4, 4, 4, 4)
        self._form.setSpacing(8)

        self._label1 = QLabel()
        self._row1 = _PlayerRow(player1_default)
        self._form.addRow(self._label1, self._row1)

        self._label2 = QLabel()
        self._row2 = _PlayerRow(player2_default)
        self._form.addRow(self._label2, self._row2)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._label1.setText(s.player1_label.format(marker=self._markers[0]))
        self._label2.setText(s.player2_label.format(marker=self._markers[1]))
        self._row1.score_caption.setText(s.score_label)
        self._row2.score_caption.setText(s.score_label)

    def player_names(self) -> tuple[str, str]:
        """Names as typed, stripped. Empty when the field is blank."""
        return (
            self._row1.name_edit.text().strip(),
            self._row2.name_edit.text().strip(),
        )

    def set_player_names(self, name1: str, name2: str) -> None:
        self._row1.name_edit.setText(name1)
        self._row2.name_edit.setText(name2)

    def set_scores(self, score1: int, score2: int) -> None:
        self._row1.score_value.setText(str(score1))
        self._row2.score_value.setText(str(score2))

    def scores_text(self) -> tuple[str, str]:
        return self._row1.score_value.text(), self._row2.score_value.text()

    def labels_text(self) -> tuple[str, str]:
        return self._label1.text(), self._label2.text()
