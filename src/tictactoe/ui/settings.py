"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings. Held in memory only."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Players
    player1_default_name: str = "Player 1"
    player2_default_name: str = "Player 2"
    player1_marker: str = "X"
    player2_marker: str = "O"
