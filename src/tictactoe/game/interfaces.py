"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on the concrete Player implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a tic-tac-toe session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    GAME_OVER = auto()


# ── Event names ──────────────────────────────────────────────────────────────


class GameEvent(str, Enum):
    """Names of the events emitted by the controller.

    Members compare equal to their plain-string values, so listeners may
    subscribe with either ``GameEvent.WIN`` or ``"win"``.
    """

    START = "start"
    MOVE = "move"
    SWITCH = "switch"
    WIN = "win"
    DRAW = "draw"
    RESET = "reset"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def marker(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @property
    @abstractmethod
    def score(self) -> int: ...

    @abstractmethod
    def increment_score(self) -> None:
        """Add one win to the running score."""

    @abstractmethod
    def reset_score(self) -> None:
        """Set the running score back to zero."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def init(self, player1: IPlayer, player2: IPlayer) -> None:
        """Start a new game between *player1* (moves first) and *player2*."""

    @abstractmethod
    def play_round(self, index: int) -> None:
        """Place the current player's marker on cell *index*."""

    @abstractmethod
    def reset(self, keep_scores: bool = True) -> None:
        """Clear the board and hand the first move back to player 1."""

    @abstractmethod
    def end_game(self) -> None:
        """Stop accepting moves without notifying listeners."""
