"""Concrete player implementation."""

from __future__ import annotations

from tictactoe.game.interfaces import IPlayer


class Player(IPlayer):
    """A named participant holding one marker and a running score.

    The marker and the human flag are fixed at construction.  Nothing here
    checks that two players use different markers; whoever builds the pair
    owns that decision.
    """

    __slots__ = ("_name", "_marker", "_is_human", "_score")

    def __init__(self, name: str, marker: str, is_human: bool = True) -> None:
        self._name = name
        self._marker = marker
        self._is_human = is_human
        self._score = 0

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        # Empty input keeps the previous name.
        self._name = value or self._name

    @property
    def marker(self) -> str:
        return self._marker

    @property
    def is_human(self) -> bool:
        return self._is_human

    @property
    def score(self) -> int:
        return self._score

    def increment_score(self) -> None:
        self._score += 1

    def reset_score(self) -> None:
        self._score = 0

    def __repr__(self) -> str:
        return f"Player({self._name!r}, {self._marker!r}, score={self._score})"
