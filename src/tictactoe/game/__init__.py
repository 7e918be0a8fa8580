"""Game management layer — controller, players, event registry.

Quick start::

    from tictactoe.game import GameController, Player

    ctrl = GameController()
    ctrl.on("win", lambda payload: print(payload["winner"].name, "wins"))
    ctrl.init(Player("Alice", "X"), Player("Bob", "O"))
    for index in (0, 3, 1, 4, 2):
        ctrl.play_round(index)
"""

from tictactoe.game.controller import GameController, Players
from tictactoe.game.events import EventBus, Listener, Payload
from tictactoe.game.interfaces import GameEvent, GamePhase, IGameController, IPlayer
from tictactoe.game.player import Player

__all__ = [
    # Interfaces
    "GameEvent",
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "EventBus",
    "GameController",
    "Listener",
    "Payload",
    "Player",
    "Players",
]
