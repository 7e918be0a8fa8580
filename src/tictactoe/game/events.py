"""Synchronous in-process event registry used by the controller."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from tictactoe.game.interfaces import GameEvent

_LOGGER = logging.getLogger(__name__)

Payload = dict[str, Any]
Listener = Callable[[Payload], None]


class EventBus:
    """Observable callbacks keyed by event name. Multiple handlers per event.

    Delivery is synchronous and in registration order.  A listener that
    raises aborts delivery to the remaining listeners and the exception
    reaches the caller of :meth:`emit`.
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event: GameEvent | str, callback: Listener) -> None:
        """Register *callback* for *event*."""
        self._listeners.setdefault(str(event), []).append(callback)

    def emit(self, event: GameEvent | str, payload: Payload | None = None) -> None:
        """Call every listener registered for *event* with *payload*."""
        name = str(event)
        callbacks = self._listeners.get(name)
        if not callbacks:
            return
        if payload is None:
            payload = {}
        _LOGGER.debug("Emitting %r to %d listener(s)", name, len(callbacks))
        for cb in list(callbacks):
            try:
                cb(payload)
            except Exception:
                _LOGGER.error("Listener %r failed while handling %r", cb, name)
                raise

    def listener_count(self, event: GameEvent | str) -> int:
        return len(self._listeners.get(str(event), ()))
