# src/boardflow/runtime/bus.py

from __future__ import annotations

"""
In-process action bus.

Two kinds of listeners:
- subscribers: see every action (the store's reducer hook, loggers, the CLI)
- takers: one-shot waiters registered by a suspended task's Take effect

Delivery is synchronous and fan-out: every taker matching an action is
resumed by that single occurrence, none of them consumes it for the others.
An action published while another one is being delivered is queued, so
listeners always observe actions in publish order.
"""

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from ..core.actions import Action
from ..core.effects import matches

logger = logging.getLogger(__name__)

Listener = Callable[[Action], None]


@dataclass(slots=True, eq=False)
class _Taker:
    pattern: str | tuple[str, ...]
    callback: Listener


class ActionBus:
    def __init__(self) -> None:
        self._subscribers: list[Listener] = []
        self._takers: list[_Taker] = []
        self._queue: deque[Action] = deque()
        self._delivering = False

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def take(self, pattern: str | tuple[str, ...], callback: Listener) -> None:
        self._takers.append(_Taker(pattern=pattern, callback=callback))

    @property
    def waiting(self) -> int:
        return len(self._takers)

    def publish(self, action: Action) -> None:
        self._queue.append(action)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._queue:
                self._deliver(self._queue.popleft())
        finally:
            self._delivering = False

    def _deliver(self, action: Action) -> None:
        logger.debug("publish %s", action.type)

        for callback in list(self._subscribers):
            try:
                callback(action)
            except Exception:
                logger.exception("subscriber failed action=%s", action.type)

        # Takers registered while this action is delivered must not see it.
        matched = [t for t in self._takers if matches(t.pattern, action)]
        if not matched:
            return
        self._takers = [t for t in self._takers if t not in matched]

        for taker in matched:
            try:
                taker.callback(action)
            except Exception:
                logger.exception("taker failed action=%s", action.type)
