# src/boardflow/core/actions.py

from __future__ import annotations

"""
Action value plus the small helpers used to build action types and creators.

Actions are plain immutable values. They are produced by tasks or by UI code,
published on the action bus and consumed by the external store and by any
task waiting for their type.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_ERROR_MESSAGE = "Something bad happened"


@dataclass(slots=True, frozen=True)
class Action:
    type: str
    payload: Any = None
    error: str | None = None


def create_constants(*names: str) -> dict[str, str]:
    """Map every constant name to itself (stable type strings shared with reducers)."""
    return {name: name for name in names}


@dataclass(slots=True, frozen=True)
class ActionTriple:
    """
    request/success/failure creators for one asynchronous operation.

    failure() always carries a message: an empty or missing error falls back
    to DEFAULT_ERROR_MESSAGE.
    """

    request_type: str
    success_type: str
    failure_type: str

    def request(self, payload: Any = None) -> Action:
        return Action(type=self.request_type, payload=payload)

    def success(self, payload: Any = None) -> Action:
        return Action(type=self.success_type, payload=payload)

    def failure(self, error: str | None = None) -> Action:
        return Action(type=self.failure_type, error=error or DEFAULT_ERROR_MESSAGE)

    @property
    def types(self) -> tuple[str, str, str]:
        return (self.request_type, self.success_type, self.failure_type)


def create_actions(request_type: str, success_type: str, failure_type: str) -> ActionTriple:
    return ActionTriple(request_type, success_type, failure_type)


def simple_action(action_type: str) -> Callable[..., Action]:
    def creator(payload: Any = None) -> Action:
        return Action(type=action_type, payload=payload)

    creator.__name__ = action_type.lower()
    return creator
