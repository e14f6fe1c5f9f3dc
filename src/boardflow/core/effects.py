# src/boardflow/core/effects.py

from __future__ import annotations

"""
Effect descriptors.

Tasks are generators that yield these values instead of doing IO themselves.
A descriptor only says what should happen; the runtime (runtime/interpreter.py)
performs it and resumes the task with the outcome:

- Call   -> the function's result (awaited if it returns an awaitable), or the
            raised exception thrown back into the task
- Put    -> None, after the action has been published on the bus
- Select -> the selector applied to the current state snapshot
- Take   -> the first matching action published after the take was issued
- Fork   -> the TaskHandle of the started child task (no waiting)

Keeping them as plain values lets tests step a task by hand and compare the
yielded effects with ==.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from .actions import Action

ANY = "*"

Pattern = str | Iterable[str]


@dataclass(slots=True, frozen=True)
class Call:
    fn: Callable[..., Any]
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Put:
    action: Action


@dataclass(slots=True, frozen=True)
class Select:
    selector: Callable[..., Any]
    args: tuple[Any, ...] = ()


@dataclass(slots=True, frozen=True)
class Take:
    pattern: str | tuple[str, ...]


@dataclass(slots=True, frozen=True)
class Fork:
    fn: Callable[..., Any]
    args: tuple[Any, ...] = ()


Effect = Call | Put | Select | Take | Fork


def call(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Call:
    return Call(fn=fn, args=args, kwargs=kwargs)


def put(action: Action) -> Put:
    return Put(action=action)


def select(selector: Callable[..., Any] | None = None, *args: Any) -> Select:
    """select() with no selector returns the whole state snapshot."""
    return Select(selector=selector or _identity, args=args)


def take(pattern: Pattern) -> Take:
    if isinstance(pattern, str):
        return Take(pattern=pattern)
    return Take(pattern=tuple(pattern))


def fork(fn: Callable[..., Any], *args: Any) -> Fork:
    return Fork(fn=fn, args=args)


def matches(pattern: str | tuple[str, ...], action: Action) -> bool:
    if isinstance(pattern, str):
        return pattern == ANY or pattern == action.type
    return action.type in pattern or ANY in pattern


def _identity(state: Any) -> Any:
    return state
