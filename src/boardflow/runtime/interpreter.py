# src/boardflow/runtime/interpreter.py

from __future__ import annotations

"""
Effect interpreter.

Runs generator tasks cooperatively on the current asyncio loop:
- a task is stepped synchronously until it yields an effect that has to wait
  (a Take, or a Call returning an awaitable),
- Put/Select/Fork and synchronous Calls are performed inline and the task
  continues immediately,
- awaited calls resume the task from the future's done-callback, so no two
  task steps ever run at the same time.

There is no cancellation and no timeout: a call that never finishes leaves
its task suspended forever. A call cancelled from outside is thrown into
the task as CancelledError, so its finally blocks still run.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable, Generator
from typing import Any

from ..core.actions import Action
from ..core.effects import Call, Fork, Put, Select, Take
from ..core.ports import StateReader
from .bus import ActionBus

logger = logging.getLogger(__name__)

Saga = Callable[..., Generator[Any, Any, Any]]


class TaskHandle:
    """Outcome of a spawned task. Failures are recorded here, never re-raised into the loop."""

    def __init__(self, name: str, loop: asyncio.AbstractEventLoop) -> None:
        self.name = name
        self.result: Any = None
        self.error: BaseException | None = None
        self._gen: Generator[Any, Any, Any] | None = None
        self._finished: asyncio.Future[None] = loop.create_future()

    @property
    def done(self) -> bool:
        return self._finished.done()

    async def wait(self) -> Any:
        await asyncio.shield(self._finished)
        if self.error is not None:
            raise self.error
        return self.result

    def _finish(self, result: Any) -> None:
        self.result = result
        if not self._finished.done():
            self._finished.set_result(None)

    def _fail(self, error: BaseException) -> None:
        self.error = error
        if not self._finished.done():
            self._finished.set_result(None)

    def __repr__(self) -> str:
        state = "running"
        if self.done:
            state = "failed" if self.error is not None else "done"
        return f"<TaskHandle {self.name} {state}>"


class Runtime:
    def __init__(self, store: StateReader, bus: ActionBus | None = None, *, name: str = "boardflow") -> None:
        self.store = store
        self.bus = bus or ActionBus()
        self.name = name
        self._in_flight: set[asyncio.Future[Any]] = set()

    def dispatch(self, action: Action) -> None:
        """Entry point for UI / external code."""
        self.bus.publish(action)

    def spawn(self, saga: Saga, *args: Any, **kwargs: Any) -> TaskHandle:
        loop = asyncio.get_running_loop()
        name = getattr(saga, "__name__", repr(saga))
        handle = TaskHandle(name, loop)

        gen = saga(*args, **kwargs)
        if not inspect.isgenerator(gen):
            handle._finish(gen)
            return handle

        handle._gen = gen
        logger.debug("[%s] spawn %s", self.name, name)
        self._step(handle, None, None)
        return handle

    async def run(self, saga: Saga, *args: Any, **kwargs: Any) -> Any:
        """Spawn a task and wait for its result."""
        return await self.spawn(saga, *args, **kwargs).wait()

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    async def settle(self) -> None:
        """Wait until no call is in flight (tasks blocked on Take do not count)."""
        while self._in_flight:
            await asyncio.wait(set(self._in_flight))
            await asyncio.sleep(0)

    def _step(self, handle: TaskHandle, value: Any, error: BaseException | None) -> None:
        gen = handle._gen
        assert gen is not None

        while True:
            try:
                if error is not None:
                    exc, error = error, None
                    effect = gen.throw(exc)
                else:
                    effect = gen.send(value)
            except StopIteration as stop:
                handle._finish(stop.value)
                logger.debug("[%s] done %s", self.name, handle.name)
                return
            except asyncio.CancelledError as exc:
                logger.warning("[%s] task %s cancelled", self.name, handle.name)
                handle._fail(exc)
                return
            except Exception as exc:
                logger.exception("[%s] task %s crashed", self.name, handle.name)
                handle._fail(exc)
                return

            value = None

            if isinstance(effect, Put):
                self.bus.publish(effect.action)
                continue

            if isinstance(effect, Select):
                try:
                    value = effect.selector(self.store.get_state(), *effect.args)
                except Exception as exc:
                    error = exc
                continue

            if isinstance(effect, Take):
                self.bus.take(effect.pattern, lambda action, h=handle: self._step(h, action, None))
                return

            if isinstance(effect, Fork):
                value = self.spawn(effect.fn, *effect.args)
                continue

            if isinstance(effect, Call):
                try:
                    result = effect.fn(*effect.args, **effect.kwargs)
                except Exception as exc:
                    error = exc
                    continue

                if inspect.isawaitable(result):
                    self._await(handle, result)
                    return

                value = result
                continue

            error = TypeError(f"{handle.name} yielded a non-effect value: {effect!r}")

    def _await(self, handle: TaskHandle, awaitable: Any) -> None:
        fut = asyncio.ensure_future(awaitable)
        self._in_flight.add(fut)

        def _resume(f: asyncio.Future[Any]) -> None:
            self._in_flight.discard(f)
            if f.cancelled():
                # Unwind the task so its finally blocks still run.
                self._step(handle, None, asyncio.CancelledError())
                return
            exc = f.exception()
            if exc is not None:
                self._step(handle, None, exc)
            else:
                self._step(handle, f.result(), None)

        fut.add_done_callback(_resume)
