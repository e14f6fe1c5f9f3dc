# src/boardflow/core/completion.py

from __future__ import annotations

import asyncio
from typing import Any, Callable

from .errors import SubmissionRejected


class Completion:
    """
    One-shot completion handle passed inside a request payload.

    UI code builds the request with `payload={..., **handle.callbacks()}` and
    awaits `handle.wait()`; the task fulfils it with resolve() or reject().
    Only the first fulfilment counts.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[None] = asyncio.get_running_loop().create_future()

    def resolve(self) -> None:
        if not self._future.done():
            self._future.set_result(None)

    def reject(self) -> None:
        if not self._future.done():
            self._future.set_exception(SubmissionRejected("submission rejected"))

    def callbacks(self) -> dict[str, Callable[[], None]]:
        return {"resolve": self.resolve, "reject": self.reject}

    @property
    def done(self) -> bool:
        return self._future.done()

    async def wait(self) -> None:
        await self._future

    def __repr__(self) -> str:
        state: Any = "pending"
        if self._future.done():
            state = "rejected" if self._future.exception() else "resolved"
        return f"<Completion {state}>"
