# src/boardflow/core/errors.py

from __future__ import annotations


class BoardflowError(Exception):
    """Base error for boardflow."""


class ApiError(BoardflowError):
    """A board API call failed. `message` is meant to be shown to the user."""

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SubmissionRejected(BoardflowError):
    """Raised by Completion.wait() when the task rejected the submission."""


def failure_message(exc: BaseException) -> str | None:
    """
    Human-readable message of a failed call.

    Returns None when the exception carries nothing useful so the failure
    action creator can substitute its default text.
    """
    msg = getattr(exc, "message", None)
    if not isinstance(msg, str) or not msg.strip():
        msg = str(exc)
    msg = msg.strip()
    return msg or None
