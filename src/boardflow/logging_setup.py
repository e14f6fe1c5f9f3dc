# src/boardflow/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


# Minimum console level per logger prefix; the longest matching prefix wins.
CONSOLE_LEVELS: dict[str, int] = {
    "boardflow": logging.DEBUG,
    # One line per published action / spawned task: file log only.
    "boardflow.runtime": logging.WARNING,
    # Board API transport: timeouts and retries matter, request lines do not.
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    # Unretrieved task exceptions and slow callbacks.
    "asyncio": logging.WARNING,
    "py.warnings": logging.ERROR,
}


class _ConsoleFilter(logging.Filter):
    """Console gate driven by CONSOLE_LEVELS; unknown third-party loggers only pass ERROR+."""

    def __init__(self, levels: dict[str, int] | None = None) -> None:
        super().__init__()
        self._levels = sorted((levels or CONSOLE_LEVELS).items(), key=lambda kv: len(kv[0]), reverse=True)

    def min_level(self, name: str) -> int:
        for prefix, level in self._levels:
            if name == prefix or name.startswith(prefix + "."):
                return level
        return logging.ERROR

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self.min_level(record.name)


def setup_logging(
    *,
    log_dir: str | Path = ".local/boardflow",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler (stderr): filtered, stdout stays free for CLI output
    - File handler: full logs for debugging

    Call this ONCE, very early.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "boardflow.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)

    # httpx request lines reach the file log; connection-level DEBUG traces do not.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.INFO)
