# src/boardflow/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No network or filesystem access at import time beyond reading .env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "BOARDFLOW"

DEFAULT_BOARDS_PER_PAGE = 20

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Board API ----
    api_base_url: str
    api_timeout_seconds: float

    # ---- Board list ----
    boards_per_page: int
    home_path: str

    @staticmethod
    def from_env() -> "Settings":
        boards_per_page = _env_int(_k("BOARDS_PER_PAGE"), DEFAULT_BOARDS_PER_PAGE)
        if boards_per_page <= 0:
            # Page size drives the cache check; it has to stay positive.
            boards_per_page = DEFAULT_BOARDS_PER_PAGE

        return Settings(
            app_name=_env(_k("APP_NAME"), "boardflow") or "boardflow",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/boardflow")),
            api_base_url=_env(_k("API_BASE_URL"), "http://localhost:3000/api").strip(),
            api_timeout_seconds=max(0.1, _env_float(_k("API_TIMEOUT_SECONDS"), 10.0)),
            boards_per_page=boards_per_page,
            home_path=_env(_k("HOME_PATH"), "/") or "/",
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
