# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "BOARDFLOW_APP_NAME": "App display name (default: boardflow).",
    "BOARDFLOW_LOG_LEVEL": "Console logging level (default: INFO).",
    "BOARDFLOW_DATA_DIR": "Local data directory, holds boardflow.log (default: .local/boardflow).",
    # Board API
    "BOARDFLOW_API_BASE_URL": "Board API base URL (default: http://localhost:3000/api).",
    "BOARDFLOW_API_TIMEOUT_SECONDS": "Per-request HTTP timeout in seconds (default: 10).",
    # Board list
    "BOARDFLOW_BOARDS_PER_PAGE": "Page size used for list fetches and the scroll cache check (default: 20).",
    "BOARDFLOW_HOME_PATH": "Route of the board list; scroll paging only runs there (default: /).",
}
