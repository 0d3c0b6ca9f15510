"""Persistent JSON config helpers.

Stores the document-server URL, the bearer token and the UI theme.
All access is defensive: malformed or missing config falls back safely.
Environment variables override persisted values for the server and token.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "docsview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_SERVER_URL = "http://localhost:8080"
SERVER_ENV_VAR = "DOCSVIEW_SERVER"
TOKEN_ENV_VAR = "DOCSVIEW_TOKEN"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are swallowed so an unwritable config never breaks a
    session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_server_url() -> str:
    """Return server URL from env, then config, then the local default."""
    from_env = os.environ.get(SERVER_ENV_VAR, "").strip()
    if from_env:
        return from_env.rstrip("/")
    return (_load_string("server_url") or DEFAULT_SERVER_URL).rstrip("/")


def save_server_url(url: str) -> None:
    _save_string("server_url", url.rstrip("/"))


def load_auth_token() -> str | None:
    """Return the bearer token, preferring ``DOCSVIEW_TOKEN`` when set."""
    from_env = os.environ.get(TOKEN_ENV_VAR, "").strip()
    if from_env:
        return from_env
    return _load_string("auth_token")


def save_auth_token(token: str) -> None:
    _save_string("auth_token", token)


def clear_auth_token() -> None:
    config = load_config()
    if config.pop("auth_token", None) is not None:
        save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    _save_string("theme", theme_name)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_SERVER_URL",
    "clear_auth_token",
    "load_auth_token",
    "load_config",
    "load_server_url",
    "load_theme_name",
    "save_auth_token",
    "save_config",
    "save_server_url",
    "save_theme_name",
]
