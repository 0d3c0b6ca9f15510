"""Bearer-credential storage and request signing.

The token is opaque: callers only ask whether one is present.
"""

from __future__ import annotations

from collections.abc import Callable, Generator

import httpx

from .. import config

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class TokenStore:
    """Token persisted through :mod:`docsview.config`, cached in memory."""

    def __init__(
        self,
        load: Callable[[], str | None] = config.load_auth_token,
        save: Callable[[str], None] = config.save_auth_token,
        clear: Callable[[], None] = config.clear_auth_token,
    ) -> None:
        self._load = load
        self._save = save
        self._clear = clear
        self._token = load()

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def logged_in(self) -> bool:
        return bool(self._token)

    def login(self, token: str) -> bool:
        """Store a trimmed token; blank input is ignored and returns ``False``."""
        stripped = token.strip()
        if not stripped:
            return False
        self._token = stripped
        self._save(stripped)
        return True

    def logout(self) -> None:
        self._token = None
        self._clear()


class MemoryTokenStore(TokenStore):
    """Non-persistent variant for tests and one-shot CLI runs."""

    def __init__(self, token: str | None = None) -> None:
        super().__init__(load=lambda: token, save=lambda _token: None, clear=lambda: None)


class BearerAuth(httpx.Auth):
    """Attach ``Authorization: Bearer`` to mutating requests when logged in."""

    def __init__(self, tokens: TokenStore) -> None:
        self._tokens = tokens

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._tokens.token
        if token and request.method.upper() in MUTATING_METHODS:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


__all__ = ["BearerAuth", "MemoryTokenStore", "TokenStore", "MUTATING_METHODS"]
