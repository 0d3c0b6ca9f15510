"""Error taxonomy for document-store operations.

``NotFoundError`` is shown inline; ``ConflictError``/``ValidationError`` and
``TransportError`` (including ``AuthError``) are reported as blocking alerts.
None of them is fatal to the session.
"""

from __future__ import annotations

import httpx


class DocsError(Exception):
    """Base class for every recoverable client error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(DocsError):
    """Document or directory is absent."""


class ConflictError(DocsError):
    """Server refused a mutation (e.g. deleting a non-empty directory)."""


class ValidationError(DocsError):
    """Request rejected locally before reaching the server."""


class TransportError(DocsError):
    """Network failure or server-side error on any call."""


class AuthError(TransportError):
    """Missing or rejected bearer credential."""


class ProtocolError(DocsError):
    """Server answered with a payload the client cannot interpret."""


CONFLICT_STATUSES = frozenset({400, 409, 422})
AUTH_STATUSES = frozenset({401, 403})


def error_for_status(response: httpx.Response, operation: str) -> DocsError | None:
    """Map a non-success response to the taxonomy, or ``None`` when OK."""
    status = response.status_code
    if status < 400:
        return None
    detail = response.text.strip() or response.reason_phrase
    message = f"{operation} failed ({status}): {detail}"
    if status == 404:
        return NotFoundError(message, status_code=status)
    if status in AUTH_STATUSES:
        return AuthError(message, status_code=status)
    if status in CONFLICT_STATUSES:
        return ConflictError(message, status_code=status)
    return TransportError(message, status_code=status)


def raise_for_status(response: httpx.Response, operation: str) -> None:
    error = error_for_status(response, operation)
    if error is not None:
        raise error


__all__ = [
    "AuthError",
    "ConflictError",
    "DocsError",
    "NotFoundError",
    "ProtocolError",
    "TransportError",
    "ValidationError",
    "error_for_status",
    "raise_for_status",
]
