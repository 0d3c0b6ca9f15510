"""Edit-session state machine for one document.

``CLOSED -> OPEN_CLEAN <-> OPEN_DIRTY -> CLOSED``. Dirtiness is a pure
comparison between the live buffer and the content loaded at open time.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .logging import get_logger
from .paths import is_document
from .store.interfaces import DocumentStore

logger = get_logger(__name__)


class SessionState(Enum):
    CLOSED = "closed"
    OPEN_CLEAN = "open-clean"
    OPEN_DIRTY = "open-dirty"


SessionListener = Callable[["EditSession"], None]


class EditSession:
    """Tracks whether editing is active and whether the buffer is dirty."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self._listeners: list[SessionListener] = []
        self.path: str | None = None
        self.original_content = ""
        self.buffer = ""
        self.active = False
        self.is_dirty = False

    @property
    def state(self) -> SessionState:
        if not self.active:
            return SessionState.CLOSED
        return SessionState.OPEN_DIRTY if self.is_dirty else SessionState.OPEN_CLEAN

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    async def open(self, path: str) -> str:
        """Load ``path`` and seed the buffer; returns the loaded content.

        Store errors propagate and leave the session closed.
        """
        if not is_document(path):
            raise ValueError(f"not a document path: {path!r}")
        content = await self._store.get_page(path)
        self.path = path
        self.original_content = content
        self.buffer = content
        self.active = True
        self.is_dirty = False
        logger.debug("edit session opened for %s", path)
        self._notify()
        return content

    def mutate(self, buffer: str) -> bool:
        """Replace the live buffer and return the recomputed dirty flag."""
        if not self.active:
            return False
        self.buffer = buffer
        was_dirty = self.is_dirty
        self.is_dirty = buffer != self.original_content
        if was_dirty != self.is_dirty:
            self._notify()
        return self.is_dirty

    async def save(self, buffer: str | None = None) -> str:
        """Persist the buffer and close; returns the saved text.

        On failure the session stays open with the buffer intact and the
        store error propagates.
        """
        if not self.active or self.path is None:
            raise RuntimeError("no active edit session")
        if buffer is not None:
            self.mutate(buffer)
        content = self.buffer
        await self._store.save_page(self.path, content)
        logger.debug("edit session saved %s (%d chars)", self.path, len(content))
        self._close()
        return content

    def discard(self) -> None:
        """Close without persisting, regardless of dirtiness."""
        if self.active:
            logger.debug("edit session discarded for %s (dirty=%s)", self.path, self.is_dirty)
        self._close()

    cancel = discard

    def _close(self) -> None:
        was_active = self.active
        self.path = None
        self.original_content = ""
        self.buffer = ""
        self.active = False
        self.is_dirty = False
        if was_active:
            self._notify()


__all__ = ["EditSession", "SessionState"]
