"""Unsaved-changes guard consulted before every path change.

The confirmation is an awaited user decision so any front end (terminal,
GUI, headless test) can answer it without a blocking prompt primitive.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ..logging import get_logger
from ..session import EditSession

UNSAVED_CHANGES_PROMPT = "You have unsaved changes. Do you really want to navigate away and discard them?"

ConfirmCallback = Callable[[str], Awaitable[bool]]

logger = get_logger(__name__)


class NavigationGuard:
    """Approves navigation, asking the user first when edits would be lost."""

    def __init__(self, session: EditSession, confirm: ConfirmCallback) -> None:
        self._session = session
        self._confirm = confirm

    def has_unsaved_changes(self) -> bool:
        return self._session.active and self._session.is_dirty

    async def request_navigate(self, dest: str) -> bool:
        """Return whether navigation to ``dest`` may proceed.

        Declining leaves the session untouched; accepting discards it.
        """
        if not self.has_unsaved_changes():
            return True
        if not await self._confirm(UNSAVED_CHANGES_PROMPT):
            logger.debug("navigation to %r declined; keeping dirty session", dest)
            return False
        logger.debug("navigation to %r confirmed; discarding edits", dest)
        self._session.discard()
        return True


__all__ = ["ConfirmCallback", "NavigationGuard", "UNSAVED_CHANGES_PROMPT"]
