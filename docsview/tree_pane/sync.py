"""Sidebar synchronization along the active branch.

The tree is rebuilt from the root on every call: one listing per level,
strictly sequential, each child attached to its parent by path key. Calls
are numbered; only the latest generation may mount its result, so a slow
superseded expansion can never overwrite a newer tree.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..logging import get_logger
from ..paths import ROOT, join_path, normalize_path, relative_segments
from ..store.errors import DocsError
from ..store.interfaces import DirectoryLister
from ..tree_model.types import TreeNode

SIDEBAR_ERROR_TEXT = "Error loading sidebar"

logger = get_logger(__name__)


@dataclass(frozen=True)
class SidebarError:
    """Placeholder mounted instead of a partial tree after a failed fetch."""

    directory: str
    message: str = SIDEBAR_ERROR_TEXT
    detail: str = ""


SidebarContent = TreeNode | SidebarError | None
SidebarListener = Callable[[SidebarContent], None]


class SidebarSyncError(Exception):
    """A listing in the expansion chain failed; the partial tree was dropped."""

    def __init__(self, directory: str, cause: DocsError) -> None:
        super().__init__(f"sidebar sync for {directory!r} failed: {cause}")
        self.directory = directory
        self.cause = cause


class SidebarSuperseded(Exception):
    """A newer ``synchronize`` call started before this one finished."""

    def __init__(self, generation: int, latest: int) -> None:
        super().__init__(f"sidebar generation {generation} superseded by {latest}")
        self.generation = generation
        self.latest = latest


class SidebarSynchronizer:
    """Owns the displayed sidebar tree; reads the effective directory only."""

    def __init__(self, lister: DirectoryLister) -> None:
        self._lister = lister
        self._generation = 0
        self._listeners: list[SidebarListener] = []
        self.displayed: SidebarContent = None

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: SidebarListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _mount(self, content: SidebarContent) -> None:
        self.displayed = content
        for listener in list(self._listeners):
            listener(content)

    def _ensure_current(self, generation: int) -> None:
        if generation != self._generation:
            raise SidebarSuperseded(generation, self._generation)

    async def _list(self, path: str, generation: int) -> TreeNode:
        entries = await self._lister.list_directory(path)
        self._ensure_current(generation)
        logger.debug("sidebar gen %d listed %r (%d entries)", generation, path or "/", len(entries))
        return TreeNode(path=path, entries=tuple(entries))

    async def _descend(self, node: TreeNode, remaining: list[str], generation: int) -> None:
        if not remaining:
            return
        segment = remaining[0]
        if not node.has_directory(segment):
            logger.debug("sidebar gen %d: %r missing under %r, stopping", generation, segment, node.path or "/")
            return
        child = await self._list(join_path(node.path, segment), generation)
        node.attach(segment, child)
        await self._descend(child, remaining[1:], generation)

    async def synchronize(self, effective_dir: str) -> TreeNode:
        """Build and mount the tree from the root down to ``effective_dir``.

        Raises ``SidebarSuperseded`` when a newer call took over (nothing is
        mounted) and ``SidebarSyncError`` after mounting an error placeholder.
        """
        target = normalize_path(effective_dir)
        self._generation += 1
        generation = self._generation
        logger.debug("sidebar gen %d: synchronizing to %r", generation, target or "/")
        try:
            root = await self._list(ROOT, generation)
            await self._descend(root, relative_segments(ROOT, target) or [], generation)
        except DocsError as exc:
            if generation == self._generation:
                logger.warning("sidebar gen %d failed: %s", generation, exc)
                self._mount(SidebarError(directory=target, detail=str(exc)))
                raise SidebarSyncError(target, exc) from exc
            raise SidebarSuperseded(generation, self._generation) from exc
        self._ensure_current(generation)
        self._mount(root)
        return root


__all__ = [
    "SIDEBAR_ERROR_TEXT",
    "SidebarContent",
    "SidebarError",
    "SidebarSuperseded",
    "SidebarSyncError",
    "SidebarSynchronizer",
]
