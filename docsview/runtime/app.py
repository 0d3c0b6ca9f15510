"""Application controller wiring navigation, sidebar, views and editing.

Every user action enters here. Path changes pass the navigation guard, then
the sidebar synchronizer and view dispatcher run concurrently against the new
path. Store failures are reported through ``alert`` and never escape an
action; the current path and edit session stay as they were before the
failed attempt.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

from ..logging import get_logger
from ..paths import (
    PathModel,
    breadcrumbs,
    decode_fragment,
    effective_directory,
    is_document,
    is_root,
    join_path,
    normalize_path,
    parent_path,
)
from ..render.markdown import MarkdownRenderer, render_markdown
from ..store.client import DocumentStoreClient
from ..store.errors import DocsError, ValidationError
from ..store.interfaces import SearchResult, UploadFile
from ..tree_pane.sync import SidebarContent, SidebarSuperseded, SidebarSyncError, SidebarSynchronizer
from .dispatch import DirectoryView, EditorView, SearchView, View, ViewDispatcher
from .navigation import ConfirmCallback, NavigationGuard
from .state import AppState

AlertCallback = Callable[[str], None]

DELETE_PAGE_PROMPT = "Are you sure you want to delete this page?"
DELETE_DIRECTORY_PROMPT = "Are you sure you want to delete this directory? It must be empty."
DELETE_FILE_PROMPT = "Are you sure you want to delete this file?"

logger = get_logger(__name__)


class DocsApp:
    """Owns ``AppState`` and exposes the user-facing actions."""

    def __init__(
        self,
        client: DocumentStoreClient,
        *,
        confirm: ConfirmCallback,
        alert: AlertCallback,
        renderer: MarkdownRenderer = render_markdown,
        initial_path: str = "",
    ) -> None:
        self.client = client
        self.state = AppState(paths=PathModel(initial_path), logged_in=client.tokens.logged_in)
        self.dispatcher = ViewDispatcher(client, renderer)
        self.session = self.dispatcher.session
        self.guard = NavigationGuard(self.session, confirm)
        self.sidebar = SidebarSynchronizer(client)
        self.sidebar.subscribe(self._on_sidebar_mounted)
        self._confirm = confirm
        self._alert = alert
        self._view_generation = 0

    @property
    def path(self) -> str:
        return self.state.current_path

    @property
    def fragment(self) -> str:
        return self.state.fragment

    def breadcrumbs(self) -> list[tuple[str, str]]:
        return breadcrumbs(self.path)

    def has_unsaved_changes(self) -> bool:
        return self.guard.has_unsaved_changes()

    def _on_sidebar_mounted(self, content: SidebarContent) -> None:
        self.state.sidebar = content

    def _show(self, view: View) -> None:
        """Mount ``view`` directly; any in-flight dispatch result is dropped."""
        self._view_generation += 1
        self.state.view = view

    def _report(self, summary: str, exc: DocsError) -> None:
        logger.warning("%s: %s", summary, exc)
        self._alert(exc.message if isinstance(exc, ValidationError) else summary)

    # Navigation

    async def start(self, fragment: str = "") -> None:
        """Load the initial fragment path (if any) and render everything."""
        if fragment:
            self.state.paths.set_path(decode_fragment(fragment))
        await self.refresh()

    async def navigate(self, dest: str) -> bool:
        """Guarded path change; returns whether navigation happened."""
        try:
            target = normalize_path(dest)
        except ValueError as exc:
            self._alert(str(exc))
            return False
        if not await self.guard.request_navigate(target):
            return False
        if self.session.active:
            self.session.discard()
        logger.debug("navigating %r -> %r", self.path, target)
        self.state.paths.set_path(target)
        await self.refresh()
        return True

    async def refresh(self) -> None:
        """Re-run sidebar sync and view dispatch for the current path."""
        await asyncio.gather(self._sync_sidebar(), self._update_view())

    async def _sync_sidebar(self) -> None:
        try:
            await self.sidebar.synchronize(self.state.paths.effective_directory())
        except SidebarSuperseded:
            pass
        except SidebarSyncError as exc:
            logger.debug("sidebar placeholder mounted: %s", exc)

    async def _update_view(self) -> None:
        self._view_generation += 1
        generation = self._view_generation
        session = self.session
        if session.active and session.path == self.path:
            self.state.view = EditorView(path=session.path, buffer=session.buffer, dirty=session.is_dirty)
            return
        view = await self.dispatcher.dispatch(self.path)
        if generation == self._view_generation:
            self.state.view = view

    async def open_search_result(self, result: SearchResult) -> bool:
        return await self.navigate(result.path)

    # Editing

    async def edit(self) -> bool:
        """Enter edit mode for the current page.

        An already open session on the same page is resumed as is; its
        buffer is never reloaded from the store.
        """
        path = self.path
        if not is_document(path):
            return False
        session = self.session
        if session.active and session.path == path:
            self._show(EditorView(path=path, buffer=session.buffer, dirty=session.is_dirty))
            return True
        try:
            content = await session.open(path)
        except DocsError as exc:
            self._report("Failed to load page for editing.", exc)
            return False
        self._show(EditorView(path=path, buffer=content))
        return True

    def update_buffer(self, text: str) -> bool:
        """Feed an editor change into the session; returns the dirty flag."""
        if not self.session.active or self.session.path is None:
            return False
        dirty = self.session.mutate(text)
        self._show(EditorView(path=self.session.path, buffer=text, dirty=dirty))
        return dirty

    async def save(self) -> bool:
        """Persist the editor buffer; on failure nothing is lost."""
        if not self.session.active:
            return False
        try:
            await self.session.save()
        except DocsError as exc:
            self._report("Failed to save page.", exc)
            return False
        await self._update_view()
        return True

    async def cancel_edit(self) -> None:
        self.session.cancel()
        await self._update_view()

    # Pages and directories

    async def create_page(self, name: str) -> bool:
        name = name.strip()
        if not is_document(name):
            self._report("Failed to create new page.", ValidationError("Filename must end with .md"))
            return False
        if "/" in name:
            self._report("Failed to create new page.", ValidationError("Filename must not contain '/'"))
            return False
        directory = effective_directory(self.path)
        new_path = join_path(directory, name)
        try:
            entries = await self.client.list_directory(directory)
            if any(entry.name == name for entry in entries):
                raise ValidationError(f"A page named {name} already exists")
            await self.client.save_page(new_path, "")
        except DocsError as exc:
            self._report("Failed to create new page.", exc)
            return False
        return await self.navigate(new_path)

    async def delete_page(self) -> bool:
        path = self.path
        if not is_document(path):
            return False
        if not await self._confirm(DELETE_PAGE_PROMPT):
            return False
        try:
            await self.client.delete_page(path)
        except DocsError as exc:
            self._report("Failed to delete page.", exc)
            return False
        if self.session.path == path:
            self.session.discard()
        return await self.navigate(parent_path(path))

    async def create_directory(self, name: str) -> bool:
        name = name.strip()
        if not name:
            return False
        if "/" in name:
            self._report("Failed to create new directory.", ValidationError("Name must not contain '/'"))
            return False
        try:
            await self.client.create_directory(effective_directory(self.path), name)
        except DocsError as exc:
            self._report("Failed to create new directory.", exc)
            return False
        await self.refresh()
        return True

    async def delete_directory(self) -> bool:
        path = self.path
        if is_root(path):
            self._alert("Cannot delete the root directory.")
            return False
        if is_document(path):
            return False
        if not await self._confirm(DELETE_DIRECTORY_PROMPT):
            return False
        try:
            await self.client.delete_directory(path)
        except DocsError as exc:
            self._report("Failed to delete directory (it may not be empty).", exc)
            return False
        return await self.navigate(parent_path(path))

    # Uploads

    async def upload(self, files: Sequence[UploadFile]) -> bool:
        if not files:
            return False
        directory = effective_directory(self.path)
        try:
            await self.client.upload_files(directory, files)
        except DocsError as exc:
            self._report("Failed to upload file.", exc)
            return False
        await self._reload_uploads(directory)
        return True

    async def delete_upload(self, name: str) -> bool:
        if not await self._confirm(DELETE_FILE_PROMPT):
            return False
        directory = effective_directory(self.path)
        try:
            await self.client.delete_upload(directory, name)
        except DocsError as exc:
            self._report("Failed to delete file.", exc)
            return False
        await self._reload_uploads(directory)
        return True

    async def _reload_uploads(self, directory: str) -> None:
        view = self.state.view
        if not isinstance(view, DirectoryView) or view.path != directory:
            return
        try:
            uploads = await self.dispatcher.load_uploads(directory)
        except DocsError as exc:
            logger.warning("reloading uploads in %r failed: %s", directory, exc)
            return
        if self.state.view is view:
            self._show(DirectoryView(path=view.path, uploads=uploads, can_delete=view.can_delete))

    # Search and auth

    async def search(self, query: str) -> list[SearchResult]:
        query = query.strip()
        if not query:
            return []
        try:
            results = await self.client.search(query)
        except DocsError as exc:
            self._report("Search failed.", exc)
            return []
        self._show(SearchView(query=query, results=tuple(results)))
        return results

    async def login(self, token: str) -> bool:
        if not self.client.tokens.login(token):
            return False
        self.state.logged_in = True
        await self.refresh()
        return True

    async def logout(self) -> None:
        self.client.tokens.logout()
        self.state.logged_in = False
        await self.refresh()


__all__ = [
    "AlertCallback",
    "DELETE_DIRECTORY_PROMPT",
    "DELETE_FILE_PROMPT",
    "DELETE_PAGE_PROMPT",
    "DocsApp",
]
