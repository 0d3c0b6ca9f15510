"""Path-driven view selection.

Whether a document or a directory view is produced depends only on the
path's extension; the dispatcher keeps no per-navigation state besides the
edit session it owns.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..logging import get_logger
from ..paths import ROOT, is_document, join_path
from ..render.markdown import MarkdownRenderer, render_markdown
from ..session import EditSession
from ..store.client import DocumentStoreClient
from ..store.errors import DocsError, NotFoundError
from ..store.interfaces import SearchResult

DOCUMENT_ACTIONS = ("edit", "delete")
DIRECTORY_ACTIONS = ("new_page", "new_directory", "delete_directory")
DIRECTORY_HINT = "Select a Markdown (.md) file from the sidebar or create a new page/directory."

logger = get_logger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """Non-document file listed in a directory view."""

    name: str
    path: str
    url: str


@dataclass(frozen=True)
class DocumentView:
    path: str
    source: str
    html: str
    actions: tuple[str, ...] = DOCUMENT_ACTIONS


@dataclass(frozen=True)
class DirectoryView:
    path: str
    uploads: tuple[UploadedFile, ...] = ()
    can_delete: bool = False
    actions: tuple[str, ...] = DIRECTORY_ACTIONS
    hint: str = DIRECTORY_HINT


@dataclass(frozen=True)
class EditorView:
    path: str
    buffer: str
    dirty: bool = False


@dataclass(frozen=True)
class SearchView:
    query: str
    results: tuple[SearchResult, ...] = ()


@dataclass(frozen=True)
class ErrorView:
    """Inline error text shown in the content area."""

    path: str
    message: str


View = DocumentView | DirectoryView | EditorView | SearchView | ErrorView


class ViewDispatcher:
    """Loads and renders the content-area view for a path."""

    def __init__(self, store: DocumentStoreClient, renderer: MarkdownRenderer = render_markdown) -> None:
        self._store = store
        self._renderer = renderer
        self.session = EditSession(store)

    async def dispatch(self, path: str) -> View:
        if is_document(path):
            return await self.document_view(path)
        return await self.directory_view(path)

    async def document_view(self, path: str) -> DocumentView | ErrorView:
        try:
            source = await self._store.get_page(path)
        except NotFoundError:
            return ErrorView(path=path, message="Page not found")
        except DocsError as exc:
            logger.warning("loading %r failed: %s", path, exc)
            return ErrorView(path=path, message=exc.message)
        return self.render_document(path, source)

    def render_document(self, path: str, source: str) -> DocumentView:
        return DocumentView(path=path, source=source, html=self._renderer(source))

    async def directory_view(self, path: str) -> DirectoryView | ErrorView:
        try:
            uploads = await self.load_uploads(path)
        except DocsError as exc:
            logger.warning("listing uploads in %r failed: %s", path, exc)
            return ErrorView(path=path, message=exc.message)
        return DirectoryView(path=path, uploads=uploads, can_delete=path != ROOT)

    async def load_uploads(self, directory: str) -> tuple[UploadedFile, ...]:
        """List the non-document files of ``directory`` with public URLs."""
        entries = await self._store.list_directory(directory)
        return tuple(
            UploadedFile(
                name=entry.name,
                path=join_path(directory, entry.name),
                url=self._store.file_url(directory, entry.name),
            )
            for entry in entries
            if not entry.is_dir and not is_document(entry.name)
        )


__all__ = [
    "DIRECTORY_ACTIONS",
    "DOCUMENT_ACTIONS",
    "DirectoryView",
    "DocumentView",
    "EditorView",
    "ErrorView",
    "SearchView",
    "UploadedFile",
    "View",
    "ViewDispatcher",
]
