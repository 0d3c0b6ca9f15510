"""In-memory document store used by engine tests.

Mirrors the REST collaborators closely enough for navigation, sidebar and
edit-session tests: listings keep creation order, a missing directory lists
as empty, and non-empty directories refuse deletion.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from docsview.paths import is_document, join_path, parent_path, path_segments
from docsview.store.auth import MemoryTokenStore
from docsview.store.errors import ConflictError, DocsError, NotFoundError
from docsview.store.interfaces import SearchResult, UploadFile
from docsview.tree_model.types import DirectoryEntry, EntryKind


class FakeStore:
    def __init__(self, files: dict[str, str | bytes] | None = None, dirs: Sequence[str] = ()) -> None:
        self.tokens = MemoryTokenStore()
        self.children: dict[str, list[DirectoryEntry]] = {"": []}
        self.contents: dict[str, str | bytes] = {}
        self.calls: list[tuple[str, str]] = []
        self.failures: dict[tuple[str, str], DocsError] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.page_gates: dict[str, asyncio.Event] = {}
        for directory in dirs:
            self.add_dir(directory)
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_dir(self, path: str) -> None:
        if path in self.children:
            return
        parent = parent_path(path)
        self.add_dir(parent)
        self.children[path] = []
        self.children[parent].append(DirectoryEntry(path_segments(path)[-1], EntryKind.DIRECTORY))

    def add_file(self, path: str, content: str | bytes) -> None:
        parent = parent_path(path)
        self.add_dir(parent)
        if path not in self.contents:
            self.children[parent].append(DirectoryEntry(path_segments(path)[-1], EntryKind.FILE))
        self.contents[path] = content

    def remove(self, path: str) -> None:
        parent = parent_path(path)
        name = path_segments(path)[-1]
        self.children[parent] = [entry for entry in self.children[parent] if entry.name != name]
        self.contents.pop(path, None)
        self.children.pop(path, None)

    def fail(self, operation: str, path: str, error: DocsError) -> None:
        self.failures[(operation, path)] = error

    def gate(self, path: str) -> asyncio.Event:
        """Block ``list_directory(path)`` until the returned event is set."""
        event = asyncio.Event()
        self.gates[path] = event
        return event

    def gate_page(self, path: str) -> asyncio.Event:
        """Block the next ``get_page(path)`` only; later loads pass through."""
        event = asyncio.Event()
        self.page_gates[path] = event
        return event

    def _check(self, operation: str, path: str) -> None:
        self.calls.append((operation, path))
        error = self.failures.get((operation, path))
        if error is not None:
            raise error

    def listed(self) -> list[str]:
        return [path for operation, path in self.calls if operation == "list"]

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        self.calls.append(("list", path))
        gate = self.gates.get(path)
        if gate is not None:
            await gate.wait()
        error = self.failures.get(("list", path))
        if error is not None:
            raise error
        return list(self.children.get(path, []))

    async def get_page(self, path: str) -> str:
        self._check("get", path)
        gate = self.page_gates.pop(path, None)
        if gate is not None:
            await gate.wait()
        content = self.contents.get(path)
        if not isinstance(content, str):
            raise NotFoundError(f"load page {path!r} failed (404): Could not read file", status_code=404)
        return content

    async def save_page(self, path: str, content: str) -> None:
        self._check("save", path)
        self.add_file(path, content)

    async def delete_page(self, path: str) -> None:
        self._check("delete_page", path)
        if path not in self.contents:
            raise NotFoundError(f"delete page {path!r} failed (404)", status_code=404)
        self.remove(path)

    async def create_directory(self, parent: str, name: str) -> None:
        self._check("create_dir", join_path(parent, name))
        self.add_dir(join_path(parent, name))

    async def delete_directory(self, path: str) -> None:
        self._check("delete_dir", path)
        if self.children.get(path):
            raise ConflictError(
                f"delete directory {path!r} failed (400): Directory not empty or could not be removed",
                status_code=400,
            )
        self.remove(path)

    async def upload_files(self, directory: str, files: Sequence[UploadFile]) -> None:
        self._check("upload", directory)
        for item in files:
            self.add_file(join_path(directory, item.name), item.content)

    async def delete_upload(self, directory: str, name: str) -> None:
        self._check("delete_upload", join_path(directory, name))
        self.remove(join_path(directory, name))

    async def search(self, query: str) -> list[SearchResult]:
        self._check("search", query)
        folded = query.lower()
        return [
            SearchResult(path=path, name=path_segments(path)[-1])
            for path, content in self.contents.items()
            if folded in path_segments(path)[-1].lower()
            or (is_document(path) and isinstance(content, str) and folded in content.lower())
        ]

    def file_url(self, directory: str, name: str) -> str:
        return f"http://docs.test/content/{join_path(directory, name)}"


class Prompter:
    """Scripted answers for confirmation prompts; records every prompt."""

    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return self.answers.pop(0)
