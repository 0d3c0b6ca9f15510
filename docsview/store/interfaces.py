"""Narrow collaborator contracts consumed by the navigation core."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..tree_model.types import DirectoryEntry


@dataclass(frozen=True)
class SearchResult:
    """One search hit: store path plus display name."""

    path: str
    name: str


@dataclass(frozen=True)
class UploadFile:
    """Binary payload to add under a directory."""

    name: str
    content: bytes
    content_type: str = "application/octet-stream"


class DirectoryLister(Protocol):
    async def list_directory(self, path: str) -> list[DirectoryEntry]: ...


class DocumentStore(Protocol):
    async def get_page(self, path: str) -> str: ...

    async def save_page(self, path: str, content: str) -> None: ...

    async def delete_page(self, path: str) -> None: ...


class DirectoryStore(Protocol):
    async def create_directory(self, parent: str, name: str) -> None: ...

    async def delete_directory(self, path: str) -> None: ...


class UploadStore(Protocol):
    async def upload_files(self, directory: str, files: Sequence[UploadFile]) -> None: ...

    async def delete_upload(self, directory: str, name: str) -> None: ...

    def file_url(self, directory: str, name: str) -> str: ...


class SearchIndex(Protocol):
    async def search(self, query: str) -> list[SearchResult]: ...


__all__ = [
    "DirectoryLister",
    "DirectoryStore",
    "DocumentStore",
    "SearchIndex",
    "SearchResult",
    "UploadFile",
    "UploadStore",
]
