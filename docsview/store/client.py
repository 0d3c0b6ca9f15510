"""Async HTTP client for the document-store REST API.

One ``httpx.AsyncClient`` serves every collaborator contract: directory
listing, pages, directories, uploads and search. Failures are raised as
:mod:`docsview.store.errors` exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import httpx

from ..logging import get_logger
from ..paths import path_segments
from ..tree_model.types import DirectoryEntry, EntryKind
from .auth import BearerAuth, MemoryTokenStore, TokenStore
from .errors import ProtocolError, TransportError, raise_for_status
from .interfaces import SearchResult, UploadFile

DEFAULT_TIMEOUT_SECONDS = 10.0
UPLOAD_FIELD = "file"

logger = get_logger(__name__)


def parse_directory_listing(payload: Any) -> list[DirectoryEntry]:
    """Convert a ``[{name, type}]`` payload, keeping server order."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ProtocolError(f"directory listing is not a list: {type(payload).__name__}")
    entries: list[DirectoryEntry] = []
    for item in payload:
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise ProtocolError(f"malformed directory entry: {item!r}")
        try:
            kind = EntryKind.from_wire(item.get("type"))
        except ValueError as exc:
            raise ProtocolError(str(exc)) from exc
        entries.append(DirectoryEntry(name=item["name"], kind=kind))
    return entries


def parse_search_results(payload: Any) -> list[SearchResult]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ProtocolError(f"search results are not a list: {type(payload).__name__}")
    results: list[SearchResult] = []
    for item in payload:
        if not isinstance(item, dict):
            raise ProtocolError(f"malformed search result: {item!r}")
        path = item.get("path")
        name = item.get("name")
        if not isinstance(path, str) or not isinstance(name, str):
            raise ProtocolError(f"malformed search result: {item!r}")
        results.append(SearchResult(path=path.replace("\\", "/"), name=name))
    return results


class DocumentStoreClient:
    """REST client implementing every store-side collaborator."""

    def __init__(
        self,
        base_url: str,
        tokens: TokenStore | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.tokens = tokens if tokens is not None else MemoryTokenStore()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=BearerAuth(self.tokens),
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> DocumentStoreClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, operation: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s: transport failure: %s", operation, exc)
            raise TransportError(f"{operation} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, response.request.url, response.status_code)
        return response

    async def _checked(self, method: str, url: str, operation: str, **kwargs: Any) -> httpx.Response:
        response = await self._request(method, url, operation, **kwargs)
        raise_for_status(response, operation)
        return response

    @staticmethod
    def _json(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ProtocolError(f"{operation}: invalid JSON response") from exc

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        """List immediate children; a missing directory lists as empty."""
        operation = f"list directory {path!r}"
        response = await self._request("GET", "/api/dir", operation, params={"path": path})
        if response.status_code == 404:
            return []
        raise_for_status(response, operation)
        return parse_directory_listing(self._json(response, operation))

    async def get_page(self, path: str) -> str:
        response = await self._checked("GET", "/api/page", f"load page {path!r}", params={"path": path})
        return response.text

    async def save_page(self, path: str, content: str) -> None:
        """Create or overwrite a page with ``content``."""
        await self._checked(
            "POST",
            "/api/page",
            f"save page {path!r}",
            params={"path": path},
            content=content.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )

    async def delete_page(self, path: str) -> None:
        await self._checked("DELETE", "/api/page", f"delete page {path!r}", params={"path": path})

    async def create_directory(self, parent: str, name: str) -> None:
        await self._checked(
            "POST",
            "/api/dir",
            f"create directory {name!r} in {parent!r}",
            params={"path": parent},
            json={"name": name},
        )

    async def delete_directory(self, path: str) -> None:
        """Remove a directory; the server refuses non-empty ones."""
        await self._checked("DELETE", "/api/dir", f"delete directory {path!r}", params={"path": path})

    async def upload_files(self, directory: str, files: Sequence[UploadFile]) -> None:
        if not files:
            return
        multipart = [(UPLOAD_FIELD, (item.name, item.content, item.content_type)) for item in files]
        await self._checked(
            "POST",
            "/api/upload",
            f"upload {len(files)} file(s) to {directory!r}",
            params={"path": directory},
            files=multipart,
        )

    async def delete_upload(self, directory: str, name: str) -> None:
        await self._checked(
            "DELETE",
            "/api/upload",
            f"delete file {name!r} in {directory!r}",
            params={"path": directory, "file": name},
        )

    async def search(self, query: str) -> list[SearchResult]:
        operation = f"search {query!r}"
        response = await self._checked("GET", "/api/search", operation, params={"q": query})
        return parse_search_results(self._json(response, operation))

    def file_url(self, directory: str, name: str) -> str:
        """Return the public URL an uploaded file is served from."""
        segments = [quote(segment, safe="") for segment in [*path_segments(directory), name]]
        return f"{self.base_url}/content/{'/'.join(segments)}"


__all__ = [
    "DocumentStoreClient",
    "parse_directory_listing",
    "parse_search_results",
]
