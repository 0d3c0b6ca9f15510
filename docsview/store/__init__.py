"""Document-store collaborators: REST client, credentials and error taxonomy."""

from __future__ import annotations

from .auth import BearerAuth, MemoryTokenStore, TokenStore
from .client import DocumentStoreClient, parse_directory_listing, parse_search_results
from .errors import (
    AuthError,
    ConflictError,
    DocsError,
    NotFoundError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .interfaces import (
    DirectoryLister,
    DirectoryStore,
    DocumentStore,
    SearchIndex,
    SearchResult,
    UploadFile,
    UploadStore,
)

__all__ = [
    "AuthError",
    "BearerAuth",
    "ConflictError",
    "DirectoryLister",
    "DirectoryStore",
    "DocsError",
    "DocumentStore",
    "DocumentStoreClient",
    "MemoryTokenStore",
    "NotFoundError",
    "ProtocolError",
    "SearchIndex",
    "SearchResult",
    "TokenStore",
    "TransportError",
    "UploadFile",
    "UploadStore",
    "ValidationError",
    "parse_directory_listing",
    "parse_search_results",
]
