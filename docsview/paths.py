"""Document-store path primitives and the owned current-path model.

Paths are ``/``-joined segment strings with no leading or trailing separator;
``""`` is the root. Whether a path names a document or a directory is decided
by its extension alone, never by asking the store.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote, unquote

SEPARATOR = "/"
DOCUMENT_EXTENSION = ".md"
ROOT = ""
HOME_LABEL = "Home"


def normalize_path(raw: str) -> str:
    """Return canonical form of ``raw`` (no empty segments, no edge separators).

    Raises ``ValueError`` for ``.``/``..`` segments, which the store refuses.
    """
    segments = [segment for segment in raw.replace("\\", SEPARATOR).split(SEPARATOR) if segment]
    for segment in segments:
        if segment in {".", ".."}:
            raise ValueError(f"invalid path segment {segment!r} in {raw!r}")
    return SEPARATOR.join(segments)


def path_segments(path: str) -> list[str]:
    """Split a canonical path into segments (root yields ``[]``)."""
    return [segment for segment in path.split(SEPARATOR) if segment]


def is_document(path: str) -> bool:
    """Return whether ``path`` names a Markdown document."""
    return path.endswith(DOCUMENT_EXTENSION)


def is_root(path: str) -> bool:
    return path == ROOT


def parent_path(path: str) -> str:
    """Strip the final segment; the root is its own parent."""
    segments = path_segments(path)
    return SEPARATOR.join(segments[:-1])


def join_path(base: str, name: str) -> str:
    """Join ``name`` under ``base`` without introducing a leading separator."""
    return f"{base}{SEPARATOR}{name}" if base else name


def effective_directory(path: str) -> str:
    """Return the directory ``path`` resolves to for tree display."""
    if is_document(path):
        return parent_path(path)
    return path


def relative_segments(base: str, target: str) -> list[str] | None:
    """Return segments leading from ``base`` down to ``target``.

    Comparison is per segment, so ``docs`` is not an ancestor of ``docs2``.
    Returns ``None`` when ``target`` is not ``base`` or below it.
    """
    base_parts = path_segments(base)
    target_parts = path_segments(target)
    if target_parts[: len(base_parts)] != base_parts:
        return None
    return target_parts[len(base_parts):]


def breadcrumbs(path: str) -> list[tuple[str, str]]:
    """Return ``(label, path)`` crumbs from the root down to ``path``."""
    crumbs = [(HOME_LABEL, ROOT)]
    cumulative = ROOT
    for segment in path_segments(path):
        cumulative = join_path(cumulative, segment)
        crumbs.append((segment, cumulative))
    return crumbs


def encode_fragment(path: str) -> str:
    """Return the bookmarkable ``#...`` fragment for ``path``."""
    return "#" + quote(path, safe="")


def decode_fragment(fragment: str) -> str:
    """Inverse of :func:`encode_fragment`; tolerates a missing ``#``."""
    if fragment.startswith("#"):
        fragment = fragment[1:]
    return normalize_path(unquote(fragment))


PathListener = Callable[[str, str], None]


class PathModel:
    """Single owner of the current path.

    ``set_path`` only assigns and notifies; re-synchronization is the
    subscribers' business.
    """

    def __init__(self, initial: str = ROOT) -> None:
        self._path = normalize_path(initial)
        self._listeners: list[PathListener] = []

    @property
    def path(self) -> str:
        return self._path

    def subscribe(self, listener: PathListener) -> Callable[[], None]:
        """Register ``listener(old, new)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_path(self, path: str) -> None:
        previous = self._path
        self._path = normalize_path(path)
        for listener in list(self._listeners):
            listener(previous, self._path)

    def effective_directory(self) -> str:
        return effective_directory(self._path)

    def is_document(self) -> bool:
        return is_document(self._path)


__all__ = [
    "DOCUMENT_EXTENSION",
    "ROOT",
    "PathModel",
    "breadcrumbs",
    "decode_fragment",
    "effective_directory",
    "encode_fragment",
    "is_document",
    "is_root",
    "join_path",
    "normalize_path",
    "parent_path",
    "path_segments",
    "relative_segments",
]
