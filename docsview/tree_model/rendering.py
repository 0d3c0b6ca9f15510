"""Sidebar row projection and formatting for listed tree nodes."""

from __future__ import annotations

from dataclasses import dataclass

from ..paths import DOCUMENT_EXTENSION, SEPARATOR, is_document
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import DirectoryEntry, TreeNode


@dataclass(frozen=True)
class SidebarRow:
    """One visible sidebar line."""

    path: str
    depth: int
    is_dir: bool
    display: str
    active: bool = False
    expanded: bool = False


def is_visible_entry(entry: DirectoryEntry) -> bool:
    """Directories always show; files only when they are documents."""
    return entry.is_dir or is_document(entry.name)


def display_name(entry: DirectoryEntry) -> str:
    if entry.is_dir:
        return entry.name + SEPARATOR
    if entry.name.endswith(DOCUMENT_EXTENSION):
        return entry.name[: -len(DOCUMENT_EXTENSION)]
    return entry.name


def build_sidebar_rows(tree: TreeNode, current_path: str) -> list[SidebarRow]:
    """Flatten ``tree`` into rows, expanded children directly under their row.

    Listing order is kept as returned by the store. Only the file whose full
    path equals ``current_path`` is marked active.
    """
    rows: list[SidebarRow] = []

    def emit(node: TreeNode, depth: int) -> None:
        for entry in node.entries:
            if not is_visible_entry(entry):
                continue
            full_path = node.entry_path(entry)
            child = node.children.get(entry.name) if entry.is_dir else None
            rows.append(
                SidebarRow(
                    path=full_path,
                    depth=depth,
                    is_dir=entry.is_dir,
                    display=display_name(entry),
                    active=(not entry.is_dir) and full_path == current_path,
                    expanded=child is not None,
                )
            )
            if child is not None:
                emit(child, depth + 1)

    emit(tree, 0)
    return rows


def format_sidebar_row(row: SidebarRow, theme: UITheme | None = None) -> str:
    """Render one sidebar row as terminal text."""
    active_theme = theme or DEFAULT_THEME
    indent = "  " * row.depth
    if row.is_dir:
        marker = "▾ " if row.expanded else "▸ "
    else:
        marker = "• " if row.active else "  "
    reset = active_theme.reset
    if row.is_dir:
        color = active_theme.tree_dir
    elif row.active:
        color = active_theme.tree_active
    else:
        color = active_theme.tree_file_default
    return f"{indent}{active_theme.tree_marker}{marker}{reset}{color}{row.display}{reset}"


__all__ = [
    "SidebarRow",
    "build_sidebar_rows",
    "display_name",
    "format_sidebar_row",
    "is_visible_entry",
]
