"""Sidebar tree model: listing entries, expanded nodes, and row formatting.

Defines ``DirectoryEntry`` and ``TreeNode`` plus the projection from a
synchronized tree into visible sidebar rows.
"""

from __future__ import annotations

from .rendering import SidebarRow, build_sidebar_rows, display_name, format_sidebar_row, is_visible_entry
from .types import DirectoryEntry, EntryKind, TreeNode

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "TreeNode",
    "SidebarRow",
    "build_sidebar_rows",
    "display_name",
    "format_sidebar_row",
    "is_visible_entry",
]
