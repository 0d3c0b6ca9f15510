"""Sidebar pane: active-branch synchronization against the directory lister."""

from __future__ import annotations

from .sync import (
    SIDEBAR_ERROR_TEXT,
    SidebarContent,
    SidebarError,
    SidebarSuperseded,
    SidebarSyncError,
    SidebarSynchronizer,
)

__all__ = [
    "SIDEBAR_ERROR_TEXT",
    "SidebarContent",
    "SidebarError",
    "SidebarSuperseded",
    "SidebarSyncError",
    "SidebarSynchronizer",
]
