"""Directory-listing and sidebar-tree datatypes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from ..paths import join_path, path_segments


class EntryKind(Enum):
    """Listing entry kind, valued by its wire name."""

    FILE = "file"
    DIRECTORY = "dir"

    @classmethod
    def from_wire(cls, value: object) -> EntryKind:
        """Parse the ``type`` field of a directory-listing item."""
        for kind in cls:
            if kind.value == value:
                return kind
        raise ValueError(f"unknown entry type: {value!r}")


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child reported by the directory lister."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class TreeNode:
    """Listed directory plus the single expanded child on the active branch."""

    path: str
    entries: tuple[DirectoryEntry, ...] = ()
    children: dict[str, TreeNode] = field(default_factory=dict)

    def entry_path(self, entry: DirectoryEntry) -> str:
        return join_path(self.path, entry.name)

    def has_directory(self, name: str) -> bool:
        return any(entry.is_dir and entry.name == name for entry in self.entries)

    def attach(self, segment: str, node: TreeNode) -> TreeNode:
        """Attach ``node`` under ``segment``, replacing any earlier expansion."""
        expected = join_path(self.path, segment)
        if node.path != expected:
            raise ValueError(f"child path {node.path!r} does not match {expected!r}")
        self.children.clear()
        self.children[segment] = node
        return node

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and every expanded descendant, root first."""
        node: TreeNode | None = self
        while node is not None:
            yield node
            node = next(iter(node.children.values()), None)

    def deepest(self) -> TreeNode:
        last = self
        for node in self.walk():
            last = node
        return last

    def find(self, path: str) -> TreeNode | None:
        """Return the expanded node for ``path`` by walking path keys."""
        node: TreeNode | None = self
        base = path_segments(self.path)
        target = path_segments(path)
        if target[: len(base)] != base:
            return None
        for segment in target[len(base):]:
            if node is None:
                return None
            node = node.children.get(segment)
        return node

    def expanded_paths(self) -> list[str]:
        return [node.path for node in self.walk()]


__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "TreeNode",
]
