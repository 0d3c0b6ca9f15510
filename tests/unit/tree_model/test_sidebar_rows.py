"""Tests for tree-node structure and sidebar row projection."""

from __future__ import annotations

import unittest

from docsview.tree_model import (
    DirectoryEntry,
    EntryKind,
    SidebarRow,
    TreeNode,
    build_sidebar_rows,
    display_name,
    format_sidebar_row,
)
from docsview.ui_theme import PLAIN_THEME

DIR = EntryKind.DIRECTORY
FILE = EntryKind.FILE


def _scenario_tree() -> TreeNode:
    root = TreeNode(path="", entries=(DirectoryEntry("docs", DIR), DirectoryEntry("readme.md", FILE)))
    root.attach("docs", TreeNode(path="docs", entries=(DirectoryEntry("guide.md", FILE),)))
    return root


class EntryKindTests(unittest.TestCase):
    def test_from_wire_parses_known_types(self) -> None:
        self.assertIs(EntryKind.from_wire("dir"), DIR)
        self.assertIs(EntryKind.from_wire("file"), FILE)

    def test_from_wire_rejects_unknown_types(self) -> None:
        with self.assertRaises(ValueError):
            EntryKind.from_wire("symlink")


class TreeNodeTests(unittest.TestCase):
    def test_attach_requires_matching_child_path(self) -> None:
        root = TreeNode(path="", entries=(DirectoryEntry("docs", DIR),))
        with self.assertRaises(ValueError):
            root.attach("docs", TreeNode(path="other"))

    def test_attach_keeps_single_expanded_child(self) -> None:
        root = TreeNode(path="", entries=(DirectoryEntry("a", DIR), DirectoryEntry("b", DIR)))
        root.attach("a", TreeNode(path="a"))
        root.attach("b", TreeNode(path="b"))
        self.assertEqual(list(root.children), ["b"])

    def test_walk_find_and_deepest_follow_branch(self) -> None:
        tree = _scenario_tree()
        self.assertEqual(tree.expanded_paths(), ["", "docs"])
        self.assertEqual(tree.deepest().path, "docs")
        found = tree.find("docs")
        self.assertIsNotNone(found)
        assert found is not None
        self.assertEqual(found.entries[0].name, "guide.md")
        self.assertIsNone(tree.find("missing"))


class SidebarRowTests(unittest.TestCase):
    def test_display_names_strip_extension_and_mark_directories(self) -> None:
        self.assertEqual(display_name(DirectoryEntry("docs", DIR)), "docs/")
        self.assertEqual(display_name(DirectoryEntry("guide.md", FILE)), "guide")

    def test_scenario_rows_highlight_only_current_document(self) -> None:
        rows = build_sidebar_rows(_scenario_tree(), "docs/guide.md")
        self.assertEqual(
            rows,
            [
                SidebarRow(path="docs", depth=0, is_dir=True, display="docs/", active=False, expanded=True),
                SidebarRow(path="docs/guide.md", depth=1, is_dir=False, display="guide", active=True),
                SidebarRow(path="readme.md", depth=0, is_dir=False, display="readme", active=False),
            ],
        )

    def test_non_document_files_are_hidden_and_order_is_preserved(self) -> None:
        tree = TreeNode(
            path="",
            entries=(
                DirectoryEntry("zeta.md", FILE),
                DirectoryEntry("logo.png", FILE),
                DirectoryEntry("alpha", DIR),
                DirectoryEntry("beta.md", FILE),
            ),
        )
        rows = build_sidebar_rows(tree, "")
        self.assertEqual([row.display for row in rows], ["zeta", "alpha/", "beta"])

    def test_directories_are_never_active(self) -> None:
        tree = TreeNode(path="", entries=(DirectoryEntry("docs", DIR),))
        rows = build_sidebar_rows(tree, "docs")
        self.assertFalse(rows[0].active)

    def test_at_most_one_active_row(self) -> None:
        tree = _scenario_tree()
        for current in ("", "docs", "readme.md", "docs/guide.md", "missing.md"):
            active = [row for row in build_sidebar_rows(tree, current) if row.active]
            self.assertLessEqual(len(active), 1)

    def test_format_row_plain_theme(self) -> None:
        rows = build_sidebar_rows(_scenario_tree(), "docs/guide.md")
        self.assertEqual(format_sidebar_row(rows[0], PLAIN_THEME), "▾ docs/")
        self.assertEqual(format_sidebar_row(rows[1], PLAIN_THEME), "  • guide")
        self.assertEqual(format_sidebar_row(rows[2], PLAIN_THEME), "  readme")
