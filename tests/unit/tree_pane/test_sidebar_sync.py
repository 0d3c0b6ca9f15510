"""Tests for active-branch sidebar synchronization."""

from __future__ import annotations

import asyncio
import unittest

from docsview.store.errors import TransportError
from docsview.tree_model import build_sidebar_rows
from docsview.tree_pane import SidebarError, SidebarSuperseded, SidebarSyncError, SidebarSynchronizer
from tests.fakes import FakeStore


def _scenario_store() -> FakeStore:
    return FakeStore({"readme.md": "# Readme", "docs/guide.md": "# Guide"}, dirs=["docs"])


class SidebarSynchronizeTests(unittest.IsolatedAsyncioTestCase):
    async def test_scenario_expands_docs_and_highlights_guide(self) -> None:
        store = FakeStore(dirs=["docs"])
        store.add_file("docs/guide.md", "# Guide")
        store.add_file("readme.md", "# Readme")
        sync = SidebarSynchronizer(store)

        tree = await sync.synchronize("docs")

        self.assertIs(sync.displayed, tree)
        self.assertEqual(store.listed(), ["", "docs"])
        rows = build_sidebar_rows(tree, "docs/guide.md")
        self.assertEqual([(row.display, row.depth, row.active) for row in rows], [
            ("docs/", 0, False),
            ("guide", 1, True),
            ("readme", 0, False),
        ])

    async def test_root_target_lists_only_root(self) -> None:
        store = _scenario_store()
        sync = SidebarSynchronizer(store)

        tree = await sync.synchronize("")

        self.assertEqual(store.listed(), [""])
        self.assertEqual(tree.children, {})

    async def test_only_active_branch_is_expanded(self) -> None:
        store = FakeStore(dirs=["a/b/c", "a/x", "y"])
        sync = SidebarSynchronizer(store)

        tree = await sync.synchronize("a/b/c")

        self.assertEqual(store.listed(), ["", "a", "a/b", "a/b/c"])
        self.assertEqual(tree.expanded_paths(), ["", "a", "a/b", "a/b/c"])
        for node in tree.walk():
            self.assertLessEqual(len(node.children), 1)
        self.assertEqual(tree.deepest().children, {})

    async def test_levels_are_requested_sequentially(self) -> None:
        store = FakeStore(dirs=["a/b"])
        gate = store.gate("a")
        sync = SidebarSynchronizer(store)

        task = asyncio.create_task(sync.synchronize("a/b"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        self.assertEqual(store.listed(), ["", "a"])
        gate.set()
        await task
        self.assertEqual(store.listed(), ["", "a", "a/b"])

    async def test_missing_directory_stops_descent(self) -> None:
        store = FakeStore(dirs=["docs"])
        sync = SidebarSynchronizer(store)

        tree = await sync.synchronize("docs/gone/deeper")

        self.assertEqual(store.listed(), ["", "docs"])
        self.assertEqual(tree.deepest().path, "docs")

    async def test_prefix_named_sibling_is_not_expanded(self) -> None:
        store = FakeStore(dirs=["docs", "docs2"])
        sync = SidebarSynchronizer(store)

        tree = await sync.synchronize("docs2")

        self.assertEqual(list(tree.children), ["docs2"])

    async def test_failure_mounts_error_instead_of_partial_tree(self) -> None:
        store = FakeStore(dirs=["a/b"])
        store.fail("list", "a/b", TransportError("boom"))
        sync = SidebarSynchronizer(store)
        mounted: list[object] = []
        sync.subscribe(mounted.append)

        with self.assertRaises(SidebarSyncError):
            await sync.synchronize("a/b")

        self.assertIsInstance(sync.displayed, SidebarError)
        self.assertEqual(mounted, [sync.displayed])

    async def test_superseded_call_never_mounts_stale_tree(self) -> None:
        store = FakeStore(dirs=["slow", "fast"])
        gate = store.gate("slow")
        sync = SidebarSynchronizer(store)

        stale = asyncio.create_task(sync.synchronize("slow"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        latest = await sync.synchronize("fast")
        gate.set()

        with self.assertRaises(SidebarSuperseded):
            await stale
        self.assertIs(sync.displayed, latest)
        self.assertEqual(latest.expanded_paths(), ["", "fast"])

    async def test_superseded_failure_does_not_mount_error(self) -> None:
        store = FakeStore(dirs=["bad", "good"])
        gate = store.gate("bad")
        store.fail("list", "bad", TransportError("late failure"))
        sync = SidebarSynchronizer(store)

        stale = asyncio.create_task(sync.synchronize("bad"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        latest = await sync.synchronize("good")
        gate.set()

        with self.assertRaises(SidebarSuperseded):
            await stale
        self.assertIs(sync.displayed, latest)
