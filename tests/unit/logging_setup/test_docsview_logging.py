"""Tests for the docsview logger namespace and handler setup."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from docsview.logging import LOGGER_NAMESPACE, get_logger, is_configured, setup_logging


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        root = logging.getLogger(LOGGER_NAMESPACE)
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()
        root.setLevel(logging.NOTSET)

    def test_get_logger_namespaces_foreign_names(self) -> None:
        self.assertEqual(get_logger("store").name, "docsview.store")
        self.assertEqual(get_logger("docsview.runtime.app").name, "docsview.runtime.app")
        self.assertEqual(get_logger("docsview").name, "docsview")

    def test_without_sinks_installs_null_handler(self) -> None:
        setup_logging(level="info")
        root = logging.getLogger(LOGGER_NAMESPACE)
        self.assertEqual(root.level, logging.INFO)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0], logging.NullHandler)
        self.assertTrue(is_configured())

    def test_unknown_level_falls_back_to_warning(self) -> None:
        setup_logging(level="chatty")
        self.assertEqual(logging.getLogger(LOGGER_NAMESPACE).level, logging.WARNING)

    def test_log_file_receives_child_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "docsview.log"
            setup_logging(level="DEBUG", log_file=str(log_path))
            get_logger("docsview.tree_pane.sync").info("mounted %s", "docs")
            for handler in logging.getLogger(LOGGER_NAMESPACE).handlers:
                handler.flush()
            text = log_path.read_text(encoding="utf-8")
            self.tearDown()
        self.assertIn("docsview.tree_pane.sync - INFO - mounted docs", text)

    def test_repeat_setup_replaces_handlers(self) -> None:
        setup_logging(console=True)
        setup_logging(console=True)
        handlers = logging.getLogger(LOGGER_NAMESPACE).handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.StreamHandler)
