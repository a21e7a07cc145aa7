"""The WSGI entry module configures logging when it is imported."""

from __future__ import annotations

import importlib
import logging
import os
import sys
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest import mock

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from student_dashboard.db import Database  # noqa: E402
from student_dashboard.logging_config import ACCESS_LOGGER_NAME  # noqa: E402


class WsgiModuleLoggingTestCase(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.addCleanup(setattr, root, "level", root.level)
        self.log_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.log_dir.cleanup)

    def _import_app_module(self):
        if "app" in sys.modules:
            return importlib.reload(sys.modules["app"])
        return importlib.import_module("app")

    def test_import_installs_handlers(self) -> None:
        root = logging.getLogger()
        env = {"LOG_DIR": self.log_dir.name, "LOG_LEVEL": "INFO"}

        with mock.patch.object(root, "handlers", []), mock.patch.dict(
            os.environ, env
        ), mock.patch.object(Database, "connect", lambda self: self):
            module = self._import_app_module()
            handlers = list(root.handlers)
            access_enabled = logging.getLogger(ACCESS_LOGGER_NAME).isEnabledFor(logging.INFO)
            for handler in handlers:
                handler.close()

        self.assertIsNotNone(module.app)
        self.assertTrue(access_enabled)
        self.assertEqual(3, len(handlers))
        files = sorted(
            Path(handler.baseFilename).name
            for handler in handlers
            if isinstance(handler, RotatingFileHandler)
        )
        self.assertEqual(["combined.log", "error.log"], files)


if __name__ == "__main__":
    unittest.main()
