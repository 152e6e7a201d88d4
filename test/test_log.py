"""Tests for logger configuration."""

import logging
import sys
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from IssueQuery.config import LogConfig
from IssueQuery.utils.log import configure_logging, log


class TestLogConfig(unittest.TestCase):
    def test_file_path_is_grouped_by_command(self) -> None:
        config = LogConfig(level="INFO", to_file=True, dir="logs")
        path = config.file_path("parse", datetime(2024, 3, 1, 12, 30, 5))
        self.assertEqual(path, Path("logs") / "parse" / "parse_0301123005.log")


def _reset_handlers() -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        _reset_handlers()

    def test_console_only(self) -> None:
        path = configure_logging(LogConfig(level="WARNING", to_file=False, dir="log"), "parse")
        self.assertIsNone(path)
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.WARNING)
        self.assertFalse(log.propagate)

    def test_file_receives_debug_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config = LogConfig(level="ERROR", to_file=True, dir=tmp)
            path = configure_logging(config, "validate")
            log.debug("tokenized %d tokens", 3)
            for handler in log.handlers:
                handler.flush()

            self.assertIsNotNone(path)
            self.assertEqual(path.parent, Path(tmp) / "validate")
            self.assertEqual(log.level, logging.DEBUG)
            self.assertIn("[DEBG] tokenized 3 tokens", path.read_text(encoding="utf-8"))
            _reset_handlers()

    def test_reconfiguring_replaces_handlers(self) -> None:
        config = LogConfig(level="INFO", to_file=False, dir="log")
        configure_logging(config, "parse")
        configure_logging(config, "suggest")
        self.assertEqual(len(log.handlers), 1)


if __name__ == "__main__":
    unittest.main()
