"""End-to-end tests for the click command line."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from click.testing import CliRunner

from IssueQuery.cli import cli


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        tmp = Path(self._tmp.name)
        self.config_path = tmp / "config.yml"
        self.config_path.write_text(
            "\n".join(
                [
                    "log:",
                    "  level: WARNING",
                    "output:",
                    "  format: json",
                    "  indent: 0",
                    "storage:",
                    f"  db_path: {(tmp / 'filters.db').as_posix()}",
                    "",
                ]
            ),
            encoding="utf-8",
        )
        self.runner = CliRunner()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _invoke(self, *args: str, env: dict | None = None):
        return self.runner.invoke(cli, ["--config", str(self.config_path), *args], env=env)

    def _json(self, *args: str, env: dict | None = None):
        result = self._invoke(*args, env=env)
        self.assertEqual(result.exit_code, 0, result.output)
        return json.loads(result.stdout)

    def test_parse_outputs_where_mapping(self) -> None:
        payload = self._json("parse", 'status = "todo" AND storyPoints >= 3')
        self.assertEqual(payload["where"], {"AND": [{"status": "TODO"}, {"storyPoints": {"gte": 3}}]})

    def test_parse_uses_caller_option_and_env(self) -> None:
        payload = self._json("parse", "assignee = currentUser()", "--caller", "u1")
        self.assertEqual(payload["where"], {"assigneeId": "u1"})
        payload = self._json("parse", "assignee = currentUser()", env={"ISSUE_QUERY_CALLER": "u7"})
        self.assertEqual(payload["where"], {"assigneeId": "u7"})

    def test_parse_error_aborts(self) -> None:
        result = self._invoke("parse", 'title ~ "open')
        self.assertNotEqual(result.exit_code, 0)

    def test_validate(self) -> None:
        payload = self._json("validate", 'priority IN ("LOW", "HIGH")')
        self.assertTrue(payload["valid"])

        result = self._invoke("validate", "status =")
        self.assertEqual(result.exit_code, 1)
        payload = json.loads(result.stdout)
        self.assertFalse(payload["valid"])
        self.assertIn("Expected value", payload["error"])

    def test_suggest(self) -> None:
        payload = self._json("suggest", "pri")
        self.assertEqual(payload["suggestions"][0], "priority")
        self.assertIn("NOT IN", payload["suggestions"])

    def test_filter_lifecycle(self) -> None:
        saved = self._json("filter", "save", "Mine", 'status = "TODO"', "--owner", "u1")
        self.assertEqual(len(saved), 1)
        filter_id = saved[0]["id"]
        self.assertFalse(saved[0]["is_public"])

        self.assertEqual(self._json("filter", "list", "--owner", "u2"), [])
        result = self._invoke("filter", "run", filter_id, "--owner", "u2")
        self.assertNotEqual(result.exit_code, 0)

        shared = self._json("filter", "share", filter_id, "--owner", "u1")
        self.assertTrue(shared[0]["is_public"])
        listed = self._json("filter", "list", "--owner", "u2")
        self.assertEqual([f["id"] for f in listed], [filter_id])

        ran = self._json("filter", "run", filter_id, "--owner", "u2")
        self.assertEqual(ran["where"], {"status": "TODO"})

        result = self._invoke("filter", "delete", filter_id, "--owner", "u2")
        self.assertNotEqual(result.exit_code, 0)
        result = self._invoke("filter", "delete", filter_id, "--owner", "u1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self._json("filter", "list", "--owner", "u1"), [])

    def test_filter_save_rejects_invalid_query(self) -> None:
        result = self._invoke("filter", "save", "Broken", "status", "--owner", "u1")
        self.assertNotEqual(result.exit_code, 0)
        self.assertEqual(self._json("filter", "list", "--owner", "u1"), [])

    def test_filter_requires_owner(self) -> None:
        result = self._invoke("filter", "list", env={"ISSUE_QUERY_CALLER": ""})
        self.assertEqual(result.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
