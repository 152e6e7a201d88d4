"""Tests for condition tree rendering."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from IssueQuery.query import parse
from IssueQuery.renderers.console import render_text
from IssueQuery.renderers.json import render_json, render_where


class TestRenderWhere(unittest.TestCase):
    def test_empty_tree(self) -> None:
        self.assertEqual(render_where(parse("")), {})

    def test_equality(self) -> None:
        self.assertEqual(render_where(parse('status = "todo"')), {"status": "TODO"})

    def test_negated_equality(self) -> None:
        self.assertEqual(render_where(parse('type != "BUG"')), {"type": {"not": "BUG"}})

    def test_range(self) -> None:
        self.assertEqual(render_where(parse("storyPoints >= 3")), {"storyPoints": {"gte": 3}})
        self.assertEqual(
            render_where(parse('created < "2024-03-01"')),
            {"createdAt": {"lt": "2024-03-01T00:00:00"}},
        )

    def test_contains_text_field_is_insensitive(self) -> None:
        self.assertEqual(
            render_where(parse('title ~ "crash"')),
            {"title": {"contains": "crash", "mode": "insensitive"}},
        )
        self.assertEqual(
            render_where(parse('description !~ "wip"')),
            {"description": {"not": {"contains": "wip", "mode": "insensitive"}}},
        )

    def test_contains_other_field(self) -> None:
        self.assertEqual(render_where(parse('labels ~ "ui"')), {"labels": {"contains": "ui"}})

    def test_membership(self) -> None:
        self.assertEqual(
            render_where(parse('priority IN ("LOW","HIGH")')),
            {"priority": {"in": ["LOW", "HIGH"]}},
        )
        self.assertEqual(
            render_where(parse('status NOT IN ("DONE")')),
            {"status": {"notIn": ["DONE"]}},
        )

    def test_null_tests(self) -> None:
        self.assertEqual(render_where(parse("sprint IS EMPTY")), {"sprintId": None})
        self.assertEqual(render_where(parse("sprint IS NOT NULL")), {"sprintId": {"not": None}})

    def test_group(self) -> None:
        self.assertEqual(
            render_where(parse('status = "TODO" OR assignee = currentUser()', "u1")),
            {"OR": [{"status": "TODO"}, {"assigneeId": "u1"}]},
        )

    def test_render_json_round_trips_through_json(self) -> None:
        text = render_json(parse('status = "TODO" AND priority = "HIGH"'))
        self.assertEqual(json.loads(text), {"AND": [{"status": "TODO"}, {"priority": "HIGH"}]})


class TestRenderText(unittest.TestCase):
    def test_leaf(self) -> None:
        self.assertEqual(render_text(parse('status = "TODO"')), 'status = "TODO"\n')

    def test_group(self) -> None:
        text = render_text(parse('title ~ "Crash" AND sprint IS EMPTY'))
        self.assertEqual(
            text.splitlines(),
            [
                "AND of 2 conditions:",
                '  title ~ "Crash"  (ignore case)',
                "  sprintId IS NULL",
            ],
        )

    def test_empty(self) -> None:
        self.assertIn("matches everything", render_text(parse("")))


if __name__ == "__main__":
    unittest.main()
