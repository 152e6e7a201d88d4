"""Tests for the public parse / validate API."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from IssueQuery.core.conditions import Combinator, ComparisonOp, ConditionGroup, ConditionLeaf
from IssueQuery.query import CompileError, LexError, QueryError, parse, validate

_QUERIES = [
    "",
    'status = "TODO"',
    'status = "TODO" AND priority = "HIGH"',
    'project = "PROJ1" AND status IN ("TODO","IN_PROGRESS")',
    "assignee = currentUser()",
    'title ~ "abc',
    "status",
    "status = ",
    "sprint IS NOT EMPTY",
    'created >= "2024-02-01" OR updated < "2024-03-01"',
    "storyPoints = many",
    "project = PROJ-1",
    'status IN ("A", "B" AND priority = "HIGH"',
]


class TestParse(unittest.TestCase):
    def test_empty_query_matches_everything(self) -> None:
        for text in ("", "   "):
            tree = parse(text)
            self.assertIsInstance(tree, ConditionGroup)
            self.assertTrue(tree.is_empty)

    def test_status_equality(self) -> None:
        self.assertEqual(
            parse('status = "TODO"'),
            ConditionLeaf(field="status", operator=ComparisonOp.EQ, value="TODO"),
        )

    def test_current_user(self) -> None:
        self.assertEqual(
            parse("assignee = currentUser()", caller_id="u1"),
            ConditionLeaf(field="assigneeId", operator=ComparisonOp.EQ, value="u1"),
        )
        with self.assertRaises(CompileError):
            parse("assignee = currentUser()")

    def test_priority_in(self) -> None:
        tree = parse('priority IN ("LOW","HIGH")')
        self.assertEqual(tree.operator, ComparisonOp.IN)
        self.assertEqual(list(tree.value), ["LOW", "HIGH"])

    def test_and_group_preserves_order(self) -> None:
        tree = parse('status = "TODO" AND priority = "HIGH"')
        self.assertEqual(tree.combinator, Combinator.AND)
        self.assertEqual([c.field for c in tree.conditions], ["status", "priority"])

    def test_full_example(self) -> None:
        tree = parse('project = "X" AND status IN ("TODO","IN_PROGRESS") AND assignee = currentUser()', "u7")
        self.assertEqual(
            tree,
            ConditionGroup(
                combinator=Combinator.AND,
                conditions=(
                    ConditionLeaf(field="projectId", operator=ComparisonOp.EQ, value="X"),
                    ConditionLeaf(field="status", operator=ComparisonOp.IN, value=("TODO", "IN_PROGRESS")),
                    ConditionLeaf(field="assigneeId", operator=ComparisonOp.EQ, value="u7"),
                ),
            ),
        )

    def test_unterminated_quote(self) -> None:
        with self.assertRaises(LexError) as ctx:
            parse('title ~ "abc')
        self.assertIn("Unterminated", str(ctx.exception))

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            parse("status")
        self.assertTrue(issubclass(LexError, QueryError))
        self.assertTrue(issubclass(CompileError, QueryError))

    def test_repeated_parse_is_identical(self) -> None:
        text = 'status NOT IN ("DONE") OR created > "2024-01-01" OR title ~ "crash"'
        self.assertEqual(parse(text, "u1"), parse(text, "u1"))


class TestValidate(unittest.TestCase):
    def test_valid_query(self) -> None:
        result = validate('status = "TODO" AND assignee = "u1"')
        self.assertTrue(result.valid)
        self.assertIsNone(result.error)
        self.assertEqual(result.to_dict(), {"valid": True})

    def test_invalid_query_reports_message(self) -> None:
        result = validate('title ~ "abc')
        self.assertFalse(result.valid)
        self.assertIn("Unterminated", result.error)
        self.assertEqual(result.to_dict(), {"valid": False, "error": result.error})

    def test_validation_has_no_caller(self) -> None:
        result = validate("assignee = currentUser()")
        self.assertFalse(result.valid)
        self.assertIn("currentUser()", result.error)

    def test_unclosed_in_list_is_invalid(self) -> None:
        result = validate('status IN ("A", "B" AND priority = "HIGH"')
        self.assertFalse(result.valid)
        self.assertIn('")"', result.error)

    def test_valid_matches_parse(self) -> None:
        for text in _QUERIES:
            with self.subTest(text=text):
                try:
                    parse(text)
                    parsed = True
                except QueryError:
                    parsed = False
                self.assertEqual(validate(text).valid, parsed)


if __name__ == "__main__":
    unittest.main()
