"""Tests for autocomplete suggestions."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from IssueQuery.query import suggest
from IssueQuery.query.fields import KNOWN_FIELDS
from IssueQuery.query.lexer import OPERATORS


class TestSuggest(unittest.TestCase):
    def test_field_prefix(self) -> None:
        result = suggest("stat")
        self.assertIn("status", result)
        for field in KNOWN_FIELDS:
            if not field.startswith("stat"):
                self.assertNotIn(field, result)

    def test_field_prefix_ignores_case(self) -> None:
        self.assertIn("priority", suggest("PRI"))

    def test_operators_after_field(self) -> None:
        result = suggest("status ")
        self.assertEqual(result, ["status", *OPERATORS])

    def test_operator_vocabulary(self) -> None:
        self.assertEqual(
            OPERATORS,
            ("=", "!=", "<", ">", "<=", ">=", "~", "!~", "IN", "NOT IN", "IS", "IS NOT"),
        )

    def test_logical_after_quoted_value(self) -> None:
        self.assertEqual(suggest('status = "TODO" '), ["AND", "OR"])

    def test_no_fields_once_operator_typed(self) -> None:
        self.assertEqual(suggest("status = "), [])

    def test_empty_input_lists_all_fields(self) -> None:
        self.assertEqual(suggest(""), list(KNOWN_FIELDS))

    def test_malformed_input_never_raises(self) -> None:
        for text in ('"', "((", 'title ~ "abc', "= = =", None):
            with self.subTest(text=text):
                self.assertIsInstance(suggest(text), list)


if __name__ == "__main__":
    unittest.main()
