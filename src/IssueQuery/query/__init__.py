"""Issue filter query interpreter.

Public entry points used by the surrounding service:

- `parse`: query text (+ optional caller identity) to a `ConditionTree`.
- `validate`: dry-run check that never raises.
- `suggest`: autocomplete proposals for partial text.
"""

from __future__ import annotations

from IssueQuery.core.conditions import ConditionTree, match_all
from IssueQuery.core.errors import CompileError, LexError, QueryError
from IssueQuery.query.compiler import compile_tokens
from IssueQuery.query.lexer import tokenize
from IssueQuery.query.suggest import suggest
from IssueQuery.query.validator import ValidationResult, validate


def parse(text: str, caller_id: str | None = None) -> ConditionTree:
    """Parse query text into a condition tree.

    Args:
        text: Raw query text.
        caller_id: Identity of the user issuing the query, used by
            ``currentUser()``.

    Returns:
        Condition tree. Empty text yields the unconstrained tree.

    Raises:
        LexError: If the text cannot be tokenized.
        CompileError: If the tokens do not form valid conditions.
    """
    if not text or not text.strip():
        return match_all()
    return compile_tokens(tokenize(text), caller_id)


__all__ = [
    "CompileError",
    "LexError",
    "QueryError",
    "ValidationResult",
    "compile_tokens",
    "parse",
    "suggest",
    "tokenize",
    "validate",
]
