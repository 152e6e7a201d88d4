"""Autocomplete suggestions for partially typed queries.

This is a heuristic over the tail of the text, not a grammar-driven completer:

- While the text has no ``=`` and no ``IN`` yet, suggest fields whose name
  starts with the last word.
- When the text ends with a bare word, suggest every operator.
- When the text ends with a quoted literal, suggest the logical connectives.

Results are concatenated in that order without deduplication.
"""

from __future__ import annotations

import re

from IssueQuery.query.fields import KNOWN_FIELDS
from IssueQuery.query.lexer import LOGICAL_OPERATORS, OPERATORS

_ENDS_WITH_WORD_RE = re.compile(r"\w+\s*$")
_ENDS_WITH_QUOTED_RE = re.compile(r"(\".+\"|'.+')\s*$")


def suggest(partial: str) -> list[str]:
    """Return plausible next tokens for partial query text.

    Args:
        partial: Query text typed so far.

    Returns:
        Suggested field names, operators, and logical connectives.
    """
    if not isinstance(partial, str):
        return []

    suggestions: list[str] = []
    words = partial.split()
    last_word = words[-1].lower() if words else ""

    if "=" not in partial and "IN" not in partial:
        suggestions.extend(field for field in KNOWN_FIELDS if field.startswith(last_word))

    if _ENDS_WITH_WORD_RE.search(partial):
        suggestions.extend(OPERATORS)

    if _ENDS_WITH_QUOTED_RE.search(partial):
        suggestions.extend(LOGICAL_OPERATORS)

    return suggestions
