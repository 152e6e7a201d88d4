from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    FIELD = "FIELD"
    OPERATOR = "OPERATOR"
    LOGICAL = "LOGICAL"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    VALUE = "VALUE"
    FUNCTION = "FUNCTION"


@dataclass(frozen=True, slots=True)
class Token:
    """One classified fragment of query text.

    Attributes:
        kind: Token classification.
        value: Token text. Quoted literals have their quotes stripped, keyword
            operators and logical connectives are upper-cased, and functions
            keep their call form (e.g. ``currentUser()``).
        raw: Original quoted text for string literals, otherwise None.
        pos: Offset of the token start in the trimmed query text.
    """

    kind: TokenKind
    value: str
    raw: str | None = None
    pos: int = 0

    @property
    def is_literal(self) -> bool:
        return self.kind in (TokenKind.VALUE, TokenKind.FUNCTION)
