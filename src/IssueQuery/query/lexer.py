"""Filter query lexer.

Splits raw query text into a flat, ordered list of `Token`.

Rules
- Whitespace separates tokens and is otherwise ignored.
- Quoted literals use single or double quotes and are read verbatim (no escape
  processing). The quotes are stripped from `Token.value` and kept in
  `Token.raw`.
- Keyword operators (``IN``, ``NOT IN``, ``IS``, ``IS NOT``) and symbolic
  operators followed by whitespace or ``)`` are matched case-insensitively,
  longest first. Leftover runs of ``= ! < > ~`` become raw operators.
- ``AND`` / ``OR`` are logical connectives.
- Commas only separate list items and are dropped.
- A bare word directly followed by ``()`` is a zero-argument function call.
- Any other bare word is a FIELD, unless it follows an operator, in which case
  it is an unquoted VALUE.
"""

from __future__ import annotations

import re

from IssueQuery.core.conditions import ComparisonOp
from IssueQuery.core.errors import LexError
from IssueQuery.core.tokens import Token, TokenKind
from IssueQuery.utils.log import log

OPERATORS: tuple[str, ...] = tuple(op.value for op in ComparisonOp)
LOGICAL_OPERATORS: tuple[str, ...] = ("AND", "OR")

# Longest first so "IS NOT" is never read as "IS" followed by a stray word.
_OPERATOR_MATCH_ORDER = tuple(sorted(OPERATORS, key=len, reverse=True))
_RAW_OPERATOR_CHARS = "=!<>~"
_RAW_OPERATOR_SUFFIX = "=~"
_QUOTES = "\"'"
_WORD_RE = re.compile(r"[A-Za-z0-9_.]+")
_FUNCTION_NAME_RE = re.compile(r"\w+")


def tokenize(text: str) -> list[Token]:
    """Split query text into tokens.

    Args:
        text: Raw query text.

    Returns:
        Tokens in source order.

    Raises:
        LexError: If a quoted literal is not terminated or a character cannot
            start any token.
    """
    source = text.strip()
    tokens: list[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        ch = source[pos]

        if ch.isspace():
            pos += 1
            continue

        if ch == "(":
            if _is_function_call(source, pos, tokens):
                name = tokens.pop()
                tokens.append(Token(TokenKind.FUNCTION, f"{name.value}()", pos=name.pos))
                pos += 2
            else:
                tokens.append(Token(TokenKind.LPAREN, "(", pos=pos))
                pos += 1
            continue

        if ch == ")":
            tokens.append(Token(TokenKind.RPAREN, ")", pos=pos))
            pos += 1
            continue

        if ch in _QUOTES:
            end = source.find(ch, pos + 1)
            if end == -1:
                raise LexError(f"Unterminated string literal starting at position {pos}")
            tokens.append(Token(TokenKind.VALUE, source[pos + 1 : end], raw=source[pos : end + 1], pos=pos))
            pos = end + 1
            continue

        remaining = source[pos:].upper()

        op = _match_keyword(remaining, _OPERATOR_MATCH_ORDER, allow_rparen=True)
        if op is not None:
            tokens.append(Token(TokenKind.OPERATOR, op, pos=pos))
            pos += len(op)
            continue

        logical = _match_keyword(remaining, LOGICAL_OPERATORS, allow_end=True)
        if logical is not None:
            tokens.append(Token(TokenKind.LOGICAL, logical, pos=pos))
            pos += len(logical)
            continue

        if ch in _RAW_OPERATOR_CHARS:
            op = ch
            if pos + 1 < length and source[pos + 1] in _RAW_OPERATOR_SUFFIX:
                op += source[pos + 1]
            tokens.append(Token(TokenKind.OPERATOR, op, pos=pos))
            pos += len(op)
            continue

        if ch == ",":
            pos += 1
            continue

        match = _WORD_RE.match(source, pos)
        if match is None:
            raise LexError(f"Unexpected character {ch!r} at position {pos}")
        word = match.group()
        tokens.append(_classify_word(word, pos, tokens[-1] if tokens else None))
        pos = match.end()

    log.debug("Tokenized query into %d tokens", len(tokens))
    return tokens


def _match_keyword(
    remaining: str,
    vocabulary: tuple[str, ...],
    *,
    allow_rparen: bool = False,
    allow_end: bool = False,
) -> str | None:
    """Return the first vocabulary entry that prefixes `remaining` on a boundary.

    A match must be followed by whitespace, or by ``)`` / end of input where
    allowed, so keywords are never matched as the prefix of a longer word.
    """
    for word in vocabulary:
        if not remaining.startswith(word):
            continue
        tail = remaining[len(word) : len(word) + 1]
        if tail.isspace():
            return word
        if allow_rparen and tail == ")":
            return word
        if allow_end and tail == "":
            return word
    return None


def _is_function_call(source: str, pos: int, tokens: list[Token]) -> bool:
    """Return whether the ``(`` at `pos` closes a ``name()`` call."""
    if not tokens:
        return False
    prev = tokens[-1]
    if prev.kind not in (TokenKind.FIELD, TokenKind.VALUE) or prev.raw is not None:
        return False
    if not _FUNCTION_NAME_RE.fullmatch(prev.value):
        return False
    if source[pos - len(prev.value) : pos] != prev.value:
        return False
    return source[pos + 1 : pos + 2] == ")"


def _classify_word(word: str, pos: int, prev: Token | None) -> Token:
    upper = word.upper()
    if upper in LOGICAL_OPERATORS:
        return Token(TokenKind.LOGICAL, upper, pos=pos)
    if prev is None or prev.kind in (TokenKind.LOGICAL, TokenKind.LPAREN):
        return Token(TokenKind.FIELD, word, pos=pos)
    if prev.kind is TokenKind.OPERATOR:
        return Token(TokenKind.VALUE, word, pos=pos)
    return Token(TokenKind.FIELD, word, pos=pos)
