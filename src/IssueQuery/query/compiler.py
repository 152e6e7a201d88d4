"""Condition compiler.

Turns the lexer's token list into a `ConditionTree` in one left-to-right scan.

Grouping is flat: every condition lands in one list, and the last logical
connective seen decides whether that list is combined with AND or OR.
Parentheses other than IN-list and function-call parentheses are skipped.
"""

from __future__ import annotations

from typing import Sequence

from IssueQuery.core.conditions import (
    Combinator,
    ComparisonOp,
    ConditionGroup,
    ConditionLeaf,
    ConditionTree,
    LiteralValue,
    match_all,
)
from IssueQuery.core.errors import CompileError
from IssueQuery.core.tokens import Token, TokenKind
from IssueQuery.query.fields import TEXT_ATTRIBUTES, coerce_value, map_field
from IssueQuery.query.functions import resolve_function
from IssueQuery.utils.log import log

_NULL_WORDS = frozenset({"NULL", "EMPTY"})
_LIST_ITEM_KINDS = (TokenKind.VALUE, TokenKind.FIELD, TokenKind.FUNCTION)


def compile_tokens(tokens: Sequence[Token], caller_id: str | None = None) -> ConditionTree:
    """Compile tokens into a condition tree.

    Args:
        tokens: Tokens produced by `tokenize`.
        caller_id: Identity used to resolve functions such as ``currentUser()``.

    Returns:
        The single leaf when exactly one condition compiles, a group when there
        are several, and the unconstrained empty group when there are none.

    Raises:
        CompileError: If a field lacks an operator, an operator lacks a value,
            an operator is unsupported, or a function cannot be resolved.
    """
    conditions: list[ConditionLeaf] = []
    combinator = Combinator.AND
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if token.kind is TokenKind.LOGICAL:
            combinator = Combinator(token.value)
            i += 1
            continue

        if token.kind is not TokenKind.FIELD:
            i += 1
            continue

        op_token = tokens[i + 1] if i + 1 < len(tokens) else None
        if op_token is None or op_token.kind is not TokenKind.OPERATOR:
            raise CompileError(f'Expected operator after field "{token.value}"')
        operator = ComparisonOp.from_symbol(op_token.value)
        if operator is None:
            raise CompileError(f'Unsupported operator "{op_token.value}" after field "{token.value}"')

        if operator.takes_list:
            values, i = _collect_list(tokens, i + 2, caller_id)
            conditions.append(build_leaf(token.value, operator, values))
            continue

        value_token = tokens[i + 2] if i + 2 < len(tokens) else None
        if value_token is None or not value_token.is_literal:
            raise CompileError(f'Expected value after operator "{op_token.value}"')
        value = _literal_text(value_token, caller_id)

        if operator.is_null_test and value.upper() not in _NULL_WORDS:
            log.warning(
                "Dropping %s condition on field %s: only NULL or EMPTY are supported, got %r",
                operator.value,
                token.value,
                value,
            )
        else:
            conditions.append(build_leaf(token.value, operator, value))
        i += 3

    log.debug("Compiled %d conditions combinator=%s", len(conditions), combinator.value)
    if not conditions:
        return match_all()
    if len(conditions) == 1:
        return conditions[0]
    return ConditionGroup(combinator=combinator, conditions=conditions)


def build_leaf(field: str, operator: ComparisonOp, value: str | Sequence[str]) -> ConditionLeaf:
    """Build one leaf from a user-facing field, an operator, and literal text.

    Args:
        field: User-facing field name.
        operator: Comparison operator.
        value: Literal text, or a sequence of literal texts for IN/NOT IN.

    Returns:
        Leaf with the mapped attribute name and a coerced value.
    """
    attribute = map_field(field)

    if operator.takes_list:
        items = [value] if isinstance(value, str) else list(value)
        coerced: LiteralValue | tuple[LiteralValue, ...] = tuple(coerce_value(attribute, v) for v in items)
        return ConditionLeaf(field=attribute, operator=operator, value=coerced)

    text = value if isinstance(value, str) else (value[0] if value else "")
    if operator.is_null_test:
        return ConditionLeaf(field=attribute, operator=operator, value=None)
    if operator.is_substring:
        return ConditionLeaf(
            field=attribute,
            operator=operator,
            value=text,
            case_insensitive=attribute in TEXT_ATTRIBUTES,
        )
    return ConditionLeaf(field=attribute, operator=operator, value=coerce_value(attribute, text))


def _collect_list(tokens: Sequence[Token], start: int, caller_id: str | None) -> tuple[list[str], int]:
    """Collect IN-list items starting at `start`.

    Returns the literal texts and the index of the first token after the list.
    With a leading ``(`` the list runs to the matching ``)`` and may hold only
    literals; without one it is the contiguous run of value tokens.

    Raises:
        CompileError: If a parenthesized list is not closed before a logical
            keyword, an operator, another ``(``, or the end of the query.
    """
    values: list[str] = []
    op_text = tokens[start - 1].value
    j = start
    if j < len(tokens) and tokens[j].kind is TokenKind.LPAREN:
        j += 1
        while j < len(tokens) and tokens[j].kind in _LIST_ITEM_KINDS:
            values.append(_literal_text(tokens[j], caller_id))
            j += 1
        if j >= len(tokens) or tokens[j].kind is not TokenKind.RPAREN:
            raise CompileError(f'Expected ")" to close list after operator "{op_text}"')
        return values, j + 1

    while j < len(tokens) and tokens[j].is_literal:
        values.append(_literal_text(tokens[j], caller_id))
        j += 1
    if not values:
        raise CompileError(f'Expected value after operator "{op_text}"')
    return values, j


def _literal_text(token: Token, caller_id: str | None) -> str:
    if token.kind is TokenKind.FUNCTION:
        return resolve_function(token, caller_id)
    return token.value
