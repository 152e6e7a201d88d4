"""Compile-time evaluation of zero-argument query functions."""

from __future__ import annotations

from collections.abc import Callable

from IssueQuery.core.errors import CompileError
from IssueQuery.core.tokens import Token

FunctionResolver = Callable[[str | None], str]


def _current_user(caller_id: str | None) -> str:
    if not caller_id:
        raise CompileError("currentUser() function requires a caller identity")
    return caller_id


def _resolvers() -> dict[str, FunctionResolver]:
    """Return resolver registry keyed by lower-cased function name."""
    return {
        "currentuser": _current_user,
    }


def resolve_function(token: Token, caller_id: str | None = None) -> str:
    """Evaluate a FUNCTION token into a literal.

    Args:
        token: FUNCTION token whose value has the form ``name()``.
        caller_id: Identity of the user issuing the query.

    Returns:
        Resolved literal text.

    Raises:
        CompileError: If the function is unknown or its inputs are missing.
    """
    name = token.value.removesuffix("()")
    resolver = _resolvers().get(name.lower())
    if resolver is None:
        raise CompileError(f"Unknown function: {token.value}")
    return resolver(caller_id)
