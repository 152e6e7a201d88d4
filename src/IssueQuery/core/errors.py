"""Errors raised while interpreting filter queries."""

from __future__ import annotations


class QueryError(ValueError):
    """Base class for query interpretation failures."""


class LexError(QueryError):
    """Raised when query text cannot be split into tokens."""


class CompileError(QueryError):
    """Raised when a token sequence does not form a valid condition."""


class FilterNotFoundError(LookupError):
    """Raised when a saved filter does not exist."""


class FilterAccessError(PermissionError):
    """Raised when a user may not read or change a saved filter."""


class InvalidFilterError(ValueError):
    """Raised when a saved filter's query does not validate."""
