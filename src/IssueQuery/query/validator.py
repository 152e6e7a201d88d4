"""Dry-run validation of filter queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from IssueQuery.query.compiler import compile_tokens
from IssueQuery.query.lexer import tokenize
from IssueQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a query.

    Attributes:
        valid: Whether the query lexes and compiles.
        error: Error message when invalid, otherwise None.
    """

    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}


def validate(text: str) -> ValidationResult:
    """Check that a query would parse, without a caller identity.

    Never raises: any failure is reported through the result.

    Args:
        text: Raw query text.

    Returns:
        Validation result.
    """
    if not text or not text.strip():
        return ValidationResult(valid=True)
    try:
        compile_tokens(tokenize(text))
    except Exception as e:  # noqa: BLE001 - validation reports instead of raising
        log.debug("Query failed validation: %s", e)
        return ValidationResult(valid=False, error=str(e) or "Invalid query syntax")
    return ValidationResult(valid=True)
