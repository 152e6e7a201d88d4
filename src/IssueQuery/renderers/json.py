"""JSON output renderers.

Renders a `ConditionTree` into the where-mapping handed to the query-execution
layer, and provides JsonOutputWriter for command output.

Leaf shapes
- ``=``              -> {field: v}
- ``!=``             -> {field: {"not": v}}
- ``> >= < <=``      -> {field: {"gt" | "gte" | "lt" | "lte": v}}
- ``~`` / ``!~``     -> {field: {"contains": v}} / {field: {"not": {"contains": v}}}
                        with ``"mode": "insensitive"`` on text fields
- ``IN`` / ``NOT IN`` -> {field: {"in": [...]}} / {field: {"notIn": [...]}}
- ``IS`` / ``IS NOT`` -> {field: None} / {field: {"not": None}}
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Sequence

import click

from IssueQuery.core.conditions import ComparisonOp, ConditionGroup, ConditionLeaf, ConditionTree
from IssueQuery.query.validator import ValidationResult
from IssueQuery.renderers.base import OutputWriter
from IssueQuery.storage.saved_filters import SavedFilter

_RANGE_KEYS: dict[ComparisonOp, str] = {
    ComparisonOp.GT: "gt",
    ComparisonOp.GE: "gte",
    ComparisonOp.LT: "lt",
    ComparisonOp.LE: "lte",
}


def render_where(tree: ConditionTree) -> dict[str, Any]:
    """Render a condition tree into a JSON-ready where-mapping.

    Args:
        tree: Compiled condition tree.

    Returns:
        Nested dict. The unconstrained tree renders as ``{}``.
    """
    if isinstance(tree, ConditionGroup):
        if tree.is_empty:
            return {}
        return {tree.combinator.value: [render_where(c) for c in tree.conditions]}
    return {tree.field: _leaf_shape(tree)}


def render_json(tree: ConditionTree, *, indent: int | None = 2) -> str:
    """Serialize a condition tree as JSON text."""
    return json.dumps(render_where(tree), ensure_ascii=False, indent=indent)


def _leaf_shape(leaf: ConditionLeaf) -> Any:
    op = leaf.operator
    value = _json_value(leaf.value)

    if op is ComparisonOp.EQ:
        return value
    if op is ComparisonOp.NE:
        return {"not": value}
    if op in _RANGE_KEYS:
        return {_RANGE_KEYS[op]: value}
    if op is ComparisonOp.CONTAINS or op is ComparisonOp.NOT_CONTAINS:
        contains: dict[str, Any] = {"contains": value}
        if leaf.case_insensitive:
            contains["mode"] = "insensitive"
        return contains if op is ComparisonOp.CONTAINS else {"not": contains}
    if op is ComparisonOp.IN:
        return {"in": value}
    if op is ComparisonOp.NOT_IN:
        return {"notIn": value}
    if op is ComparisonOp.IS:
        return None
    if op is ComparisonOp.IS_NOT:
        return {"not": None}
    raise ValueError(f"Unhandled operator: {op}")


def _json_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_json_value(v) for v in value]
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def filter_payload(saved: SavedFilter) -> dict[str, Any]:
    """Convert a saved filter record into a JSON-serializable dict."""
    return {
        "id": saved.id,
        "name": saved.name,
        "description": saved.description,
        "query": saved.query,
        "owner_id": saved.owner_id,
        "project_id": saved.project_id,
        "is_public": saved.is_public,
        "created_at": saved.created_at.isoformat() if saved.created_at else None,
        "updated_at": saved.updated_at.isoformat() if saved.updated_at else None,
    }


class JsonOutputWriter(OutputWriter):
    """Write command results to stdout as JSON documents."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent if indent > 0 else None

    def _emit(self, payload: Any) -> None:
        click.echo(json.dumps(payload, ensure_ascii=False, indent=self.indent))

    def write_tree(self, query: str, tree: ConditionTree) -> None:
        self._emit({"query": query, "where": render_where(tree)})

    def write_validation(self, query: str, result: ValidationResult) -> None:
        self._emit({"query": query, **result.to_dict()})

    def write_suggestions(self, partial: str, suggestions: Sequence[str]) -> None:
        self._emit({"partial": partial, "suggestions": list(suggestions)})

    def write_filters(self, filters: Sequence[SavedFilter]) -> None:
        self._emit([filter_payload(f) for f in filters])
