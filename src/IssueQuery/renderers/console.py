"""Console text output renderers.

Renders condition trees and saved filters into human-friendly text.
Provides ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Sequence

from IssueQuery.core.conditions import ConditionGroup, ConditionLeaf, ConditionTree
from IssueQuery.query.validator import ValidationResult
from IssueQuery.renderers.base import OutputWriter
from IssueQuery.storage.saved_filters import SavedFilter
from IssueQuery.utils.log import log


def _fmt_value(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, tuple):
        return "(" + ", ".join(_fmt_value(v) for v in value) + ")"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def _fmt_leaf(leaf: ConditionLeaf) -> str:
    text = f"{leaf.field} {leaf.operator.value} {_fmt_value(leaf.value)}"
    if leaf.case_insensitive:
        text += "  (ignore case)"
    return text


def render_text(tree: ConditionTree) -> str:
    """Render a condition tree as indented text, one condition per line.

    Args:
        tree: Compiled condition tree.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []

    def _walk(node: ConditionTree, depth: int) -> None:
        pad = "  " * depth
        if isinstance(node, ConditionLeaf):
            lines.append(pad + _fmt_leaf(node))
            return
        if node.is_empty:
            lines.append(pad + "(no constraints: matches everything)")
            return
        lines.append(f"{pad}{node.combinator.value} of {len(node.conditions)} conditions:")
        for child in node.conditions:
            _walk(child, depth + 1)

    _walk(tree, 0)
    return "\n".join(lines) + "\n"


def render_filters(filters: Iterable[SavedFilter]) -> str:
    """Render saved filters as a numbered list."""
    lines: list[str] = []
    for idx, saved in enumerate(filters, start=1):
        visibility = "public" if saved.is_public else "private"
        lines.append(f"{idx}. [{saved.id}] {saved.name} ({visibility}, owner={saved.owner_id})")
        lines.append(f"   Query: {saved.query}")
        if saved.description:
            lines.append(f"   Description: {saved.description}")
    if not lines:
        return "No saved filters.\n"
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_tree(self, query: str, tree: ConditionTree) -> None:
        log.info("query=%s", query)
        for line in render_text(tree).splitlines():
            log.info(line)

    def write_validation(self, query: str, result: ValidationResult) -> None:
        if result.valid:
            log.info("Valid query: %s", query)
        else:
            log.error("Invalid query: %s (%s)", query, result.error)

    def write_suggestions(self, partial: str, suggestions: Sequence[str]) -> None:
        log.info("partial=%r suggestions=%d", partial, len(suggestions))
        for item in suggestions:
            log.info("  %s", item)

    def write_filters(self, filters: Sequence[SavedFilter]) -> None:
        for line in render_filters(filters).splitlines():
            log.info(line)
