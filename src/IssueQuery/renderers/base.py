"""Base classes for output writers.

Separates command control flow from how results are shown.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from IssueQuery.core.conditions import ConditionTree
from IssueQuery.query.validator import ValidationResult
from IssueQuery.storage.saved_filters import SavedFilter


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_tree(self, query: str, tree: ConditionTree) -> None:
        """Write a compiled condition tree.

        Args:
            query: Query text that was parsed.
            tree: Resulting condition tree.
        """

    @abstractmethod
    def write_validation(self, query: str, result: ValidationResult) -> None:
        """Write the outcome of validating a query."""

    @abstractmethod
    def write_suggestions(self, partial: str, suggestions: Sequence[str]) -> None:
        """Write autocomplete suggestions for partial text."""

    @abstractmethod
    def write_filters(self, filters: Sequence[SavedFilter]) -> None:
        """Write saved filter records."""
