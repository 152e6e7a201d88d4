"""CLI package for IssueQuery command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from IssueQuery.cli.runner import CommandRunner
from IssueQuery.cli.ui import cli


def main() -> None:
    """Run IssueQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
