"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, resource cleanup, and
error handling for command execution.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from IssueQuery.cli.commands import FilterCommand
from IssueQuery.config import AppConfig
from IssueQuery.core.errors import QueryError
from IssueQuery.query import parse, suggest, validate
from IssueQuery.renderers import create_output_writer
from IssueQuery.services import create_filter_service
from IssueQuery.storage import create_storage
from IssueQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(self.config.log, action)

    def run_parse(self, action: str, query: str, caller_id: str | None) -> None:
        """Parse a query and write the condition tree.

        Raises:
            click.Abort: When the query does not parse.
        """
        self._configure_logging(action)
        output_writer = create_output_writer(self.config)
        try:
            tree = parse(query, caller_id=caller_id)
        except QueryError as e:
            log.error("Query parse error: %s", e)
            raise click.Abort from e
        output_writer.write_tree(query, tree)

    def run_validate(self, action: str, query: str) -> bool:
        """Validate a query and write the result.

        Returns:
            Whether the query is valid.
        """
        self._configure_logging(action)
        result = validate(query)
        create_output_writer(self.config).write_validation(query, result)
        return result.valid

    def run_suggest(self, action: str, partial: str) -> None:
        """Write autocomplete suggestions for partial query text."""
        self._configure_logging(action)
        create_output_writer(self.config).write_suggestions(partial, suggest(partial))

    def run_filter(self, action: str, user_id: str, operation: Callable[[FilterCommand], None]) -> None:
        """Run a saved filter operation inside a managed database session.

        Args:
            action: The CLI command name (e.g., 'save').
            user_id: Identity the operation runs as.
            operation: Callback performing the operation on a FilterCommand.

        Raises:
            click.Abort: When the operation fails.
        """
        self._configure_logging(action)
        try:
            db_manager, filter_store = create_storage(self.config)
            command = FilterCommand(
                service=create_filter_service(filter_store),
                output_writer=create_output_writer(self.config),
                user_id=user_id,
            )
            with db_manager:
                operation(command)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Filter %s failed: %s", action, e)
            raise click.Abort from e
