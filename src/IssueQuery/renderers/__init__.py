"""Output renderers for command results.

Provides the OutputWriter abstraction with console and JSON implementations,
and a factory to pick one from configuration.
"""

from __future__ import annotations

from IssueQuery.config import AppConfig
from IssueQuery.renderers.base import OutputWriter
from IssueQuery.renderers.console import ConsoleOutputWriter, render_text
from IssueQuery.renderers.json import JsonOutputWriter, render_json, render_where


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        OutputWriter for the configured format.
    """
    if config.output.format == "json":
        return JsonOutputWriter(indent=config.output.indent)
    if config.output.format == "console":
        return ConsoleOutputWriter()
    raise ValueError(f"Unsupported output format: {config.output.format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "render_json",
    "render_text",
    "render_where",
    "create_output_writer",
]
