"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from IssueQuery.cli.runner import CommandRunner
from IssueQuery.config import load_config

CALLER_ENV = "ISSUE_QUERY_CALLER"


@click.group(help="IssueQuery: parse, validate, and store issue filter queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML config file merged over the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("parse")
@click.argument("query")
@click.option("--caller", envvar=CALLER_ENV, default=None, help="Caller identity for currentUser().")
@click.pass_context
def parse_cmd(ctx: click.Context, query: str, caller: str | None) -> None:
    """Compile QUERY into a condition tree."""
    CommandRunner(ctx.obj).run_parse(action=ctx.command.name, query=query, caller_id=caller)


@cli.command("validate")
@click.argument("query")
@click.pass_context
def validate_cmd(ctx: click.Context, query: str) -> None:
    """Check QUERY syntax; exits with status 1 when invalid."""
    if not CommandRunner(ctx.obj).run_validate(action=ctx.command.name, query=query):
        ctx.exit(1)


@cli.command("suggest")
@click.argument("partial", default="")
@click.pass_context
def suggest_cmd(ctx: click.Context, partial: str) -> None:
    """Suggest next tokens for PARTIAL query text."""
    CommandRunner(ctx.obj).run_suggest(action=ctx.command.name, partial=partial)


@cli.group("filter")
def filter_group() -> None:
    """Manage saved filters."""


_owner_option = click.option(
    "--owner",
    envvar=CALLER_ENV,
    required=True,
    help="Identity of the user performing the operation.",
)


@filter_group.command("save")
@click.argument("name")
@click.argument("query")
@_owner_option
@click.option("--description", default=None, help="Free-text description.")
@click.option("--project", "project_id", default=None, help="Project the filter belongs to.")
@click.option("--public/--private", "is_public", default=False, show_default=True, help="Visibility.")
@click.pass_context
def filter_save_cmd(
    ctx: click.Context,
    name: str,
    query: str,
    owner: str,
    description: str | None,
    project_id: str | None,
    is_public: bool,
) -> None:
    """Validate QUERY and store it as NAME."""
    CommandRunner(ctx.obj).run_filter(
        ctx.command.name,
        owner,
        lambda command: command.save(
            name=name,
            query=query,
            description=description,
            project_id=project_id,
            is_public=is_public,
        ),
    )


@filter_group.command("list")
@_owner_option
@click.pass_context
def filter_list_cmd(ctx: click.Context, owner: str) -> None:
    """List own and public filters, newest first."""
    CommandRunner(ctx.obj).run_filter(ctx.command.name, owner, lambda command: command.list())


@filter_group.command("run")
@click.argument("filter_id")
@_owner_option
@click.pass_context
def filter_run_cmd(ctx: click.Context, filter_id: str, owner: str) -> None:
    """Compile a saved filter with the owner as caller identity."""
    CommandRunner(ctx.obj).run_filter(ctx.command.name, owner, lambda command: command.run(filter_id))


@filter_group.command("share")
@click.argument("filter_id")
@_owner_option
@click.pass_context
def filter_share_cmd(ctx: click.Context, filter_id: str, owner: str) -> None:
    """Make an owned filter public."""
    CommandRunner(ctx.obj).run_filter(ctx.command.name, owner, lambda command: command.share(filter_id))


@filter_group.command("delete")
@click.argument("filter_id")
@_owner_option
@click.pass_context
def filter_delete_cmd(ctx: click.Context, filter_id: str, owner: str) -> None:
    """Delete an owned filter."""
    CommandRunner(ctx.obj).run_filter(ctx.command.name, owner, lambda command: command.delete(filter_id))
