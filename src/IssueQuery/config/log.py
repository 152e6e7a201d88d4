"""Log domain configuration for the command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from IssueQuery.config.common import (
    expect_bool,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class LogConfig:
    """How each command reports what it did.

    Attributes:
        level: Console level name, one of `LOG_LEVELS`.
        to_file: Whether a command also writes a DEBUG-level log file.
        dir: Root directory for log files, one subdirectory per command.
    """

    level: str
    to_file: bool
    dir: str

    @property
    def numeric_level(self) -> int:
        return LOG_LEVELS[self.level]

    def file_path(self, action: str, now: datetime | None = None) -> Path:
        """Return the log file for one run of `action`, e.g. ``log/parse/parse_0301120000.log``."""
        stamp = (now or datetime.now()).strftime("%m%d%H%M%S")
        return Path(self.dir) / action / f"{action}_{stamp}.log"


def load_log(raw: Mapping[str, Any]) -> LogConfig:
    """Read the ``log`` section. Only ``level`` is required."""
    section = get_section(raw, "log", required=True)
    level = expect_str(get_required_value(section, "level", "log.level"), "log.level")
    return LogConfig(
        level=level.strip().upper(),
        to_file=expect_bool(get_optional_value(section, "to_file", False), "log.to_file"),
        dir=expect_str(get_optional_value(section, "dir", "log"), "log.dir"),
    )


def check_log(config: LogConfig) -> None:
    """Reject unknown level names, and an empty directory when file logging is on."""
    if config.level not in LOG_LEVELS:
        raise ValueError(f"log.level must be one of {list(LOG_LEVELS)}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is enabled")
