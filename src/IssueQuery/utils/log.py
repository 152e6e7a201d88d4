"""IssueQuery logging utilities.

Library modules log through the shared `log` object: token and condition
counts at DEBUG, dropped constraints at WARNING. The CLI calls
`configure_logging` once per command to attach a console handler and,
optionally, a per-command log file.

Line format: ``mm-dd HH:MM:SS [LVL] message`` with LVL one of
DEBG/INFO/WARN/ERRO.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from IssueQuery.config.log import LogConfig

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}
_LINE_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(fmt=_LINE_FORMAT, datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("IssueQuery")


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(_AbbrevLevelFormatter())
    return handler


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_AbbrevLevelFormatter())
    return handler


def configure_logging(config: LogConfig, action: str | None = None) -> Path | None:
    """Replace the IssueQuery handlers for one command.

    Args:
        config: Log section of the application config.
        action: CLI command name; a log file is written only when it is given
            and `config.to_file` is set.

    Returns:
        Path of the log file, or None when logging to the console only.
    """
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    log.addHandler(_console_handler(config.numeric_level))
    log_path = config.file_path(action) if config.to_file and action else None
    if log_path is not None:
        log.addHandler(_file_handler(log_path))

    # The file handler wants DEBUG even when the console is quieter.
    log.setLevel(logging.DEBUG if log_path is not None else config.numeric_level)
    log.propagate = False
    return log_path
