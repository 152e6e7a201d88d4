"""Public configuration API for IssueQuery."""

from __future__ import annotations

from IssueQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from IssueQuery.config.log import LogConfig
from IssueQuery.config.output import OutputConfig
from IssueQuery.config.storage import StorageConfig

__all__ = [
    "LogConfig",
    "StorageConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
