"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from IssueQuery.config.log import LogConfig, check_log, load_log
from IssueQuery.config.output import OutputConfig, check_output, load_output
from IssueQuery.config.storage import StorageConfig, check_storage, load_storage

DEFAULT_CONFIG_PATH = Path("config/default.yml")

# Built-in defaults; kept in sync with config/default.yml.
_DEFAULTS_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

storage:
  enabled: true
  db_path: database/filters.db

output:
  format: console
  indent: 2
"""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    log: LogConfig
    storage: StorageConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    log_config = load_log(raw)
    storage = load_storage(raw)
    output = load_output(raw)

    check_log(log_config)
    check_storage(storage)
    check_output(output)

    return AppConfig(log=log_config, storage=storage, output=output)


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from an optional YAML file merged over built-in defaults."""
    return load_config_with_defaults(path, _defaults_text=_DEFAULTS_YAML)


def load_config_with_defaults(
    config_path: Path | None,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    _defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override YAML file, or None to use defaults only.
        default_path: YAML file holding the defaults.
        _defaults_text: Defaults as YAML text; takes precedence over `default_path`.

    Returns:
        Parsed and validated configuration.
    """
    if _defaults_text is not None:
        base = parse_yaml(_defaults_text)
    else:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path is None or (_defaults_text is None and config_path == default_path):
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
