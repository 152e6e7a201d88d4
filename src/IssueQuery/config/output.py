"""Output domain configuration for command rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from IssueQuery.config.common import (
    expect_int,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str
    indent: int


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "output", required=True)
    return OutputConfig(
        format=expect_str(get_required_value(section, "format", "output.format"), "output.format").lower(),
        indent=expect_int(get_optional_value(section, "indent", 2), "output.indent"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_ALLOWED_FORMATS)}")
    if config.indent < 0:
        raise ValueError("output.indent must not be negative")
