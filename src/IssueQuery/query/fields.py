"""Field vocabulary and value coercion.

The mapping tables here are module-level read-only views, built once at import
time and shared by every compile call.
"""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Final, Mapping

from dateutil import parser as dt_parser

from IssueQuery.core.conditions import LiteralValue
from IssueQuery.core.errors import CompileError

FIELD_MAP: Final[Mapping[str, str]] = MappingProxyType(
    {
        "project": "projectId",
        "status": "status",
        "priority": "priority",
        "assignee": "assigneeId",
        "reporter": "createdBy",
        "sprint": "sprintId",
        "epic": "epicId",
        "type": "type",
        "labels": "labels",
        "created": "createdAt",
        "updated": "updatedAt",
    }
)

# User-facing field names in suggestion order.
KNOWN_FIELDS: Final[tuple[str, ...]] = tuple(FIELD_MAP)

DATE_ATTRIBUTES: Final = frozenset({"createdAt", "updatedAt", "dueDate"})
UPPERCASE_ATTRIBUTES: Final = frozenset({"status", "priority"})
INTEGER_ATTRIBUTES: Final = frozenset({"storyPoints"})
TEXT_ATTRIBUTES: Final = frozenset({"title", "description"})


def map_field(name: str) -> str:
    """Map a user-facing field name to its storage attribute.

    Unknown names pass through unchanged so custom fields keep working.
    """
    return FIELD_MAP.get(name.lower(), name)


def coerce_value(attribute: str, raw: str) -> LiteralValue:
    """Convert literal text into the value type of a storage attribute.

    Args:
        attribute: Storage attribute name (already mapped).
        raw: Literal text from the query.

    Returns:
        ``datetime`` for date attributes, upper-cased text for status and
        priority, ``int`` for numeric attributes, otherwise the text itself.

    Raises:
        CompileError: If the text cannot be read as the attribute's type.
    """
    if attribute in DATE_ATTRIBUTES:
        return _parse_date(attribute, raw)
    if attribute in UPPERCASE_ATTRIBUTES:
        return raw.upper()
    if attribute in INTEGER_ATTRIBUTES:
        try:
            return int(raw.strip(), 10)
        except ValueError as e:
            raise CompileError(f'Invalid number for field "{attribute}": {raw!r}') from e
    return raw


def _parse_date(attribute: str, raw: str) -> datetime:
    try:
        return dt_parser.parse(raw)
    except (ValueError, OverflowError) as e:
        raise CompileError(f'Invalid date for field "{attribute}": {raw!r}') from e
