"""Saved filter store implementation."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from IssueQuery.utils.log import log

if TYPE_CHECKING:
    from IssueQuery.storage.db import DatabaseManager

_COLUMNS = "id, name, description, query, owner_id, project_id, is_public, created_at, updated_at"
_UPDATABLE = frozenset({"name", "description", "query", "project_id", "is_public"})


@dataclass(frozen=True, slots=True)
class SavedFilter:
    """A named filter query persisted for later reuse.

    Attributes:
        id: Unique identifier.
        name: Display name.
        description: Optional free-text description.
        query: Filter query text, validated before it was stored.
        owner_id: Identity of the user who created the filter.
        project_id: Optional project the filter belongs to.
        is_public: Whether users other than the owner may see and run it.
        created_at: Creation time (UTC).
        updated_at: Last modification time (UTC).
    """

    id: str
    name: str
    description: str | None
    query: str
    owner_id: str
    project_id: str | None
    is_public: bool
    created_at: datetime
    updated_at: datetime


class SavedFilterStore:
    """SQLite-based store for saved filters."""

    def __init__(self, db_manager: DatabaseManager):
        """Initialize saved filter store.

        Args:
            db_manager: Shared database manager instance.
        """
        log.debug("Initializing SavedFilterStore")
        self.conn = db_manager.get_connection()

    def insert(
        self,
        *,
        name: str,
        query: str,
        owner_id: str,
        description: str | None = None,
        project_id: str | None = None,
        is_public: bool = False,
    ) -> SavedFilter:
        """Insert a new filter and return the stored record."""
        now = _now_ts()
        filter_id = uuid.uuid4().hex
        self.conn.execute(
            f"INSERT INTO saved_filters ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (filter_id, name, description, query, owner_id, project_id, int(is_public), now, now),
        )
        self.conn.commit()
        log.debug("Saved filter %s for owner %s", filter_id, owner_id)
        return self._require(filter_id)

    def get(self, filter_id: str) -> SavedFilter | None:
        """Return the filter with the given id, or None."""
        cursor = self.conn.execute(f"SELECT {_COLUMNS} FROM saved_filters WHERE id = ?", (filter_id,))
        row = cursor.fetchone()
        return _row_to_filter(row) if row else None

    def list_visible(self, user_id: str) -> list[SavedFilter]:
        """List filters owned by `user_id` or public, newest first."""
        cursor = self.conn.execute(
            f"""
            SELECT {_COLUMNS} FROM saved_filters
            WHERE owner_id = ? OR is_public = 1
            ORDER BY created_at DESC, rowid DESC
            """,
            (user_id,),
        )
        return [_row_to_filter(row) for row in cursor]

    def update(self, filter_id: str, changes: dict[str, Any]) -> SavedFilter:
        """Apply column changes to a filter and return the updated record.

        Args:
            filter_id: Filter identifier.
            changes: Column values keyed by field name. None values are skipped.

        Raises:
            ValueError: If a key is not an updatable column.
        """
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unknown saved filter fields: {sorted(unknown)}")

        values = {k: v for k, v in changes.items() if v is not None}
        if "is_public" in values:
            values["is_public"] = int(bool(values["is_public"]))
        values["updated_at"] = _now_ts()

        assignments = ", ".join(f"{column} = ?" for column in values)
        self.conn.execute(
            f"UPDATE saved_filters SET {assignments} WHERE id = ?",
            (*values.values(), filter_id),
        )
        self.conn.commit()
        return self._require(filter_id)

    def delete(self, filter_id: str) -> bool:
        """Delete a filter. Returns whether a row was removed."""
        cursor = self.conn.execute("DELETE FROM saved_filters WHERE id = ?", (filter_id,))
        self.conn.commit()
        return cursor.rowcount > 0

    def _require(self, filter_id: str) -> SavedFilter:
        saved = self.get(filter_id)
        if saved is None:
            raise LookupError(f"Saved filter disappeared: {filter_id}")
        return saved


def _now_ts() -> int:
    return int(datetime.now(timezone.utc).timestamp())


def _row_to_filter(row: sqlite3.Row | tuple) -> SavedFilter:
    return SavedFilter(
        id=row[0],
        name=row[1],
        description=row[2],
        query=row[3],
        owner_id=row[4],
        project_id=row[5],
        is_public=bool(row[6]),
        created_at=datetime.fromtimestamp(row[7], tz=timezone.utc),
        updated_at=datetime.fromtimestamp(row[8], tz=timezone.utc),
    )
