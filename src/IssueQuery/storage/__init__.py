"""Storage layer for IssueQuery.

Provides database management and the saved filter store.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from IssueQuery.storage.db import DatabaseManager
from IssueQuery.storage.saved_filters import SavedFilter, SavedFilterStore
from IssueQuery.utils.log import log

if TYPE_CHECKING:
    from IssueQuery.config import AppConfig


def create_storage(config: AppConfig) -> tuple[DatabaseManager | None, SavedFilterStore | None]:
    """Create database manager and saved filter store.

    Args:
        config: Application configuration containing storage settings.

    Returns:
        Tuple of (db_manager, filter_store); both None when storage is disabled.
    """
    if not config.storage.enabled:
        return None, None

    db_path = Path(config.storage.db_path)
    db_manager = DatabaseManager(db_path)
    log.debug("Saved filter storage enabled: %s", db_path)
    return db_manager, SavedFilterStore(db_manager)


__all__ = [
    "DatabaseManager",
    "SavedFilter",
    "SavedFilterStore",
    "create_storage",
]
