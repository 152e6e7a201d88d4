"""Service layer for IssueQuery.

Provides the saved filter service and its factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from IssueQuery.services.filters import SavedFilterService

if TYPE_CHECKING:
    from IssueQuery.storage.saved_filters import SavedFilterStore


def create_filter_service(filter_store: SavedFilterStore | None) -> SavedFilterService:
    """Create the saved filter service over a configured store.

    Args:
        filter_store: Store created by `create_storage`, or None when disabled.

    Returns:
        Configured SavedFilterService instance.

    Raises:
        RuntimeError: If storage is disabled in the configuration.
    """
    if filter_store is None:
        raise RuntimeError("Saved filters require storage.enabled=true")
    return SavedFilterService(store=filter_store)


__all__ = [
    "SavedFilterService",
    "create_filter_service",
]
