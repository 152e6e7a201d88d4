"""Saved filter service.

Applies the rules around persisted filters: queries are validated before they
are stored, private filters are only visible to their owner, and only the
owner may change, share, or delete a filter.
"""

from __future__ import annotations

from dataclasses import dataclass

from IssueQuery.core.conditions import ConditionTree
from IssueQuery.core.errors import FilterAccessError, FilterNotFoundError, InvalidFilterError, QueryError
from IssueQuery.query import parse
from IssueQuery.storage.saved_filters import SavedFilter, SavedFilterStore
from IssueQuery.utils.log import log


@dataclass(slots=True)
class SavedFilterService:
    """Application service for creating, reading, and running saved filters."""

    store: SavedFilterStore

    def create(
        self,
        *,
        name: str,
        query: str,
        owner_id: str,
        description: str | None = None,
        project_id: str | None = None,
        is_public: bool = False,
    ) -> SavedFilter:
        """Validate and persist a new filter.

        Args:
            name: Display name.
            query: Filter query text.
            owner_id: Identity of the creating user.
            description: Optional description.
            project_id: Optional project scope.
            is_public: Whether other users may see the filter.

        Returns:
            Stored filter.

        Raises:
            ValueError: If name, query, or owner is missing.
            InvalidFilterError: If the query does not validate.
        """
        if not name or not name.strip():
            raise ValueError("Filter name is required")
        if not query or not query.strip():
            raise ValueError("Filter query is required")
        if not owner_id:
            raise ValueError("Filter owner is required")
        _check_query(query, owner_id)

        saved = self.store.insert(
            name=name.strip(),
            query=query,
            owner_id=owner_id,
            description=description,
            project_id=project_id,
            is_public=is_public,
        )
        log.info("Created saved filter %s (%s)", saved.id, saved.name)
        return saved

    def list_for_user(self, user_id: str) -> list[SavedFilter]:
        """List filters the user owns plus all public filters, newest first."""
        return self.store.list_visible(user_id)

    def get(self, filter_id: str, user_id: str) -> SavedFilter:
        """Return a filter visible to `user_id`.

        Raises:
            FilterNotFoundError: If the filter does not exist.
            FilterAccessError: If the filter is private and not owned by the user.
        """
        saved = self._load(filter_id)
        if not saved.is_public and saved.owner_id != user_id:
            raise FilterAccessError("Access denied to this filter")
        return saved

    def update(
        self,
        filter_id: str,
        user_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        query: str | None = None,
        is_public: bool | None = None,
    ) -> SavedFilter:
        """Change an owned filter. A new query is validated first.

        Raises:
            FilterNotFoundError: If the filter does not exist.
            FilterAccessError: If the user is not the owner.
            InvalidFilterError: If the new query does not validate.
        """
        self._require_owner(filter_id, user_id, "update")
        if query:
            _check_query(query, user_id)
        return self.store.update(
            filter_id,
            {"name": name, "description": description, "query": query, "is_public": is_public},
        )

    def share(self, filter_id: str, user_id: str) -> SavedFilter:
        """Make an owned filter public."""
        self._require_owner(filter_id, user_id, "share")
        return self.store.update(filter_id, {"is_public": True})

    def delete(self, filter_id: str, user_id: str) -> None:
        """Delete an owned filter."""
        self._require_owner(filter_id, user_id, "delete")
        self.store.delete(filter_id)
        log.info("Deleted saved filter %s", filter_id)

    def run(self, filter_id: str, user_id: str) -> tuple[SavedFilter, ConditionTree]:
        """Parse a visible filter with `user_id` as the caller identity.

        Returns:
            The loaded filter and its compiled condition tree.

        Raises:
            FilterNotFoundError: If the filter does not exist.
            FilterAccessError: If the filter is private and not owned by the user.
            QueryError: If the stored query no longer parses for this caller.
        """
        saved = self.get(filter_id, user_id)
        return saved, parse(saved.query, caller_id=user_id)

    def _load(self, filter_id: str) -> SavedFilter:
        saved = self.store.get(filter_id)
        if saved is None:
            raise FilterNotFoundError("Filter not found")
        return saved

    def _require_owner(self, filter_id: str, user_id: str, action: str) -> SavedFilter:
        saved = self._load(filter_id)
        if saved.owner_id != user_id:
            raise FilterAccessError(f"Only the owner can {action} this filter")
        return saved


def _check_query(query: str, caller_id: str) -> None:
    # Compiled with the saving user as caller so currentUser() resolves.
    try:
        parse(query, caller_id=caller_id)
    except QueryError as e:
        raise InvalidFilterError(f"Invalid filter query: {e}") from e
