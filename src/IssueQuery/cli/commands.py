"""Command implementations for the IssueQuery CLI.

Encapsulates saved filter operations, separated from CLI parameter handling
and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from IssueQuery.renderers import OutputWriter
from IssueQuery.services.filters import SavedFilterService
from IssueQuery.utils.log import log


@dataclass(slots=True)
class FilterCommand:
    """Saved filter operations performed on behalf of one user."""

    service: SavedFilterService
    output_writer: OutputWriter
    user_id: str

    def save(
        self,
        *,
        name: str,
        query: str,
        description: str | None,
        project_id: str | None,
        is_public: bool,
    ) -> None:
        saved = self.service.create(
            name=name,
            query=query,
            owner_id=self.user_id,
            description=description,
            project_id=project_id,
            is_public=is_public,
        )
        self.output_writer.write_filters([saved])

    def list(self) -> None:  # noqa: A003 - mirrors the CLI verb
        filters = self.service.list_for_user(self.user_id)
        log.debug("Found %d filters visible to %s", len(filters), self.user_id)
        self.output_writer.write_filters(filters)

    def run(self, filter_id: str) -> None:
        saved, tree = self.service.run(filter_id, self.user_id)
        self.output_writer.write_tree(saved.query, tree)

    def share(self, filter_id: str) -> None:
        self.output_writer.write_filters([self.service.share(filter_id, self.user_id)])

    def delete(self, filter_id: str) -> None:
        self.service.delete(filter_id, self.user_id)
        log.info("Filter %s deleted", filter_id)
