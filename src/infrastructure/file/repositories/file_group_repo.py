"""JSON file implementation of the Group repository."""

from pathlib import Path
from typing import Any

import structlog

from core.exceptions import ArgumentNotFoundError
from domain.entities.group import (
    Group,
    GroupDetails,
    GroupSummary,
    MovieInGroup,
    numeric_id,
    require_group_fields,
)
from domain.entities.movie import MovieDetails
from domain.entities.pagination import PaginatedResult
from domain.services.group_views import group_details_page, owner_groups_page
from infrastructure.file.json_document import JsonDocument

logger = structlog.get_logger()


class FileGroupRepository:
    """IGroupRepository backed by a single ``groups.json`` document."""

    def __init__(self, path: Path) -> None:
        self._document = JsonDocument(path, "groups")

    async def open(self) -> None:
        await self._document.open()

    async def create_group(self, name: str, description: str, owner_id: str) -> Group:
        """Create a new group with the next id."""
        require_group_fields(name, description)
        async with self._document.mutate() as content:
            new_id = self._document.next_id(content)
            group = Group(id=str(new_id), name=name, description=description, user_id=str(owner_id))
            content["groups"].append(self._to_entry(group))
        logger.debug("file_group_created", group_id=group.id)
        return group

    async def list_groups(
        self, owner_id: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[GroupSummary]:
        """Get one page of the owner's groups."""
        content = await self._document.read()
        groups = [self._to_entity(entry) for entry in content["groups"]]
        return owner_groups_page(groups, owner_id, limit, page)

    async def get_group_details(
        self, group_id: str, owner_id: str, limit: Any = None, page: Any = None
    ) -> GroupDetails:
        """Get a group with one page of its movies."""
        content = await self._document.read()
        _, group = self._find(content, group_id, owner_id)
        return group_details_page(group, limit, page)

    async def edit_group(
        self, group_id: str, owner_id: str, name: str, description: str
    ) -> Group:
        """Overwrite name and description in place."""
        async with self._document.mutate() as content:
            index, group = self._find(content, group_id, owner_id)
            group.edit(name, description)
            content["groups"][index] = self._to_entry(group)
        return group

    async def delete_group(self, group_id: str, owner_id: str) -> None:
        """Delete a group (its movies go with it)."""
        async with self._document.mutate() as content:
            index, _ = self._find(content, group_id, owner_id)
            del content["groups"][index]

    async def add_movie_in_group(
        self, group_id: str, movie_id: str, details: MovieDetails, owner_id: str
    ) -> MovieInGroup:
        """Append a movie to a group."""
        async with self._document.mutate() as content:
            index, group = self._find(content, group_id, owner_id)
            movie = group.add_movie(movie_id, details)
            content["groups"][index] = self._to_entry(group)
        return movie

    async def remove_movie_in_group(
        self, group_id: str, movie_id: str, owner_id: str
    ) -> None:
        """Remove a movie from a group."""
        async with self._document.mutate() as content:
            index, group = self._find(content, group_id, owner_id)
            group.remove_movie(movie_id)
            content["groups"][index] = self._to_entry(group)

    def _find(self, content: dict[str, Any], group_id: str, owner_id: str) -> tuple[int, Group]:
        """Locate a group by id, then check its owner."""
        wanted = numeric_id(group_id)
        if wanted is None:
            raise ArgumentNotFoundError("group")
        for index, entry in enumerate(content["groups"]):
            if numeric_id(entry["id"]) == wanted:
                group = self._to_entity(entry)
                group.ensure_owned_by(owner_id)
                return index, group
        raise ArgumentNotFoundError("group")

    def _to_entity(self, entry: dict[str, Any]) -> Group:
        """Convert a stored entry to a domain entity."""
        return Group.from_document(entry["id"], entry)

    def _to_entry(self, group: Group) -> dict[str, Any]:
        """Convert a domain entity to a stored entry."""
        return {"id": int(group.id), **group.to_document()}
