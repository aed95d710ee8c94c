"""Elasticsearch implementation of the Group repository."""

from typing import Any

import structlog

from core.exceptions import ArgumentNotFoundError
from domain.entities.group import (
    Group,
    GroupDetails,
    GroupSummary,
    MovieInGroup,
    require_group_fields,
)
from domain.entities.movie import MovieDetails
from domain.entities.pagination import PaginatedResult
from domain.services.group_views import group_details_page, owner_groups_page
from infrastructure.elasticsearch.client import ElasticsearchIndex
from infrastructure.locks import KeyedLock

logger = structlog.get_logger()


class ElasticsearchGroupRepository:
    """IGroupRepository storing one document per group in the ``groups`` index.

    Writes to the same group are serialized with a per-id lock; the whole
    document is replaced on every change.
    """

    def __init__(self, index: ElasticsearchIndex) -> None:
        self._index = index
        self._locks = KeyedLock()

    async def create_group(self, name: str, description: str, owner_id: str) -> Group:
        """Insert a new group document."""
        require_group_fields(name, description)
        group = Group(name=name, description=description, user_id=str(owner_id))
        group.id = await self._index.create(group.to_document())
        logger.debug("es_group_created", group_id=group.id)
        return group

    async def list_groups(
        self, owner_id: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[GroupSummary]:
        """Get one page of the owner's groups."""
        hits = await self._index.search({"query": {"term": {"userId.keyword": str(owner_id)}}})
        groups = [Group.from_document(doc_id, source) for doc_id, source in hits]
        return owner_groups_page(groups, owner_id, limit, page)

    async def get_group_details(
        self, group_id: str, owner_id: str, limit: Any = None, page: Any = None
    ) -> GroupDetails:
        """Get a group with one page of its movies."""
        group = await self._load(group_id, owner_id)
        return group_details_page(group, limit, page)

    async def edit_group(
        self, group_id: str, owner_id: str, name: str, description: str
    ) -> Group:
        """Overwrite name and description."""
        async with self._locks.hold(group_id):
            group = await self._load(group_id, owner_id)
            group.edit(name, description)
            await self._index.put(group.id, group.to_document())
        return group

    async def delete_group(self, group_id: str, owner_id: str) -> None:
        """Delete the group document."""
        async with self._locks.hold(group_id):
            group = await self._load(group_id, owner_id)
            await self._index.delete(group.id)

    async def add_movie_in_group(
        self, group_id: str, movie_id: str, details: MovieDetails, owner_id: str
    ) -> MovieInGroup:
        """Append a movie to a group."""
        async with self._locks.hold(group_id):
            group = await self._load(group_id, owner_id)
            movie = group.add_movie(movie_id, details)
            await self._index.put(group.id, group.to_document())
        return movie

    async def remove_movie_in_group(
        self, group_id: str, movie_id: str, owner_id: str
    ) -> None:
        """Remove a movie from a group."""
        async with self._locks.hold(group_id):
            group = await self._load(group_id, owner_id)
            group.remove_movie(movie_id)
            await self._index.put(group.id, group.to_document())

    async def _load(self, group_id: str, owner_id: str) -> Group:
        """Fetch a group by id, then check its owner."""
        source = await self._index.get(str(group_id))
        if source is None:
            raise ArgumentNotFoundError("group")
        group = Group.from_document(group_id, source)
        group.ensure_owned_by(owner_id)
        return group
