"""Group service layer with ownership checks."""

from typing import Any

import structlog

from domain.entities.group import (
    Group,
    GroupDetails,
    GroupSummary,
    MovieInGroup,
    require_group_fields,
)
from domain.entities.pagination import PaginatedResult
from domain.repositories.catalog_gateway import ICatalogGateway
from domain.repositories.group_repository import IGroupRepository
from domain.repositories.user_repository import IUserRepository

logger = structlog.get_logger()


class GroupService:
    """Service layer for user-owned movie groups.

    Every operation resolves the bearer token to a user first and hands the
    resolved id to the store, which enforces ownership.
    """

    def __init__(
        self,
        groups: IGroupRepository,
        users: IUserRepository,
        catalog: ICatalogGateway,
    ) -> None:
        self._groups = groups
        self._users = users
        self._catalog = catalog

    async def create_group(self, token: str, name: Any, description: Any) -> Group:
        """Create a group owned by the token's user."""
        owner_id = await self._resolve_owner(token)
        require_group_fields(name, description)

        group = await self._groups.create_group(name, description, owner_id)
        logger.info("group_created", group_id=group.id, user_id=owner_id)
        return group

    async def list_groups(
        self, token: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[GroupSummary]:
        """Get one page of the caller's groups."""
        owner_id = await self._resolve_owner(token)
        return await self._groups.list_groups(owner_id, limit, page)

    async def get_group_details(
        self, token: str, group_id: str, limit: Any = None, page: Any = None
    ) -> GroupDetails:
        """Get a group with one page of its movies."""
        owner_id = await self._resolve_owner(token)
        return await self._groups.get_group_details(group_id, owner_id, limit, page)

    async def edit_group(
        self, token: str, group_id: str, name: Any, description: Any
    ) -> Group:
        """Replace a group's name and description."""
        owner_id = await self._resolve_owner(token)
        require_group_fields(name, description)

        group = await self._groups.edit_group(group_id, owner_id, name, description)
        logger.info("group_updated", group_id=group.id, user_id=owner_id)
        return group

    async def delete_group(self, token: str, group_id: str) -> None:
        """Delete a group."""
        owner_id = await self._resolve_owner(token)
        await self._groups.delete_group(group_id, owner_id)
        logger.info("group_deleted", group_id=group_id, user_id=owner_id)

    async def add_movie_in_group(
        self, token: str, group_id: str, movie_id: str
    ) -> MovieInGroup:
        """Look the movie up in the catalog, then add it to the group."""
        owner_id = await self._resolve_owner(token)
        details = await self._catalog.fetch_details(movie_id)

        movie = await self._groups.add_movie_in_group(group_id, movie_id, details, owner_id)
        logger.info("group_movie_added", group_id=group_id, movie_id=movie.id)
        return movie

    async def remove_movie_in_group(self, token: str, group_id: str, movie_id: str) -> None:
        """Remove a movie from a group."""
        owner_id = await self._resolve_owner(token)
        await self._groups.remove_movie_in_group(group_id, movie_id, owner_id)
        logger.info("group_movie_removed", group_id=group_id, movie_id=movie_id)

    # --- Internal helpers ---

    async def _resolve_owner(self, token: str) -> str:
        """Swap a bearer token for the internal user id."""
        user = await self._users.require_by_token(token)
        return user.id

