"""Group repository protocol."""

from typing import Any, Protocol

from domain.entities.group import Group, GroupDetails, GroupSummary, MovieInGroup
from domain.entities.movie import MovieDetails
from domain.entities.pagination import PaginatedResult


class IGroupRepository(Protocol):
    """Storage contract for groups, scoped by owner.

    Every operation that addresses a single group checks, in this order:
    the group exists (ArgumentNotFoundError("group")), the owner matches
    (InvalidUserError("userId")), then any content rule.
    """

    async def create_group(self, name: str, description: str, owner_id: str) -> Group:
        """Create an empty group for ``owner_id``."""
        ...

    async def list_groups(
        self, owner_id: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[GroupSummary]:
        """Get one page of the owner's groups."""
        ...

    async def get_group_details(
        self, group_id: str, owner_id: str, limit: Any = None, page: Any = None
    ) -> GroupDetails:
        """Get a group with one page of its movies."""
        ...

    async def edit_group(
        self, group_id: str, owner_id: str, name: str, description: str
    ) -> Group:
        """Overwrite name and description."""
        ...

    async def delete_group(self, group_id: str, owner_id: str) -> None:
        """Delete a group and its movies."""
        ...

    async def add_movie_in_group(
        self, group_id: str, movie_id: str, details: MovieDetails, owner_id: str
    ) -> MovieInGroup:
        """Append a movie to a group."""
        ...

    async def remove_movie_in_group(
        self, group_id: str, movie_id: str, owner_id: str
    ) -> None:
        """Remove a movie from a group."""
        ...
