"""Read projections shared by every group store."""

from collections.abc import Iterable
from typing import Any

from domain.entities.group import Group, GroupDetails, GroupSummary, same_id
from domain.entities.pagination import PaginatedResult
from domain.services.pagination import GROUP_MOVIES_PAGE_SIZE, GROUPS_PAGE_SIZE, paginate


def owner_groups_page(
    groups: Iterable[Group],
    owner_id: str,
    limit: Any = None,
    page: Any = None,
) -> PaginatedResult[GroupSummary]:
    """Summaries of the groups owned by ``owner_id``, filtered before paging."""
    owned = [group.summary() for group in groups if same_id(group.user_id, owner_id)]
    return paginate(owned, GROUPS_PAGE_SIZE if limit is None else limit, page)


def group_details_page(group: Group, limit: Any = None, page: Any = None) -> GroupDetails:
    """Detail view with one page of movies and the duration of all of them."""
    movies = paginate(
        list(group.movies),
        GROUP_MOVIES_PAGE_SIZE if limit is None else limit,
        page,
    )
    return GroupDetails(
        name=group.name,
        description=group.description,
        movies=movies,
        movies_total_duration=group.total_duration,
    )
