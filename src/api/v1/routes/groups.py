"""Group API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import BearerToken
from api.v1.dependencies import get_group_service
from api.v1.schemas.common import MessageResponse, PageResponse
from api.v1.schemas.group import (
    GroupCreatedResponse,
    GroupDetailResponse,
    GroupListResponse,
    GroupResponse,
    GroupSummaryResponse,
    GroupWrite,
    MovieAddedResponse,
    MovieInGroupResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.group import Group, MovieInGroup
from domain.services.group_service import GroupService

router = APIRouter(
    prefix="/groups",
    tags=["groups"],
)


@router.post(
    "",
    response_model=GroupCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group",
    responses={
        201: {"description": "Group created"},
        400: {"description": "Missing a valid name and description"},
        404: {"description": "User not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_group(
    request: Request,
    body: GroupWrite,
    token: BearerToken,
    service: GroupService = Depends(get_group_service),
) -> GroupCreatedResponse:
    """Create a new group owned by the caller."""
    group = await service.create_group(token, body.name, body.description)
    return GroupCreatedResponse(message="Group created", group=_build_group_response(group))


@router.get(
    "",
    response_model=GroupListResponse,
    summary="List my groups",
    responses={
        200: {"description": "One page of the caller's groups"},
        400: {"description": "Invalid limit"},
        404: {"description": "User or page not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_groups(
    request: Request,
    token: BearerToken,
    limit: str | None = None,
    page: str | None = None,
    service: GroupService = Depends(get_group_service),
) -> GroupListResponse:
    """Get the caller's groups, paginated."""
    result = await service.list_groups(token, limit, page)
    return GroupListResponse(
        items=[
            GroupSummaryResponse(id=g.id, name=g.name, description=g.description)
            for g in result.items
        ],
        total_pages=result.total_pages,
    )


@router.get(
    "/{group_id}",
    response_model=GroupDetailResponse,
    summary="Get group details",
    responses={
        200: {"description": "Group with one page of movies"},
        401: {"description": "Group belongs to another user"},
        404: {"description": "Group not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_group_details(
    request: Request,
    group_id: str,
    token: BearerToken,
    limit: str | None = None,
    page: str | None = None,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Get a group, its paginated movies and their total duration."""
    details = await service.get_group_details(token, group_id, limit, page)
    return GroupDetailResponse(
        name=details.name,
        description=details.description,
        movies=PageResponse[MovieInGroupResponse](
            items=[_build_movie_response(m) for m in details.movies.items],
            total_pages=details.movies.total_pages,
        ),
        movies_total_duration=details.movies_total_duration,
    )


@router.put(
    "/{group_id}",
    response_model=GroupCreatedResponse,
    summary="Edit a group",
    responses={
        200: {"description": "Group updated"},
        400: {"description": "Missing a valid name and description"},
        401: {"description": "Group belongs to another user"},
        404: {"description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def edit_group(
    request: Request,
    group_id: str,
    body: GroupWrite,
    token: BearerToken,
    service: GroupService = Depends(get_group_service),
) -> GroupCreatedResponse:
    """Replace a group's name and description."""
    group = await service.edit_group(token, group_id, body.name, body.description)
    return GroupCreatedResponse(
        message="Updated group with success", group=_build_group_response(group)
    )


@router.delete(
    "/{group_id}",
    response_model=MessageResponse,
    summary="Delete a group",
    responses={
        200: {"description": "Group deleted"},
        401: {"description": "Group belongs to another user"},
        404: {"description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_group(
    request: Request,
    group_id: str,
    token: BearerToken,
    service: GroupService = Depends(get_group_service),
) -> MessageResponse:
    """Delete a group."""
    await service.delete_group(token, group_id)
    return MessageResponse(message="Group deleted with success")


# --- Movies in a group ---


@router.put(
    "/{group_id}/movies/{movie_id}",
    response_model=MovieAddedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a movie to a group",
    responses={
        201: {"description": "Movie added"},
        400: {"description": "Movie already in the group"},
        401: {"description": "Group belongs to another user"},
        404: {"description": "Group or movie not found"},
        504: {"description": "Movie catalog timed out"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_movie_in_group(
    request: Request,
    group_id: str,
    movie_id: str,
    token: BearerToken,
    service: GroupService = Depends(get_group_service),
) -> MovieAddedResponse:
    """Add a catalog movie to a group."""
    movie = await service.add_movie_in_group(token, group_id, movie_id)
    return MovieAddedResponse(
        message="Movie added with success", movie=_build_movie_response(movie)
    )


@router.delete(
    "/{group_id}/movies/{movie_id}",
    response_model=MessageResponse,
    summary="Remove a movie from a group",
    responses={
        200: {"description": "Movie removed"},
        401: {"description": "Group belongs to another user"},
        404: {"description": "Group or movie not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_movie_in_group(
    request: Request,
    group_id: str,
    movie_id: str,
    token: BearerToken,
    service: GroupService = Depends(get_group_service),
) -> MessageResponse:
    """Remove a movie from a group."""
    await service.remove_movie_in_group(token, group_id, movie_id)
    return MessageResponse(message="Movie deleted with success")


def _build_movie_response(movie: MovieInGroup) -> MovieInGroupResponse:
    """Convert domain entity to response schema."""
    return MovieInGroupResponse(id=movie.id, title=movie.title, duration=movie.duration_minutes)


def _build_group_response(group: Group) -> GroupResponse:
    """Convert domain entity to response schema."""
    return GroupResponse(
        id=group.id,
        name=group.name,
        description=group.description,
        user_id=group.user_id,
        movies=[_build_movie_response(m) for m in group.movies],
    )
