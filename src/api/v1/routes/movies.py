"""Movie catalog API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_movie_service
from api.v1.schemas.movie import MovieDetailResponse, MovieListResponse, MovieSummaryResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.entities.movie import MovieSummary
from domain.entities.pagination import PaginatedResult
from domain.services.movie_service import MovieService

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
)


@router.get(
    "",
    response_model=MovieListResponse,
    summary="Most popular movies",
    responses={
        200: {"description": "One page of the top 250 movies"},
        400: {"description": "Invalid limit"},
        504: {"description": "Movie catalog timed out"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_popular_movies(
    request: Request,
    limit: str | None = None,
    page: str | None = None,
    service: MovieService = Depends(get_movie_service),
) -> MovieListResponse:
    """Get the most popular movies. ``limit`` may not exceed 250."""
    return _build_list_response(await service.get_popular_movies(limit, page))


@router.get(
    "/search/{query}",
    response_model=MovieListResponse,
    summary="Search movies by name",
    responses={
        200: {"description": "One page of matching movies"},
        400: {"description": "Invalid limit"},
        504: {"description": "Movie catalog timed out"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def search_movies_by_name(
    request: Request,
    query: str,
    limit: str | None = None,
    page: str | None = None,
    service: MovieService = Depends(get_movie_service),
) -> MovieListResponse:
    """Search movies whose title contains ``query``."""
    return _build_list_response(await service.search_movies_by_name(query, limit, page))


@router.get(
    "/{movie_id}",
    response_model=MovieDetailResponse,
    summary="Movie details",
    responses={
        200: {"description": "Movie details"},
        404: {"description": "Movie not found"},
        504: {"description": "Movie catalog timed out"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_movie_details(
    request: Request,
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> MovieDetailResponse:
    """Get the details of a single movie."""
    movie = await service.get_movie_details(movie_id)
    return MovieDetailResponse.model_validate(movie)


def _build_list_response(result: PaginatedResult[MovieSummary]) -> MovieListResponse:
    return MovieListResponse(
        items=[MovieSummaryResponse.model_validate(m) for m in result.items],
        total_pages=result.total_pages,
    )
