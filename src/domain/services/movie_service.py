"""Movie catalog service layer."""

from typing import Any

from domain.entities.movie import MovieDetails, MovieSummary
from domain.entities.pagination import PaginatedResult
from domain.repositories.catalog_gateway import ICatalogGateway


class MovieService:
    """Public, unauthenticated catalog queries."""

    def __init__(self, catalog: ICatalogGateway) -> None:
        self._catalog = catalog

    async def get_popular_movies(
        self, limit: Any = None, page: Any = None
    ) -> PaginatedResult[MovieSummary]:
        """Get the most popular movies (at most 250)."""
        return await self._catalog.fetch_popular(limit, page)

    async def search_movies_by_name(
        self, query: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[MovieSummary]:
        """Search movies whose title contains ``query``."""
        return await self._catalog.fetch_by_name(query, limit, page)

    async def get_movie_details(self, movie_id: str) -> MovieDetails:
        """Get the details of a single movie."""
        return await self._catalog.fetch_details(movie_id)
