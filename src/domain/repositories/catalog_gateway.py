"""Movie catalog gateway protocol."""

from typing import Any, Protocol

from domain.entities.movie import MovieDetails, MovieSummary
from domain.entities.pagination import PaginatedResult


class ICatalogGateway(Protocol):
    """Read-only access to the external movie catalog."""

    async def fetch_popular(
        self, limit: Any = None, page: Any = None
    ) -> PaginatedResult[MovieSummary]:
        """Get one page of the most popular movies."""
        ...

    async def fetch_by_name(
        self, query: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[MovieSummary]:
        """Get one page of movies whose title contains ``query``."""
        ...

    async def fetch_details(self, movie_id: str) -> MovieDetails:
        """Get a single movie or raise ArgumentNotFoundError("movie")."""
        ...

    async def close(self) -> None:
        """Release backend resources."""
        ...
