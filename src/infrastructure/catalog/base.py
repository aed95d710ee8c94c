"""Catalog behaviour shared by every payload source."""

import math
from abc import ABC, abstractmethod
from typing import Any

from core.exceptions import ArgumentNotFoundError, InvalidArgumentError
from domain.entities.movie import MovieDetails, MovieSummary
from domain.entities.pagination import PaginatedResult
from domain.services.pagination import CATALOG_PAGE_SIZE, paginate
from infrastructure.catalog.imdb_mapping import (
    details_from_title,
    summary_from_search,
    summary_from_top250,
)

MAX_CATALOG_LIMIT = 250


def checked_limit(limit: Any) -> Any:
    """Catalog limits must be numeric and at most 250. None means the default."""
    if limit is None:
        return CATALOG_PAGE_SIZE
    if isinstance(limit, bool):
        raise InvalidArgumentError("limit")
    try:
        number = float(limit)
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgumentError("limit") from None
    if math.isnan(number) or number > MAX_CATALOG_LIMIT:
        raise InvalidArgumentError("limit")
    return limit


class CatalogGatewayBase(ABC):
    """ICatalogGateway on top of three raw IMDb-shaped payload loaders."""

    @abstractmethod
    async def _load_popular(self) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def _load_search(self, query: str) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def _load_title(self, movie_id: str) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_popular(
        self, limit: Any = None, page: Any = None
    ) -> PaginatedResult[MovieSummary]:
        size = checked_limit(limit)
        payload = await self._load_popular()
        movies = [summary_from_top250(item) for item in payload.get("items") or []]
        return paginate(movies, size, page)

    async def fetch_by_name(
        self, query: str, limit: Any = None, page: Any = None
    ) -> PaginatedResult[MovieSummary]:
        size = checked_limit(limit)
        payload = await self._load_search(query)
        movies = [
            summary_from_search(result)
            for result in payload.get("results") or []
            if query in (result.get("title") or "")
        ]
        return paginate(movies, size, page)

    async def fetch_details(self, movie_id: str) -> MovieDetails:
        payload = await self._load_title(str(movie_id))
        if not payload.get("title"):
            raise ArgumentNotFoundError("movie")
        if not payload.get("id"):
            payload = {**payload, "id": str(movie_id)}
        return details_from_title(payload)

    async def close(self) -> None:
        return None
