"""Paginated result value object."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of an ordered result set plus the number of pages available."""

    items: list[T]
    total_pages: int
