"""Pagination of ordered result sets."""

import math
from collections.abc import Sequence
from typing import Any, TypeVar

from core.exceptions import ArgumentNotFoundError, InvalidArgumentError
from domain.entities.pagination import PaginatedResult

T = TypeVar("T")

DEFAULT_PAGE = 1
GROUPS_PAGE_SIZE = 6
GROUP_MOVIES_PAGE_SIZE = 9
CATALOG_PAGE_SIZE = 10


def as_natural_number(value: Any) -> int | None:
    """Coerce ``value`` to a positive integer, or None if it is not one.

    Accepts ints, floats and numeric strings. Fractions are floored, so a
    value only counts if it is finite and at least 1.
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number < 1:
        return None
    return math.floor(number)


def paginate(
    sequence: Sequence[T],
    limit: Any,
    page: Any = None,
) -> PaginatedResult[T]:
    """Slice ``sequence`` into the requested page.

    Raises:
        InvalidArgumentError: ``limit`` is not a positive finite number.
        ArgumentNotFoundError: ``page`` was given and is not a positive finite number.

    A page past the end is returned empty rather than raising.
    """
    size = as_natural_number(limit)
    if size is None:
        raise InvalidArgumentError("limit")

    if page is None or page == "":
        number = DEFAULT_PAGE
    else:
        number = as_natural_number(page)
        if number is None:
            raise ArgumentNotFoundError("page")

    total_pages = math.ceil(len(sequence) / size)
    start = (number - 1) * size
    return PaginatedResult(items=list(sequence[start : start + size]), total_pages=total_pages)
