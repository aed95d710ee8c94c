"""Conversion of IMDb API payloads into domain movie types."""

from typing import Any

from domain.entities.movie import MovieDetails, MovieSummary


def runtime_minutes(value: Any) -> int:
    """IMDb sends ``runtimeMins`` as a string that may be empty or null."""
    try:
        minutes = int(str(value).strip())
    except (TypeError, ValueError):
        return 0
    return max(minutes, 0)


def _rank(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _names(value: Any) -> list[str]:
    if isinstance(value, list):
        return [
            str(item.get("name", item)) if isinstance(item, dict) else str(item) for item in value
        ]
    if isinstance(value, str) and value:
        return [name.strip() for name in value.split(",") if name.strip()]
    return []


def summary_from_top250(item: dict[str, Any]) -> MovieSummary:
    """Map an entry of the Top250Movies ``items`` list."""
    return MovieSummary(
        id=str(item["id"]),
        title=item.get("title") or "",
        image_url=item.get("image") or None,
        year=item.get("year") or None,
        rank=_rank(item.get("rank")),
        rating=item.get("imDbRating") or None,
    )


def summary_from_search(result: dict[str, Any]) -> MovieSummary:
    """Map an entry of the SearchMovie ``results`` list."""
    return MovieSummary(
        id=str(result["id"]),
        title=result.get("title") or "",
        image_url=result.get("image") or None,
        description=result.get("description") or None,
    )


def details_from_title(payload: dict[str, Any]) -> MovieDetails:
    """Map a Title response."""
    return MovieDetails(
        id=str(payload["id"]),
        title=payload["title"],
        duration_minutes=runtime_minutes(payload.get("runtimeMins")),
        description=payload.get("plot") or None,
        image_url=payload.get("image") or None,
        directors=payload.get("directors") or None,
        actors=_names(payload.get("stars")),
    )
