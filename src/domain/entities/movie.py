"""Movie domain entities (catalog projections)."""

from dataclasses import dataclass, field


@dataclass
class MovieSummary:
    """A catalog listing entry (popular movies, search results)."""

    id: str
    title: str
    image_url: str | None = None
    description: str | None = None
    year: str | None = None
    rank: int | None = None
    rating: str | None = None


@dataclass
class MovieDetails:
    """Full catalog record for a single movie."""

    id: str
    title: str
    duration_minutes: int = 0
    description: str | None = None
    image_url: str | None = None
    directors: str | None = None
    actors: list[str] = field(default_factory=list)
