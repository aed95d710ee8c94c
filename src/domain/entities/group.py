"""Group domain entities."""

import math
from dataclasses import dataclass, field
from typing import Any

from core.exceptions import ArgumentNotFoundError, InvalidArgumentError, InvalidUserError
from domain.entities.movie import MovieDetails
from domain.entities.pagination import PaginatedResult


def same_id(left: Any, right: Any) -> bool:
    """Compare identifiers that may arrive as ints or numeric strings."""
    return str(left) == str(right)


def numeric_id(value: Any) -> int | None:
    """Integer value of a numeric-like id (``3``, ``"03"``, ``" 3"``, ``"3.0"``).

    Returns None for anything that does not denote a whole number.
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def require_group_fields(name: Any, description: Any) -> None:
    """Both fields must be non-empty strings."""
    for value in (name, description):
        if not isinstance(value, str) or value == "":
            raise InvalidArgumentError("group missing a valid name and description")


@dataclass
class MovieInGroup:
    """A movie reference stored inside a group."""

    id: str
    title: str
    duration_minutes: int = 0

    @classmethod
    def from_details(cls, details: MovieDetails) -> "MovieInGroup":
        return cls(
            id=str(details.id),
            title=details.title,
            duration_minutes=details.duration_minutes,
        )

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "MovieInGroup":
        return cls(
            id=str(doc["id"]),
            title=doc.get("title", ""),
            duration_minutes=int(doc.get("duration") or 0),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "duration": self.duration_minutes,
        }


@dataclass
class Group:
    """Domain entity for a user-owned collection of movies.

    ``user_id`` is fixed at creation. Every rule that depends on the caller
    (ownership) or on the movie list (duplicates, removal) lives here so that
    all storage backends apply them the same way.
    """

    name: str
    description: str
    user_id: str
    id: str = ""
    movies: list[MovieInGroup] = field(default_factory=list)

    @property
    def total_duration(self) -> int:
        """Sum of durations over every movie in the group."""
        return sum(movie.duration_minutes for movie in self.movies)

    def ensure_owned_by(self, owner_id: str) -> None:
        """Raise InvalidUserError unless ``owner_id`` owns this group."""
        if not same_id(self.user_id, owner_id):
            raise InvalidUserError("userId")

    def find_movie(self, movie_id: str) -> int | None:
        """Index of the movie in the group, or None."""
        for index, movie in enumerate(self.movies):
            if same_id(movie.id, movie_id):
                return index
        return None

    def add_movie(self, movie_id: str, details: MovieDetails) -> MovieInGroup:
        """Append ``movie_id`` with its catalog details. Rejects duplicates."""
        if self.find_movie(movie_id) is not None:
            raise InvalidArgumentError("movie already exists in this group")
        movie = MovieInGroup.from_details(details)
        movie.id = str(movie_id)
        self.movies.append(movie)
        return movie

    def remove_movie(self, movie_id: str) -> MovieInGroup:
        """Remove a movie by id. Raises ArgumentNotFoundError if absent."""
        index = self.find_movie(movie_id)
        if index is None:
            raise ArgumentNotFoundError("movie")
        return self.movies.pop(index)

    def edit(self, name: str, description: str) -> None:
        self.name = name
        self.description = description

    def summary(self) -> "GroupSummary":
        return GroupSummary(id=self.id, name=self.name, description=self.description)

    @classmethod
    def from_document(cls, group_id: Any, doc: dict[str, Any]) -> "Group":
        """Build a Group from a stored document (file entry or index _source)."""
        return cls(
            id=str(group_id),
            name=doc["name"],
            description=doc["description"],
            user_id=str(doc["userId"]),
            movies=[MovieInGroup.from_document(m) for m in doc.get("movies", [])],
        )

    def to_document(self) -> dict[str, Any]:
        """Stored representation, without the id."""
        return {
            "name": self.name,
            "description": self.description,
            "userId": self.user_id,
            "movies": [movie.to_document() for movie in self.movies],
        }


@dataclass
class GroupSummary:
    """List projection of a group."""

    id: str
    name: str
    description: str


@dataclass
class GroupDetails:
    """Detail projection of a group with one page of its movies."""

    name: str
    description: str
    movies: PaginatedResult[MovieInGroup]
    movies_total_duration: int
