"""Pydantic schemas for Movie API."""

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import PageResponse


class MovieSummaryResponse(BaseModel):
    """Schema for a catalog listing entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    image_url: str | None = None
    description: str | None = None
    year: str | None = None
    rank: int | None = None
    rating: str | None = None


class MovieListResponse(PageResponse[MovieSummaryResponse]):
    """One page of catalog results."""


class MovieDetailResponse(BaseModel):
    """Schema for a single catalog movie."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    duration_minutes: int
    description: str | None = None
    image_url: str | None = None
    directors: str | None = None
    actors: list[str] = Field(default_factory=list)
