"""Pydantic schemas for Group API."""

from pydantic import BaseModel, Field

from api.v1.schemas.common import PageResponse


class GroupWrite(BaseModel):
    """Body for creating or editing a group.

    Emptiness is checked by the service so that both create and edit
    report the same error.
    """

    name: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=500)


class MovieInGroupResponse(BaseModel):
    """A movie stored in a group."""

    id: str
    title: str
    duration: int


class GroupResponse(BaseModel):
    """Schema for a full Group."""

    id: str
    name: str
    description: str
    user_id: str
    movies: list[MovieInGroupResponse] = Field(default_factory=list)


class GroupSummaryResponse(BaseModel):
    """Schema for a Group in a listing."""

    id: str
    name: str
    description: str


class GroupListResponse(PageResponse[GroupSummaryResponse]):
    """One page of the caller's groups."""


class GroupDetailResponse(BaseModel):
    """Group with one page of its movies."""

    name: str
    description: str
    movies: PageResponse[MovieInGroupResponse]
    movies_total_duration: int


class GroupCreatedResponse(BaseModel):
    message: str
    group: GroupResponse


class MovieAddedResponse(BaseModel):
    message: str
    movie: MovieInGroupResponse
