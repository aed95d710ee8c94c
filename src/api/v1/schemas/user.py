"""Pydantic schemas for User API."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., max_length=100)
    password: str = Field(..., max_length=200)
    email: str = Field(..., max_length=254)


class UserLogin(BaseModel):
    """Schema for exchanging credentials for the bearer token."""

    username: str
    password: str


class UserResponse(BaseModel):
    """A user as seen by its owner. Never carries the password."""

    id: str
    username: str
    email: str
    token: str


class UserCreatedResponse(BaseModel):
    message: str
    user: UserResponse
