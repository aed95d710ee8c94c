"""User repository protocol."""

from typing import Protocol

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities (the user directory)."""

    async def get_by_token(self, token: str) -> User | None:
        """Get a user by bearer token."""
        ...

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        ...

    async def require_by_token(self, token: str) -> User:
        """Get a user by token or raise UserNotFoundError."""
        ...

    async def create(self, username: str, password: str, email: str) -> User:
        """Register a new user with a fresh id and token."""
        ...
