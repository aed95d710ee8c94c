"""User service layer."""

from typing import Any

import structlog

from core.exceptions import InvalidArgumentError, InvalidUserError
from domain.entities.user import User
from domain.repositories.user_repository import IUserRepository

logger = structlog.get_logger()


class UserService:
    """Registration and credential checks."""

    def __init__(self, users: IUserRepository) -> None:
        self._users = users

    async def create_user(self, username: Any, password: Any, email: Any) -> User:
        """Register a user. Username and email must both be unused."""
        for field_name, value in (
            ("username", username),
            ("password", password),
            ("email", email),
        ):
            if not isinstance(value, str) or not value:
                raise InvalidArgumentError(field_name)

        if await self._users.get_by_username(username) is not None:
            raise InvalidUserError("user already exists")
        if await self._users.get_by_email(email) is not None:
            raise InvalidUserError("user already exists")

        user = await self._users.create(username, password, email)
        logger.info("user_created", user_id=user.id)
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """Return the user if the password matches, else InvalidUserError."""
        user = await self._users.get_by_username(username)
        if user is None or user.password != password:
            raise InvalidUserError("credentials")
        return user
