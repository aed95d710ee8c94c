"""Lookups shared by every user directory backend."""

from abc import ABC, abstractmethod

from core.exceptions import UserNotFoundError
from domain.entities.user import User


class UserLookupMixin(ABC):
    """Derive the by-token/username/email lookups from one ``_find_by``."""

    @abstractmethod
    async def _find_by(self, field: str, value: str) -> User | None:
        raise NotImplementedError

    async def get_by_token(self, token: str) -> User | None:
        return await self._find_by("token", token)

    async def get_by_username(self, username: str) -> User | None:
        return await self._find_by("username", username)

    async def get_by_email(self, email: str) -> User | None:
        return await self._find_by("email", email)

    async def require_by_token(self, token: str) -> User:
        user = await self.get_by_token(token)
        if user is None:
            raise UserNotFoundError(token)
        return user
