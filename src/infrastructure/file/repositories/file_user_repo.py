"""JSON file implementation of the User repository."""

from pathlib import Path
from typing import Any

from core.exceptions import InvalidUserError
from domain.entities.user import User
from infrastructure.file.json_document import JsonDocument
from infrastructure.user_lookup import UserLookupMixin


class FileUserRepository(UserLookupMixin):
    """IUserRepository backed by a single ``users.json`` document."""

    def __init__(self, path: Path) -> None:
        self._document = JsonDocument(path, "users")

    async def open(self) -> None:
        await self._document.open()

    async def create(self, username: str, password: str, email: str) -> User:
        """Register a user with the next id. Username and email stay unique."""
        async with self._document.mutate() as content:
            for entry in content["users"]:
                if entry.get("username") == username or entry.get("email") == email:
                    raise InvalidUserError("user already exists")

            new_id = self._document.next_id(content)
            user = User(id=str(new_id), username=username, password=password, email=email)
            content["users"].append({"id": new_id, **user.to_document()})
        return user

    async def _find_by(self, field: str, value: str) -> User | None:
        content = await self._document.read()
        for entry in content["users"]:
            if entry.get(field) == value:
                return self._to_entity(entry)
        return None

    def _to_entity(self, entry: dict[str, Any]) -> User:
        return User.from_document(entry["id"], entry)
