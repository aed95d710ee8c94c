"""User domain entity."""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4


def _new_token() -> str:
    return str(uuid4())


@dataclass
class User:
    """A registered user. ``token`` is the bearer credential for the API."""

    username: str
    password: str
    email: str
    id: str = ""
    token: str = field(default_factory=_new_token)

    @classmethod
    def from_document(cls, user_id: Any, doc: dict[str, Any]) -> "User":
        return cls(
            id=str(user_id),
            username=doc["username"],
            password=doc["password"],
            email=doc.get("email", ""),
            token=doc["token"],
        )

    def to_document(self) -> dict[str, Any]:
        """Stored representation, without the id."""
        return {
            "username": self.username,
            "password": self.password,
            "email": self.email,
            "token": self.token,
        }
