"""Elasticsearch implementation of the User repository."""

import asyncio

from core.exceptions import InvalidUserError
from domain.entities.user import User
from infrastructure.elasticsearch.client import ElasticsearchIndex
from infrastructure.user_lookup import UserLookupMixin


class ElasticsearchUserRepository(UserLookupMixin):
    """IUserRepository storing one document per user in the ``users`` index."""

    def __init__(self, index: ElasticsearchIndex) -> None:
        self._index = index
        self._register_lock = asyncio.Lock()

    async def create(self, username: str, password: str, email: str) -> User:
        """Insert a user document. The id is the one Elasticsearch assigns."""
        async with self._register_lock:
            if await self.get_by_username(username) or await self.get_by_email(email):
                raise InvalidUserError("user already exists")

            user = User(username=username, password=password, email=email)
            user.id = await self._index.create(user.to_document())
        return user

    async def _find_by(self, field: str, value: str) -> User | None:
        """Exact match on ``<field>.keyword``; only a single hit counts."""
        hits = await self._index.search({"query": {"term": {f"{field}.keyword": value}}})
        if len(hits) != 1:
            return None
        doc_id, source = hits[0]
        return User.from_document(doc_id, source)
