"""Shared fixtures for unit tests."""

from unittest.mock import AsyncMock

import pytest

from domain.entities.movie import MovieDetails
from domain.entities.user import User


class FakeBackends:
    """Store and catalog mocks for service-level unit tests."""

    def __init__(self) -> None:
        self.groups = AsyncMock()
        self.users = AsyncMock()
        self.catalog = AsyncMock()


@pytest.fixture
def backends() -> FakeBackends:
    """Create fresh backend mocks."""
    return FakeBackends()


@pytest.fixture
def owner() -> User:
    """A registered user whose token resolves to id "1"."""
    return User(id="1", username="alice", password="secret", email="alice@example.com")


@pytest.fixture
def other_user() -> User:
    """A second user (distinct from owner)."""
    return User(id="2", username="bob", password="hunter2", email="bob@example.com")


@pytest.fixture
def dark_knight() -> MovieDetails:
    """Catalog details for a well-known movie."""
    return MovieDetails(
        id="tt0468569",
        title="The Dark Knight",
        duration_minutes=152,
        directors="Christopher Nolan",
        actors=["Christian Bale", "Heath Ledger"],
    )
