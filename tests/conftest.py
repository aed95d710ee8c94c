"""Pytest configuration and fixtures."""

import json
import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.catalog.local_gateway import LocalCatalogGateway
from infrastructure.container import Container
from infrastructure.file.repositories.file_group_repo import FileGroupRepository
from infrastructure.file.repositories.file_user_repo import FileUserRepository

DARK_KNIGHT_ID = "tt0468569"

POPULAR_MOVIES: dict[str, Any] = {
    "items": [
        {
            "id": "tt0111161",
            "rank": "1",
            "title": "The Shawshank Redemption",
            "year": "1994",
            "image": "https://m.media-amazon.com/images/shawshank.jpg",
            "imDbRating": "9.2",
        },
        {
            "id": "tt0068646",
            "rank": "2",
            "title": "The Godfather",
            "year": "1972",
            "image": "https://m.media-amazon.com/images/godfather.jpg",
            "imDbRating": "9.2",
        },
        {
            "id": DARK_KNIGHT_ID,
            "rank": "3",
            "title": "The Dark Knight",
            "year": "2008",
            "image": "https://m.media-amazon.com/images/dark-knight.jpg",
            "imDbRating": "9.0",
        },
    ],
    "errorMessage": "",
}

SEARCH_RESULTS: dict[str, Any] = {
    "searchType": "Movie",
    "expression": "Knight",
    "results": [
        {
            "id": DARK_KNIGHT_ID,
            "title": "The Dark Knight",
            "description": "(2008)",
            "image": "https://m.media-amazon.com/images/dark-knight.jpg",
        },
        {
            "id": "tt1345836",
            "title": "The Dark Knight Rises",
            "description": "(2012)",
            "image": "https://m.media-amazon.com/images/rises.jpg",
        },
        {
            "id": "tt0372784",
            "title": "Batman Begins",
            "description": "(2005)",
            "image": "https://m.media-amazon.com/images/begins.jpg",
        },
    ],
    "errorMessage": "",
}

TITLES: dict[str, dict[str, Any]] = {
    DARK_KNIGHT_ID: {
        "id": DARK_KNIGHT_ID,
        "title": "The Dark Knight",
        "runtimeMins": "152",
        "plot": "Batman faces the Joker.",
        "image": "https://m.media-amazon.com/images/dark-knight.jpg",
        "directors": "Christopher Nolan",
        "stars": "Christian Bale, Heath Ledger, Aaron Eckhart",
    },
    "tt0111161": {
        "id": "tt0111161",
        "title": "The Shawshank Redemption",
        "runtimeMins": "142",
        "plot": "Two imprisoned men bond.",
        "image": "https://m.media-amazon.com/images/shawshank.jpg",
        "directors": "Frank Darabont",
        "stars": "Tim Robbins, Morgan Freeman",
    },
    "tt0068646": {
        "id": "tt0068646",
        "title": "The Godfather",
        "runtimeMins": "175",
        "plot": "A crime dynasty's patriarch hands over control.",
        "image": "https://m.media-amazon.com/images/godfather.jpg",
        "directors": "Francis Ford Coppola",
        "stars": "Marlon Brando, Al Pacino",
    },
}


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Write IMDb-shaped fixture files for the local catalog."""
    directory = tmp_path / "catalog"
    (directory / "movie-info").mkdir(parents=True)
    (directory / "most-popular-movies.json").write_text(json.dumps(POPULAR_MOVIES))
    (directory / "movies-searched-by-name.json").write_text(json.dumps(SEARCH_RESULTS))
    for movie_id, payload in TITLES.items():
        (directory / "movie-info" / f"{movie_id}.json").write_text(json.dumps(payload))
    return directory


@pytest.fixture
async def container(tmp_path: Path, catalog_dir: Path) -> AsyncGenerator[Container, None]:
    """File stores in a temp directory with the local catalog."""
    groups = FileGroupRepository(tmp_path / "data" / "groups.json")
    users = FileUserRepository(tmp_path / "data" / "users.json")
    await groups.open()
    await users.open()

    c = Container(groups=groups, users=users, catalog=LocalCatalogGateway(catalog_dir))
    yield c
    await c.aclose()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no backends)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(container: Container) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to temp-directory backends.

    ASGITransport does not run the lifespan, so the container is placed on
    the app state directly.
    """
    from main import create_app

    app = create_app()
    app.state.container = container

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def registered_user(api_client: AsyncClient) -> dict[str, Any]:
    """Register a user through the API and return its public record."""
    response = await api_client.post(
        "/api/v1/users",
        json={"username": "alice", "password": "secret", "email": "alice@example.com"},
    )
    assert response.status_code == 201
    return dict(response.json()["user"])


@pytest.fixture
def auth_headers(registered_user: dict[str, Any]) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {registered_user['token']}"}
