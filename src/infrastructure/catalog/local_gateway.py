"""Catalog gateway serving IMDb-shaped fixture files from disk."""

import re
from pathlib import Path
from typing import Any

from infrastructure.catalog.base import CatalogGatewayBase
from infrastructure.file.json_document import read_json

POPULAR_FILE = "most-popular-movies.json"
SEARCH_FILE = "movies-searched-by-name.json"
TITLES_DIR = "movie-info"

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]+$")


class LocalCatalogGateway(CatalogGatewayBase):
    """Offline catalog for development and tests.

    Layout: ``most-popular-movies.json``, ``movies-searched-by-name.json`` and
    one ``movie-info/<id>.json`` per known movie.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    async def _load_popular(self) -> dict[str, Any]:
        return await read_json(self._directory / POPULAR_FILE)

    async def _load_search(self, query: str) -> dict[str, Any]:
        return await read_json(self._directory / SEARCH_FILE)

    async def _load_title(self, movie_id: str) -> dict[str, Any]:
        if not _SAFE_ID.match(movie_id):
            return {}
        path = self._directory / TITLES_DIR / f"{movie_id}.json"
        if not path.is_file():
            return {}
        return await read_json(path)
