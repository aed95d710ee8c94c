"""JSON document files used by the file storage backend."""

import asyncio
import json
import os
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import structlog

from core.exceptions import InternalError

logger = structlog.get_logger()


async def read_json(path: Path) -> Any:
    """Read and parse a JSON file in a worker thread."""
    try:
        return await asyncio.to_thread(_read_sync, path)
    except (OSError, ValueError) as exc:
        logger.error("json_read_failed", path=str(path), error=str(exc))
        raise InternalError(f"cannot read {path.name}") from exc


def _read_sync(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _write_sync(path: Path, content: Any) -> None:
    # Write beside the target and swap, so readers never see half a file
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(content, handle, indent=4)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class JsonDocument:
    """A whole-collection JSON file: ``{"IDs": <last id>, <collection>: [...]}``.

    Every mutation rewrites the full document. ``mutate()`` holds the
    document lock for the complete read-modify-write cycle.
    """

    def __init__(self, path: Path, collection: str) -> None:
        self.path = Path(path)
        self.collection = collection
        self._lock = asyncio.Lock()

    async def open(self) -> None:
        """Create the directory and an empty document if missing."""
        async with self._lock:
            if self.path.exists():
                return
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                await asyncio.to_thread(_write_sync, self.path, self._empty())
            except OSError as exc:
                logger.error("json_init_failed", path=str(self.path), error=str(exc))
                raise InternalError(f"cannot create {self.path.name}") from exc
            logger.info("json_document_created", path=str(self.path))

    async def read(self) -> dict[str, Any]:
        content = await read_json(self.path)
        if not isinstance(content, dict) or not isinstance(content.get(self.collection), list):
            raise InternalError(f"malformed {self.path.name}")
        content.setdefault("IDs", 0)
        return content

    async def write(self, content: dict[str, Any]) -> None:
        try:
            await asyncio.to_thread(_write_sync, self.path, content)
        except OSError as exc:
            logger.error("json_write_failed", path=str(self.path), error=str(exc))
            raise InternalError(f"cannot write {self.path.name}") from exc

    @asynccontextmanager
    async def mutate(self) -> AsyncIterator[dict[str, Any]]:
        """Yield the document under lock and write it back if the block succeeds."""
        async with self._lock:
            content = await self.read()
            yield content
            await self.write(content)

    def next_id(self, content: dict[str, Any]) -> int:
        """Bump and return the id counter. Ids are never reused."""
        content["IDs"] = int(content["IDs"]) + 1
        return content["IDs"]

    def _empty(self) -> dict[str, Any]:
        return {"IDs": 0, self.collection: []}
