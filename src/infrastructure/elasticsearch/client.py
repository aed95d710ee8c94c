"""Thin document API over the Elasticsearch REST interface."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.config import Settings
from core.exceptions import InternalError

logger = structlog.get_logger()

# Ask Elasticsearch to make writes visible to search before replying
REFRESH = {"refresh": "wait_for"}
# Default index.max_result_window; a search never returns more hits than this
MAX_HITS = 10_000


def build_elasticsearch_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared HTTP client for the configured cluster."""
    return httpx.AsyncClient(
        base_url=settings.elasticsearch_url,
        timeout=httpx.Timeout(settings.elasticsearch_timeout_seconds),
        headers={"Content-Type": "application/json"},
    )


class ElasticsearchIndex:
    """CRUD and search on the documents of one index."""

    def __init__(self, client: httpx.AsyncClient, name: str) -> None:
        self._client = client
        self.name = name

    async def create(self, document: dict[str, Any]) -> str:
        """Insert a document and return the id Elasticsearch assigned."""
        response = await self._request("POST", f"/{self.name}/_doc", json=document, params=REFRESH)
        return str(response.json()["_id"])

    async def get(self, doc_id: str) -> dict[str, Any] | None:
        """Return the document source, or None when it does not exist."""
        if not str(doc_id):
            return None
        response = await self._request("GET", self._doc_path(doc_id), allow_missing=True)
        if response.status_code == 404:
            return None
        body = response.json()
        if not body.get("found"):
            return None
        return body["_source"]

    async def put(self, doc_id: str, document: dict[str, Any]) -> None:
        """Replace a whole document."""
        await self._request("PUT", self._doc_path(doc_id), json=document, params=REFRESH)

    async def delete(self, doc_id: str) -> None:
        await self._request("DELETE", self._doc_path(doc_id), params=REFRESH, allow_missing=True)

    async def search(self, query: dict[str, Any]) -> list[tuple[str, dict[str, Any]]]:
        """Run a query and return ``(id, source)`` pairs in hit order."""
        body = {"size": MAX_HITS, **query}
        response = await self._request(
            "POST", f"/{self.name}/_search", json=body, allow_missing=True
        )
        if response.status_code == 404:
            # Index not created yet: nothing has been stored
            return []
        hits = response.json().get("hits", {}).get("hits", [])
        if len(hits) >= MAX_HITS:
            logger.warning("elasticsearch_hits_truncated", index=self.name, size=MAX_HITS)
        return [(str(hit["_id"]), hit["_source"]) for hit in hits]

    def _doc_path(self, doc_id: str) -> str:
        return f"/{self.name}/_doc/{quote(str(doc_id), safe='')}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        allow_missing: bool = False,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error(
                "elasticsearch_request_failed",
                method=method,
                path=path,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise InternalError("search index unavailable") from exc

        if response.status_code == 404 and allow_missing:
            return response
        if response.is_error:
            logger.error(
                "elasticsearch_error_response",
                method=method,
                path=path,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise InternalError(f"search index returned {response.status_code}")
        return response
