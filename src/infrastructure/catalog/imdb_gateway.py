"""IMDb API catalog gateway."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.config import Settings
from core.exceptions import CatalogTimeoutError, InternalError
from infrastructure.catalog.base import CatalogGatewayBase

logger = structlog.get_logger()


def build_imdb_client(settings: Settings) -> httpx.AsyncClient:
    """HTTP client with the bounded timeout every catalog call runs under."""
    return httpx.AsyncClient(
        base_url=settings.imdb_base_url,
        timeout=httpx.Timeout(settings.catalog_timeout_seconds),
        headers={"Accept": "application/json"},
        follow_redirects=True,
    )


class ImdbCatalogGateway(CatalogGatewayBase):
    """Fetch movie metadata from imdb-api.com.

    Timeouts surface as CatalogTimeoutError for the caller to retry; nothing
    is retried here.
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str) -> None:
        self._client = client
        self._api_key = api_key

    async def _load_popular(self) -> dict[str, Any]:
        return await self._get("Top250Movies")

    async def _load_search(self, query: str) -> dict[str, Any]:
        return await self._get("SearchMovie", query)

    async def _load_title(self, movie_id: str) -> dict[str, Any]:
        return await self._get("Title", movie_id)

    async def _get(self, resource: str, argument: str | None = None) -> dict[str, Any]:
        path = f"/{resource}/{quote(self._api_key, safe='')}"
        if argument is not None:
            path = f"{path}/{quote(argument, safe='')}"

        try:
            response = await self._client.get(path)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("catalog_timeout", resource=resource)
            raise CatalogTimeoutError(resource) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "catalog_request_failed",
                resource=resource,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise InternalError("movie catalog unavailable") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise InternalError("movie catalog sent an unreadable response") from exc

        if isinstance(payload, dict) and payload.get("errorMessage"):
            logger.warning(
                "catalog_error_message", resource=resource, message=payload["errorMessage"]
            )
        return payload if isinstance(payload, dict) else {}

    async def close(self) -> None:
        await self._client.aclose()
