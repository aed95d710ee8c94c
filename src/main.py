"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter, rate_limit_exceeded_handler
from infrastructure.container import build_container

logger = structlog.get_logger()

API_VERSION = "1.0.0"

DESCRIPTION = f"""## Chelas Movies Database

Personal groups of movies picked from the IMDb catalog.

### Authentication
Register with `POST /api/v1/users` and send the returned token on group routes:
```
Authorization: Bearer <token>
```

### Pagination
List endpoints take `limit` and `page` and answer with `items` and `total_pages`.

### Rate Limits
- Reads: {READ_LIMIT}
- Writes: {WRITE_LIMIT}
"""

OPENAPI_TAGS = [
    {"name": name, "description": description}
    for name, description in (
        ("health", "Liveness probe"),
        ("users", "Registration and login"),
        ("movies", "Read-only movie catalog"),
        ("groups", "User-owned groups of movies"),
    )
]

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the configured stores and catalog once, close them on shutdown."""
    app.state.container = await build_container(settings)
    try:
        yield
    finally:
        await app.state.container.aclose()
        logger.info("backends_closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=DESCRIPTION,
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Last added runs first: request id must exist before logging binds it
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
