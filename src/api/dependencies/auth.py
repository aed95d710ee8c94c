"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import AuthenticationError

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
) -> str:
    """
    Dependency returning the raw bearer token.

    The token is only checked for presence here; resolving it to a user is
    the service layer's job.

    Raises:
        AuthenticationError: If the Authorization header is missing or malformed
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError(message="Invalid authentication token")
    return credentials.credentials


# Type alias for convenience in route handlers
BearerToken = Annotated[str, Depends(get_bearer_token)]
