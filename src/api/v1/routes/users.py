"""User API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_user_service
from api.v1.schemas.user import UserCreate, UserCreatedResponse, UserLogin, UserResponse
from core.rate_limit import WRITE_LIMIT, limiter
from domain.entities.user import User
from domain.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        201: {"description": "User created, token included"},
        400: {"description": "Missing field"},
        401: {"description": "Username or email already taken"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_user(
    request: Request,
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    """Register a user and return its bearer token."""
    user = await service.create_user(body.username, body.password, body.email)
    return UserCreatedResponse(message="User created", user=_build_user_response(user))


@router.post(
    "/login",
    response_model=UserResponse,
    summary="Exchange credentials for the bearer token",
    responses={
        200: {"description": "Credentials accepted"},
        401: {"description": "Wrong username or password"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: UserLogin,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Check a username/password pair and hand back the user's token."""
    user = await service.authenticate(body.username, body.password)
    return _build_user_response(user)


def _build_user_response(user: User) -> UserResponse:
    """Convert domain entity to response schema."""
    return UserResponse(id=user.id, username=user.username, email=user.email, token=user.token)
