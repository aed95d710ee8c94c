"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.groups import router as groups_router
from api.v1.routes.movies import router as movies_router
from api.v1.routes.users import router as users_router

router = APIRouter()
router.include_router(users_router)
router.include_router(movies_router)
router.include_router(groups_router)
