"""API v1 routers.

Resources:
    /api/v1/users    - User management (each user owns one wallet)
"""

from fastapi import APIRouter

from userwallet.core.config import settings
from userwallet.presentation.api.v1.users import router as users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(users_router)

__all__ = [
    "v1_router",
]
