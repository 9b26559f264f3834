from fastapi import APIRouter

from ogp_api.api.v1 import ogp

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(ogp.router)

__all__ = ["api_router"]
