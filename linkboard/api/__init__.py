from fastapi import APIRouter

from linkboard.api.v1 import metadata

api_router = APIRouter(prefix="/api")
api_router.include_router(metadata.router)

__all__ = ["api_router"]
