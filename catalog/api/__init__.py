from fastapi import APIRouter

from catalog.interfaces.http.routers import auth


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    return router


__all__ = [
    "create_api_router",
]
