from fastapi import FastAPI

from .compose import router as compose_router
from .notifications import router as notifications_router
from .permissions import router as permissions_router
from .principals import router as principals_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(permissions_router)
    app.include_router(principals_router)
    app.include_router(compose_router)
    app.include_router(notifications_router)
