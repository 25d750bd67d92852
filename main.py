import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loyalty_console.config import get_settings
from loyalty_console.infrastructure.compose_sessions import ComposeSessionRegistry
from loyalty_console.infrastructure.platform_client import create_http_client
from loyalty_console.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the platform HTTP client on startup and release it on shutdown."""

    settings = get_settings()
    app.state.http_client = create_http_client(settings)
    app.state.compose_sessions = ComposeSessionRegistry(
        idle_timeout=settings.compose_session_idle_seconds
    )
    try:
        yield
    finally:
        app.state.compose_sessions.close_all()
        await app.state.http_client.aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.getLogger("loyalty_console").setLevel(settings.log_level)

    app = FastAPI(title="Loyalty Console", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
