"""FastAPI application creation and configuration."""
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..config import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="dailycal",
        description="Daily calorie recommendations from the Mifflin-St Jeor equation",
        version=__version__,
    )
    app.state.settings = settings

    from .routes import router
    app.include_router(router, prefix="/api", tags=["api"])

    return app
