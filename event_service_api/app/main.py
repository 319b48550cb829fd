"""
Main entrypoint for the Event Service API.

``create_app`` assembles the FastAPI application from an explicit
``Settings`` value: it configures logging, builds the shared
``Database``, installs the error envelope handlers and mounts the
versioned router.  The schema is created when the application starts.
A default instance is created at import time so an ASGI server can
find it::

    uvicorn event_service_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to run with.  Read from the environment when
        omitted.

    Returns
    -------
    FastAPI
        A configured application; ``app.state.settings`` and
        ``app.state.db`` hold the settings and the database.
    """
    settings = settings or Settings.from_env()

    # Logging first so that everything below may log.
    setup_logging(settings.log_level, settings.log_file)

    db = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.init_db()
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
