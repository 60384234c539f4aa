"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: it sets up logging,
constructs the record store, mounts the landing page, static assets
and the ``/api`` router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly, e.g.::

    uvicorn exercise_tracker_api.app.main:app --reload

The store is opened when the application starts and closed when it
shuts down.  Tests pass their own store to ``create_app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.endpoints import pages
from .api.router import router as api_router
from .core.config import settings
from .core.db import MongoStore
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the record store on startup and close it on shutdown."""
    store = app.state.store
    logger.info("Starting %s %s", app.title, app.version)
    await store.connect()
    try:
        yield
    finally:
        await store.close()


def create_app(store: Optional[MongoStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[MongoStore]
        Record store used by the request handlers.  When omitted a
        ``MongoStore`` is built from ``settings.mongo_uri`` and
        ``settings.mongo_db``.  The store is not connected until the
        application starts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else MongoStore(settings.mongo_uri, settings.mongo_db)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(pages.router)
    app.mount("/public", StaticFiles(directory=pages.PUBLIC_DIR), name="public")
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
