"""FastAPI application for the task tracker service API.

This module creates and configures the FastAPI application instance
with its task store, routes and health endpoint.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from ..config import Settings, get_settings
from ..routes.task_routes import task_router
from ..store import TaskStore, get_store

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use. If None, read from the environment.
        store: TaskStore the application owns. If None, a new empty
            store is created.

    Returns:
        Configured FastAPI instance with the task store on ``app.state``
    """
    if settings is None:
        settings = get_settings()

    docs_enabled = settings.docs_enabled

    # Create FastAPI application instance
    app = FastAPI(
        title="Task Tracker API",
        description="In-memory REST API for creating, listing, updating and deleting tasks",
        version=settings.service_version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None
    )

    app.state.settings = settings
    app.state.task_store = store if store is not None else TaskStore()

    # Include routers with API prefix
    app.include_router(task_router, prefix=settings.tasks_path)

    @app.get("/health")
    def health_check(store: TaskStore = Depends(get_store)):
        """Health check endpoint."""
        return {"status": "healthy", "tasks": len(store)}

    logger.info(f"Task routes mounted at {settings.tasks_path} (docs enabled: {docs_enabled})")
    return app


app = create_app()
