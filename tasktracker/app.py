from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .config import Settings
from .middleware.error_handler import register_error_handlers
from .middleware.request_logging import RequestLoggingMiddleware
from .routes.system import router as system_router
from .tasks.router import router as tasks_router
from .tasks.router import seed_store
from .tasks.store import TaskStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the Tasks API around ``store``.

    A fresh empty store is created when none is given. With
    ``settings.seed_tasks`` the sample tasks are inserted on startup.
    """
    settings = settings or Settings()
    task_store = store if store is not None else TaskStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.seed_tasks:
            await seed_store(task_store)
        logger.info("Tasks API ready on %s:%s", settings.host, settings.port)
        yield

    app = FastAPI(title="Tasks API", version="0.1.0", lifespan=lifespan)
    app.state.task_store = task_store

    register_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(system_router)
    app.include_router(tasks_router)
    return app
