"""
Main entrypoint for the Product Store API.

This module assembles the FastAPI application, sets up logging,
attaches the product store and registers the error handlers that map
storage and request failures to HTTP statuses.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn product_store_api.app.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import settings
from .core.db import ProductStore
from .core.exceptions import ERROR_DETAIL, ERROR_STATUS
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


def _error_handler(exc_type: Type[Exception]):
    status_code = ERROR_STATUS[exc_type]
    detail = ERROR_DETAIL[exc_type]

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.warning(
            "%s %s failed with %s", request.method, request.url.path, type(exc).__name__
        )
        return JSONResponse(status_code=status_code, content={"detail": detail})

    return handler


def create_app(database_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database_path : Optional[str]
        SQLite file backing the store.  Defaults to
        ``settings.database_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level)

    store = ProductStore(database_path or settings.database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # A StorageInitError here aborts startup: the server never
        # begins serving without a usable store.
        store.initialize()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.store = store

    app.include_router(router)

    for exc_type in ERROR_STATUS:
        app.add_exception_handler(exc_type, _error_handler(exc_type))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
