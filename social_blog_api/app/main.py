"""
Main entrypoint for the Social Blog API.

This module assembles the FastAPI application, sets up logging,
installs the error-to-status mapping and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn social_blog_api.app.main:app --reload

Error mapping:

* request bodies or path ids that fail validation -> 400, empty body
* ``HTTPException`` raised by handlers -> its status, empty body
* ``DatabaseError`` caused by a constraint violation -> 400, empty body
* any other ``DatabaseError`` -> 500 with a generic message
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import ConnectionProvider, init_db
from .core.exceptions import DatabaseError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.detail)
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.warning("%s %s has an invalid request: %s", request.method, request.url.path, exc.errors())
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def _database_exception_handler(request: Request, exc: DatabaseError) -> Response:
    if exc.is_bad_input:
        logger.warning("%s %s violated a constraint: %s", request.method, request.url.path, exc.cause)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(
    config: Settings = default_settings,
    provider: Optional[ConnectionProvider] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Settings
        Settings to build the app from.  Defaults to the process-wide
        settings read from the environment.
    provider : Optional[ConnectionProvider]
        Connection provider handed to every repository.  Built from
        ``config`` when omitted; tests pass one bound to a temporary
        database.
    """
    # Configure logging before anything else logs.
    setup_logging(config.log_level, config.log_file)

    if provider is None:
        provider = ConnectionProvider.from_settings(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Creates the database file if needed and brings the schema up to date.
        init_db(app.state.connection_provider)
        logger.info("%s ready, database at %s", config.project_name, provider.database_path)
        yield

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.connection_provider = provider

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(DatabaseError, _database_exception_handler)

    app.include_router(router)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


# Created at import time so uvicorn can discover it without calling
# create_app manually.
app = create_app()
