"""
Main entrypoint for the Product API.

This module assembles the FastAPI application: it sets up logging,
attaches the product store, installs the request logger and the error
formatter, and includes the routers.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served with uvicorn, e.g.::

    uvicorn product_api.app.main:app --reload

Every error reaches the client as ``{"error": ..., "message": ...}``.
Service errors keep their own status code; anything unexpected becomes
a 500 with a generic message while the traceback goes to the log.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import root
from .api.router import router as api_router
from .core.config import settings
from .core.errors import ErrorKind, InternalError, ProductApiError
from .core.logging_config import setup_logging
from .core.store import ProductStore

logger = logging.getLogger(__name__)


async def log_request(request: Request, call_next):
    """Log timestamp, method and path of every request."""
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    logger.info("[%s] %s %s", datetime.now(timezone.utc).isoformat(), request.method, path)
    return await call_next(request)


async def handle_api_error(request: Request, exc: ProductApiError) -> JSONResponse:
    where = f"{request.method} {request.url.path}"
    headers = None
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("Internal error on %s: %s", where, exc.message)
    elif exc.kind is ErrorKind.VALIDATION:
        logger.warning("Validation failed on %s [%s]: %s", where, ", ".join(exc.fields), exc.message)
    else:
        logger.warning("%s on %s: %s", exc.error, where, exc.message)
    if exc.kind is ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Framework-level errors such as unknown routes or wrong methods.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP Error", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=InternalError(str(exc)).to_dict())


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ProductStore]
        Collection the application serves.  A freshly seeded store is
        created when omitted, which lets tests build isolated instances.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else ProductStore()

    app.middleware("http")(log_request)

    app.add_exception_handler(ProductApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(root.router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
