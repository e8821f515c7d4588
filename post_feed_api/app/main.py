"""
Main entrypoint for the Post Feed API.

This module assembles the FastAPI application: it configures logging,
creates the shared post store, mounts the routes, maps the feed error
taxonomy onto HTTP responses and installs two middlewares:

* an access log middleware reporting method, path, status and timing
  of every request;
* a content‑type policy stamping ``application/json`` on every
  response, whatever its status.

The application is instantiated at import time as ``app`` so it can be
served directly, e.g.::

    uvicorn post_feed_api.app.main:app --port 3000
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import FeedError
from .core.logging_config import ACCESS_LOGGER, setup_logging
from .core.store import PostStore, seed_store

JSON_MEDIA_TYPE = "application/json"

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER)


def create_app(store: Optional[PostStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PostStore]
        Store shared by all operations of this application.  When
        omitted a new store is created and, if
        ``settings.seed_sample_posts`` is set, seeded with two sample
        posts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = PostStore()
        if settings.seed_sample_posts:
            seed_store(store)

    # Every response is stamped as JSON, so the HTML documentation
    # pages are disabled; the OpenAPI document itself stays available.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
    )
    app.state.store = store

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(FeedError)
    async def feed_error_handler(request: Request, exc: FeedError) -> Response:
        if exc.status_code == 404:
            return Response(status_code=exc.status_code)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        # Only path parameters are validated by FastAPI here; a malformed
        # identifier is a bad request rather than 422.
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> Response:
        # Runs in the outermost middleware, past the content-type stamp,
        # so the JSON response is built here.
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.middleware("http")
    async def json_content_type(request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["content-type"] = JSON_MEDIA_TYPE
        return response

    @app.middleware("http")
    async def access_log(request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    return app


app = create_app()
