"""
rest_data.api.app

FastAPI app factory for the REST Data service.

Responsibilities:
- Build the FastAPI application, mount health routes and one generated router
  per declared resource.
- Map REST Data errors to HTTP statuses.
- Initialize and dispose shared infrastructure (engine, sessionmaker, schema, seed).
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_405_METHOD_NOT_ALLOWED

from rest_data import __version__
from rest_data.api.resources import DEFAULT_RESOURCES
from rest_data.api.routers.health import router as health_router
from rest_data.db.init_db import init_db
from rest_data.db.session import create_engine, create_sessionmaker
from rest_data.errors import InvalidSortError, MethodNotExposedError
from rest_data.observability.logging import configure_logging, get_logger
from rest_data.observability.middleware import RequestContextMiddleware
from rest_data.rest.resource import EntityResource
from rest_data.rest.router import build_router
from rest_data.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    resources: Sequence[type[EntityResource]] = DEFAULT_RESOURCES,
) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        sql_echo=settings.sql_echo,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        try:
            await init_db(engine, settings)
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="REST Data",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    for resource in resources:
        router = build_router(resource)
        if router is not None:
            app.include_router(router)

    @app.exception_handler(MethodNotExposedError)
    async def _method_not_exposed(request: Request, exc: MethodNotExposedError) -> JSONResponse:
        log.info("method_not_exposed", operation=exc.operation)
        return JSONResponse({"detail": str(exc)}, status_code=HTTP_405_METHOD_NOT_ALLOWED)

    @app.exception_handler(InvalidSortError)
    async def _invalid_sort(request: Request, exc: InvalidSortError) -> JSONResponse:
        return JSONResponse({"detail": str(exc)}, status_code=HTTP_400_BAD_REQUEST)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; CRUD behavior lives in `rest.resource` and HTTP
# mapping of it in `rest.router`.
