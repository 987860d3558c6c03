"""
tests.conftest

Shared fixtures: a per-test SQLite file database and an in-process HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pytest
import pytest_asyncio
import structlog
from fastapi import FastAPI
from structlog.testing import LogCapture

from rest_data.api.app import create_app
from rest_data.api.resources import DEFAULT_RESOURCES
from rest_data.observability.logging import configure_logging
from rest_data.settings import Settings

# Configure before any logger is used so every module shares one processor chain.
configure_logging(service_name="rest-data-test", level="INFO")


@pytest.fixture
def settings(tmp_path) -> Settings:
    # Empty store by default; seed tests opt back in.
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        seed_script=None,
    )


@asynccontextmanager
async def serve(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx's ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def make_app(settings: Settings):
    def _make(*resources, **overrides) -> FastAPI:
        return create_app(
            settings=settings.model_copy(update=overrides),
            resources=resources or DEFAULT_RESOURCES,
        )

    return _make


@pytest.fixture
def serve_app(make_app):
    def _serve(*resources, **overrides):
        return serve(make_app(*resources, **overrides))

    return _serve


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    async with serve(create_app(settings=settings)) as c:
        yield c



@pytest.fixture
def captured_logs():
    # Like structlog.testing.capture_logs, but keeps request-scoped contextvars.
    cap = LogCapture()
    processors = structlog.get_config()["processors"]
    saved = processors.copy()
    processors[:] = [structlog.contextvars.merge_contextvars, cap]
    try:
        yield cap.entries
    finally:
        processors[:] = saved
