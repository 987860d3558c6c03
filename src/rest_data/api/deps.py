"""
rest_data.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and DB sessions.
- Encapsulate app.state access patterns (settings/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rest_data.settings import Settings


def settings_from_app(request: Request) -> Settings:
    # The settings passed to `create_app` win over the env-derived cached ones.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created in the app lifespan (`rest_data.api.app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    """
    Request-scoped DB session. Resources commit their own writes; anything
    flushed but uncommitted when a handler raises is rolled back on close.
    """

    async with session_factory() as session:
        yield session


# --- Module Notes -----------------------------------------------------------
# Generated handlers depend on `db_session` and `settings_from_app` only, so a
# test can swap either through `app.dependency_overrides`.
