"""
rest_data.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from settings.
- Create the async sessionmaker with safe defaults.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rest_data.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    # echo mirrors the REST_DATA_SQL_ECHO switch (statements go to sqlalchemy.engine).
    return create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
        echo=settings.sql_echo,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Sessions used by generated handlers and by `EntityResource` when driven
    directly. Writes are committed by the resource, never by autoflush/autocommit.
    """

    # expire_on_commit=False lets handlers serialize entities after commit.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


# --- Module Notes -----------------------------------------------------------
# The API layer scopes sessions per request via `api.deps.db_session`.
