"""
rest_data.db.init_db

Schema generation and seeding at startup.

Responsibilities:
- Create (or drop and re-create) tables according to `schema_generation`.
- Load the seed script right after the schema is in place.
- Keep the production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from rest_data.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from rest_data.db.base import Base
from rest_data.db.seed import load_seed_script
from rest_data.observability.logging import get_logger
from rest_data.settings import Settings

log = get_logger(__name__)


async def init_db(engine: AsyncEngine, settings: Settings) -> None:
    if settings.schema_generation == "none":
        return

    # Schema and seed rows share one transaction: a broken seed leaves no tables behind.
    async with engine.begin() as conn:
        if settings.schema_generation == "drop-and-create":
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
        log.info("schema_generated", strategy=settings.schema_generation)

        if settings.seed_script is not None:
            await load_seed_script(conn, settings.seed_script)


# --- Module Notes -----------------------------------------------------------
# With schema_generation="create" the seed script runs on every start, so its
# inserts must tolerate existing rows or the store must start empty.
