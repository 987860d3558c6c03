"""
rest_data.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Liveness check (`/healthz`).
- Readiness check (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from rest_data.api.deps import db_session

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: the process is up and serving HTTP, store or not.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Readiness: the store backing the generated resources answers a round trip.
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# These routes are mounted next to the generated resources; a resource derived
# as "healthz" or "readyz" would collide with them.
