"""
rest_data.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for all entity models.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# Every entity exposed through a resource must inherit from `Base` so schema
# generation and Alembic see it.
