"""
rest_data.db.models

Entity definitions.

Responsibilities:
- Define `Member`: an auto-assigned integer identity plus name/email/phone.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rest_data.db.base import Base


class Member(Base):
    __tablename__ = "member"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row again.
    __table_args__ = {"sqlite_autoincrement": True}

    # Identity is assigned by the store and never reused for another row.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, name={self.name!r})"
