"""
rest_data.db.repositories.entities

Generic repository for any single-key entity model.

Responsibilities:
- Ordered/paged listing with column sorts.
- Identity lookup, insert, full replace (or insert under a given identity), delete.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import asc, desc, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from rest_data.db.base import Base
from rest_data.errors import InvalidSortError

E = TypeVar("E", bound=Base)


def parse_sort(sort: Sequence[str]) -> list[tuple[str, bool]]:
    """
    `["name,-email", "phone"]` -> `[("name", False), ("email", True), ("phone", False)]`.
    The bool is "descending".
    """

    fields: list[tuple[str, bool]] = []
    for item in sort:
        for part in item.split(","):
            part = part.strip()
            if not part:
                continue
            if part.startswith("-"):
                fields.append((part[1:].strip(), True))
            else:
                fields.append((part.lstrip("+").strip(), False))
    return fields


class EntityRepo(Generic[E]):
    def __init__(self, session: AsyncSession, model: type[E]) -> None:
        self._session = session
        self._model = model
        mapper = inspect(model)
        pk_columns = mapper.primary_key
        if len(pk_columns) != 1:
            raise TypeError(f"{model.__name__} must have exactly one primary key column")
        self._pk_key = mapper.get_property_by_column(pk_columns[0]).key
        self._columns = {attr.key: attr for attr in mapper.column_attrs}

    @property
    def pk_key(self) -> str:
        return self._pk_key

    @property
    def attribute_keys(self) -> list[str]:
        # Non-identity attributes, in declaration order.
        return [key for key in self._columns if key != self._pk_key]

    def _order_by(self, sort: Sequence[str]) -> list[Any]:
        clauses: list[Any] = []
        seen_pk = False
        for key, descending in parse_sort(sort):
            if key not in self._columns:
                raise InvalidSortError(key)
            column = getattr(self._model, key)
            clauses.append(desc(column) if descending else asc(column))
            seen_pk = seen_pk or key == self._pk_key
        if not seen_pk:
            # Identity order is insertion order; it also breaks ties for stable pages.
            clauses.append(asc(getattr(self._model, self._pk_key)))
        return clauses

    async def list_all(
        self,
        *,
        sort: Sequence[str] = (),
        offset: int = 0,
        limit: int | None = None,
    ) -> list[E]:
        """
        Without `sort` rows come back by identity. Identities are handed out in
        increasing order, so that is insertion order, except for rows created by
        `replace` under an explicit identity: those sort by that identity.
        """

        stmt = select(self._model).order_by(*self._order_by(sort)).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._model)
        return int((await self._session.execute(stmt)).scalar_one())

    async def get(self, entity_id: Any) -> E | None:
        return await self._session.get(self._model, entity_id)

    async def create(self, values: dict[str, Any]) -> E:
        # The store assigns the identity; a caller-supplied one is ignored.
        data = {k: v for k, v in values.items() if k in self._columns and k != self._pk_key}
        entity = self._model(**data)
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def replace(self, entity_id: Any, values: dict[str, Any]) -> tuple[E, bool]:
        """
        Full replace: attributes missing from `values` are reset to None.
        Returns `(entity, created)`; `created` is True when no row had `entity_id`.
        """

        entity = await self._session.get(self._model, entity_id)
        created = entity is None
        if entity is None:
            entity = self._model(**{self._pk_key: entity_id})
            self._session.add(entity)
        for key in self.attribute_keys:
            setattr(entity, key, values.get(key))
        await self._session.flush()
        return entity, created

    async def delete(self, entity_id: Any) -> bool:
        entity = await self._session.get(self._model, entity_id)
        if entity is None:
            return False
        await self._session.delete(entity)
        await self._session.flush()
        return True


# --- Module Notes -----------------------------------------------------------
# Commits are left to the caller (the generated handlers) so a request is one
# transaction.
