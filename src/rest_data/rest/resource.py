"""
rest_data.rest.resource

Resource declarations.

Responsibilities:
- `EntityResource`: subclass it, name an entity, and the five CRUD operations
  exist for that entity (list/get/add/update/delete).
- Enforce per-operation exposure: a suppressed operation always raises
  `MethodNotExposedError`, whatever its arguments.
- Own the transaction boundary of each mutating operation.

Example:

    class MemberResource(EntityResource):
        entity = Member
        properties = ResourceProperties(hal=True)
        methods = {"delete": MethodProperties(exposed=False)}
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from rest_data.db.base import Base
from rest_data.db.repositories.entities import EntityRepo
from rest_data.errors import MethodNotExposedError
from rest_data.observability.logging import get_logger
from rest_data.rest.naming import resource_path
from rest_data.rest.properties import OPERATIONS, MethodProperties, ResourceProperties
from rest_data.rest.schemas import column_python_type, schema_for

log = get_logger(__name__)


def operation(name: str):
    def decorate(fn):
        @functools.wraps(fn)
        async def wrapper(self: EntityResource, *args: Any, **kwargs: Any) -> Any:
            if not self.is_exposed(name):
                raise MethodNotExposedError(name)
            return await fn(self, *args, **kwargs)

        return wrapper

    return decorate


class EntityResource:
    entity: ClassVar[type[Base]]
    properties: ClassVar[ResourceProperties] = ResourceProperties()
    methods: ClassVar[Mapping[str, MethodProperties]] = {}
    # None -> derived from the entity's columns.
    schema: ClassVar[type[BaseModel] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        unknown = set(cls.methods) - set(OPERATIONS)
        if unknown:
            raise TypeError(f"{cls.__name__}.methods names unknown operations: {sorted(unknown)}")
        if cls.properties.path is not None and not cls.properties.path.strip("/"):
            raise TypeError(f"{cls.__name__}.properties.path must name a path segment")
        # Intermediate bases may leave `entity` unset.
        if "entity" in cls.__dict__ and "schema" not in cls.__dict__:
            cls.schema = schema_for(cls.entity)

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repo = EntityRepo(session, self.entity)

    # -- declaration ------------------------------------------------------

    @classmethod
    def path(cls) -> str:
        if cls.properties.path is not None:
            return cls.properties.path.strip("/")
        return resource_path(cls.__name__)

    @classmethod
    def collection(cls) -> str:
        return cls.properties.collection or cls.path()

    @classmethod
    def is_exposed(cls, name: str) -> bool:
        return cls.methods.get(name, MethodProperties()).exposed

    @classmethod
    def identity_type(cls) -> Any:
        return column_python_type(inspect(cls.entity).primary_key[0])

    @classmethod
    def identity_of(cls, entity: Base) -> Any:
        return inspect(entity).identity[0]

    @classmethod
    def serialize(cls, entity: Base) -> dict[str, Any]:
        if cls.schema is None:
            raise TypeError(f"{cls.__name__} declares no entity to serialize")
        return cls.schema.model_validate(entity, from_attributes=True).model_dump(mode="json")

    # -- operations -------------------------------------------------------

    @operation("list")
    async def list(
        self,
        *,
        sort: Sequence[str] = (),
        page: int | None = None,
        size: int | None = None,
    ) -> list[Base]:
        # page/size only apply together; without them the whole collection is returned.
        if page is None or size is None:
            return await self._repo.list_all(sort=sort)
        return await self._repo.list_all(sort=sort, offset=page * size, limit=size)

    async def count(self) -> int:
        return await self._repo.count()

    @operation("get")
    async def get(self, entity_id: Any) -> Base | None:
        return await self._repo.get(entity_id)

    @operation("add")
    async def add(self, values: dict[str, Any]) -> Base:
        entity = await self._repo.create(values)
        await self._session.commit()
        log.info("entity_created", entity=self.entity.__name__, id=self.identity_of(entity))
        return entity

    @operation("update")
    async def update(self, entity_id: Any, values: dict[str, Any]) -> tuple[Base, bool]:
        entity, created = await self._repo.replace(entity_id, values)
        await self._session.commit()
        log.info(
            "entity_created" if created else "entity_replaced",
            entity=self.entity.__name__,
            id=entity_id,
        )
        return entity, created

    @operation("delete")
    async def delete(self, entity_id: Any) -> bool:
        deleted = await self._repo.delete(entity_id)
        if deleted:
            await self._session.commit()
            log.info("entity_deleted", entity=self.entity.__name__, id=entity_id)
        return deleted


# --- Module Notes -----------------------------------------------------------
# HTTP concerns (status codes, Location, media types) live in `rest.router`;
# this class can be driven directly from scripts or tests with a session.
