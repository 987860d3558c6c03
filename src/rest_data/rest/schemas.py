"""
rest_data.rest.schemas

Pydantic representation derived from an entity model's columns.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, create_model
from sqlalchemy import inspect

from rest_data.db.base import Base


def column_python_type(column: Any) -> Any:
    try:
        return column.type.python_type
    except NotImplementedError:
        return Any


def schema_for(model: type[Base]) -> type[BaseModel]:
    """
    One field per mapped column. The identity is always optional (the store
    assigns it); other columns are optional when nullable or defaulted.
    """

    mapper = inspect(model)
    fields: dict[str, Any] = {}
    for attr in mapper.column_attrs:
        column = attr.columns[0]
        py_type = column_python_type(column)
        optional = column.primary_key or column.nullable or column.default is not None
        if optional:
            fields[attr.key] = (py_type | None, None)
        else:
            fields[attr.key] = (py_type, ...)
    return create_model(model.__name__, **fields)
