"""
rest_data.rest.router

CRUD route generation.

Responsibilities:
- Build one APIRouter per `EntityResource` subclass with five routes:
  `GET /{path}`, `GET /{path}/{id}`, `POST /{path}`, `PUT /{path}/{id}`,
  `DELETE /{path}/{id}`.
- Map operation outcomes to statuses (201 + Location, 204, 404).
- Serve the HAL media type and paging Link headers when the resource asks for them.
- Replace suppressed operations with handlers that always fail.
"""

# No `from __future__ import annotations` here: handler signatures use the
# per-resource identity and body types, so they must be real objects at def time.

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_404_NOT_FOUND,
)

from rest_data.api.deps import db_session, settings_from_app
from rest_data.errors import MethodNotExposedError
from rest_data.observability.logging import get_logger
from rest_data.rest.hal import collection_document, collection_url, entity_document, wants_hal
from rest_data.rest.paging import link_header
from rest_data.rest.properties import HAL_MEDIA_TYPE, OPERATIONS
from rest_data.rest.resource import EntityResource
from rest_data.settings import Settings

log = get_logger(__name__)


def _not_exposed(operation: str):
    # Takes no parameters so it fails before any body or path validation.
    async def endpoint() -> Response:
        raise MethodNotExposedError(operation)

    return endpoint


def build_router(resource: type[EntityResource]) -> APIRouter | None:
    if not resource.properties.exposed:
        log.info("resource_not_exposed", resource=resource.__name__)
        return None

    path = resource.path()
    schema = resource.schema
    pk_type = resource.identity_type()
    not_found = f"{resource.entity.__name__} not found"
    hal = resource.properties.hal
    paged = resource.properties.paged

    def render(
        request: Request,
        entity: Any,
        *,
        status_code: int = HTTP_200_OK,
        headers: dict[str, str] | None = None,
    ) -> Response:
        if wants_hal(request, hal):
            body = entity_document(resource, collection_url(request, path), entity)
            return JSONResponse(body, status_code, headers, media_type=HAL_MEDIA_TYPE)
        return JSONResponse(resource.serialize(entity), status_code, headers)

    def location(request: Request, entity: Any) -> dict[str, str]:
        return {"location": f"{collection_url(request, path)}/{resource.identity_of(entity)}"}

    # Unpaged resources ignore page/size, so they carry no bounds there.
    if paged:
        page_query = Query(default=0, ge=0)
        size_query = Query(default=None, ge=1, le=1000)
    else:
        page_query = Query(default=0, include_in_schema=False)
        size_query = Query(default=None, include_in_schema=False)

    async def list_entities(
        request: Request,
        sort: list[str] = Query(default=[]),
        page: int = page_query,
        size: int | None = size_query,
        session: AsyncSession = Depends(db_session),
        settings: Settings = Depends(settings_from_app),
    ) -> Response:
        res = resource(session)
        headers: dict[str, str] = {}
        if paged:
            size = size or settings.default_page_size
            entities = await res.list(sort=sort, page=page, size=size)
            total = await res.count()
            headers["link"] = link_header(request.url, page=page, size=size, total=total)
        else:
            entities = await res.list(sort=sort)

        if wants_hal(request, hal):
            body = collection_document(resource, collection_url(request, path), entities)
            return JSONResponse(body, headers=headers, media_type=HAL_MEDIA_TYPE)
        return JSONResponse([resource.serialize(e) for e in entities], headers=headers)

    async def get_entity(
        request: Request,
        entity_id: pk_type,
        session: AsyncSession = Depends(db_session),
    ) -> Response:
        entity = await resource(session).get(entity_id)
        if entity is None:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=not_found)
        return render(request, entity)

    async def add_entity(
        request: Request,
        body: schema,
        session: AsyncSession = Depends(db_session),
    ) -> Response:
        entity = await resource(session).add(body.model_dump())
        return render(
            request, entity, status_code=HTTP_201_CREATED, headers=location(request, entity)
        )

    async def update_entity(
        request: Request,
        entity_id: pk_type,
        body: schema,
        session: AsyncSession = Depends(db_session),
    ) -> Response:
        # The path identity wins over any identity in the body.
        entity, created = await resource(session).update(entity_id, body.model_dump())
        if not created:
            return Response(status_code=HTTP_204_NO_CONTENT)
        return render(
            request, entity, status_code=HTTP_201_CREATED, headers=location(request, entity)
        )

    async def delete_entity(
        entity_id: pk_type,
        session: AsyncSession = Depends(db_session),
    ) -> Response:
        if not await resource(session).delete(entity_id):
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=not_found)
        return Response(status_code=HTTP_204_NO_CONTENT)

    routes = {
        "list": ("", "GET", list_entities, HTTP_200_OK),
        "get": ("/{entity_id}", "GET", get_entity, HTTP_200_OK),
        "add": ("", "POST", add_entity, HTTP_201_CREATED),
        "update": ("/{entity_id}", "PUT", update_entity, HTTP_204_NO_CONTENT),
        "delete": ("/{entity_id}", "DELETE", delete_entity, HTTP_204_NO_CONTENT),
    }

    router = APIRouter(prefix=f"/{path}", tags=[path])
    for op in OPERATIONS:
        route_path, method, endpoint, status_code = routes[op]
        exposed = resource.is_exposed(op)
        router.add_api_route(
            route_path,
            endpoint if exposed else _not_exposed(op),
            methods=[method],
            name=f"{path}.{op}",
            status_code=status_code,
            response_model=None,
            include_in_schema=exposed,
        )

    log.info(
        "resource_mounted",
        resource=resource.__name__,
        path=f"/{path}",
        disabled=[op for op in OPERATIONS if not resource.is_exposed(op)],
    )
    return router


# --- Module Notes -----------------------------------------------------------
# Handlers return Response objects directly so status, Location and media type
# are decided per request; `response_model=None` keeps FastAPI from re-serializing.
