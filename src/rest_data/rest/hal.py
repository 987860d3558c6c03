"""
rest_data.rest.hal

`application/hal+json` documents for resources declared with `hal=True`.

Responsibilities:
- Decide from the Accept header whether a HAL document was asked for.
- Attach `_links` to single records and wrap lists in `_embedded`.
"""

from __future__ import annotations

from typing import Any

from starlette.requests import Request

from rest_data.rest.properties import HAL_MEDIA_TYPE

# Link relation -> operation that has to be exposed for the link to appear.
_ENTITY_RELS = (("list", "list"), ("add", "add"), ("update", "update"), ("remove", "delete"))
_COLLECTION_RELS = (("list", "list"), ("add", "add"))
_JSON_TYPES = ("application/json", "application/*", "*/*")


def _accepted_types(accept: str) -> list[tuple[str, float]]:
    # "application/hal+json;q=0.5, */*" -> [("application/hal+json", 0.5), ("*/*", 1.0)]
    accepted: list[tuple[str, float]] = []
    for part in accept.split(","):
        media_type, *params = (p.strip() for p in part.split(";"))
        if not media_type:
            continue
        q = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    q = float(value)
                except ValueError:
                    q = 0.0
        accepted.append((media_type.lower(), q))
    return accepted


def wants_hal(request: Request, enabled: bool) -> bool:
    """
    HAL only when it is named explicitly with a non-zero q that no JSON
    alternative (`application/json`, `application/*`, `*/*`) outranks.
    """

    if not enabled:
        return False
    accepted = _accepted_types(request.headers.get("accept", ""))
    hal_q = max((q for t, q in accepted if t == HAL_MEDIA_TYPE), default=0.0)
    if hal_q <= 0:
        return False
    json_q = max((q for t, q in accepted if t in _JSON_TYPES), default=0.0)
    return hal_q >= json_q


def collection_url(request: Request, path: str) -> str:
    return f"{str(request.base_url).rstrip('/')}/{path}"


def entity_links(resource: Any, base: str, entity_id: Any) -> dict[str, dict[str, str]]:
    item = f"{base}/{entity_id}"
    # `self` is always present so every embedded record stays addressable.
    links = {"self": {"href": item}}
    for rel, op in _ENTITY_RELS:
        if resource.is_exposed(op):
            links[rel] = {"href": base if rel in ("list", "add") else item}
    return links


def entity_document(resource: Any, base: str, entity: Any) -> dict[str, Any]:
    body = resource.serialize(entity)
    body["_links"] = entity_links(resource, base, resource.identity_of(entity))
    return body


def collection_document(resource: Any, base: str, entities: list[Any]) -> dict[str, Any]:
    links = {rel: {"href": base} for rel, op in _COLLECTION_RELS if resource.is_exposed(op)}
    return {
        "_embedded": {
            resource.collection(): [entity_document(resource, base, e) for e in entities]
        },
        "_links": links,
    }
