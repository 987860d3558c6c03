"""
rest_data.rest.properties

Static switches attached to a resource declaration.

Responsibilities:
- `ResourceProperties`: base path override, alternate media type, paging, exposure.
- `MethodProperties`: per-operation exposure.
"""

from __future__ import annotations

from dataclasses import dataclass

# Generated operations, in route registration order.
OPERATIONS: tuple[str, ...] = ("list", "get", "add", "update", "delete")

HAL_MEDIA_TYPE = "application/hal+json"


@dataclass(frozen=True, slots=True)
class ResourceProperties:
    # None -> derived from the resource class name.
    path: str | None = None
    # Answer `Accept: application/hal+json` with `_links`/`_embedded` documents.
    hal: bool = False
    # Key of the embedded list in HAL documents; None -> the resource path.
    collection: str | None = None
    paged: bool = False
    # False -> no routes are mounted for the resource at all.
    exposed: bool = True


@dataclass(frozen=True, slots=True)
class MethodProperties:
    exposed: bool = True
