"""
rest_data.rest.paging

RFC 8288 `Link` headers for paged list responses.
"""

from __future__ import annotations

from starlette.datastructures import URL


def last_page(total: int, size: int) -> int:
    # An empty collection still has one (empty) page.
    return max((total - 1) // size, 0)


def link_header(url: URL, *, page: int, size: int, total: int) -> str:
    last = last_page(total, size)
    rels = [("first", 0), ("last", last)]
    if page > 0:
        rels.append(("prev", min(page - 1, last)))
    if page < last:
        rels.append(("next", page + 1))
    return ", ".join(
        f'<{url.include_query_params(page=target, size=size)}>; rel="{rel}"'
        for rel, target in rels
    )
