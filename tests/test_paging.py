"""
tests.test_paging

Sorting on every list route; page/size and Link headers on paged resources.
"""

from __future__ import annotations

import httpx
import pytest

from rest_data.db.models import Member
from rest_data.rest import EntityResource, ResourceProperties

NAMES = ["Edsger", "Ada", "Grace", "Alan", "Barbara"]


class PagedMemberResource(EntityResource):
    entity = Member
    properties = ResourceProperties(paged=True)


def parse_links(header: str) -> dict[str, httpx.URL]:
    links: dict[str, httpx.URL] = {}
    for part in header.split(","):
        target, rel = part.split(";")
        name = rel.strip().removeprefix('rel="').removesuffix('"')
        links[name] = httpx.URL(target.strip().strip("<>"))
    return links


async def _populate(client: httpx.AsyncClient, path: str) -> None:
    for i, name in enumerate(NAMES):
        body = {"name": name, "email": f"{name.lower()}@example.com", "phone": str(i % 2)}
        await client.post(path, json=body)


@pytest.mark.asyncio
async def test_sort_ascending_and_descending(client) -> None:
    await _populate(client, "/member")

    names = [m["name"] for m in (await client.get("/member", params={"sort": "name"})).json()]
    assert names == sorted(NAMES)

    names = [m["name"] for m in (await client.get("/member", params={"sort": "-name"})).json()]
    assert names == sorted(NAMES, reverse=True)


@pytest.mark.asyncio
async def test_sort_on_several_fields(client) -> None:
    await _populate(client, "/member")

    expected = [n for _, n in sorted((str(i % 2), n) for i, n in enumerate(NAMES))]
    r = await client.get("/member?sort=phone,name")
    assert [m["name"] for m in r.json()] == expected

    r = await client.get("/member?sort=phone&sort=name")
    assert [m["name"] for m in r.json()] == expected


@pytest.mark.asyncio
async def test_unknown_sort_field_is_400(client) -> None:
    r = await client.get("/member", params={"sort": "nickname"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Unknown sort field 'nickname'"


@pytest.mark.asyncio
async def test_unpaged_resource_returns_everything(client) -> None:
    await _populate(client, "/member")
    r = await client.get("/member", params={"page": 1, "size": 2})
    assert len(r.json()) == len(NAMES)
    assert "link" not in r.headers


@pytest.mark.asyncio
async def test_pages_and_links(serve_app) -> None:
    async with serve_app(PagedMemberResource) as client:
        await _populate(client, "/paged-member")

        r = await client.get("/paged-member", params={"size": 2})
        assert [m["name"] for m in r.json()] == NAMES[:2]
        links = parse_links(r.headers["link"])
        assert set(links) == {"first", "last", "next"}
        assert links["next"].params["page"] == "1"
        assert links["last"].params["page"] == "2"
        assert links["first"].params["size"] == "2"

        r = await client.get(str(links["last"]))
        assert [m["name"] for m in r.json()] == NAMES[4:]
        links = parse_links(r.headers["link"])
        assert set(links) == {"first", "last", "prev"}
        assert links["prev"].params["page"] == "1"


@pytest.mark.asyncio
async def test_page_links_keep_sort(serve_app) -> None:
    async with serve_app(PagedMemberResource) as client:
        await _populate(client, "/paged-member")

        r = await client.get("/paged-member", params={"size": 2, "sort": "name"})
        assert [m["name"] for m in r.json()] == sorted(NAMES)[:2]
        next_page = parse_links(r.headers["link"])["next"]
        assert next_page.params["sort"] == "name"
        r = await client.get(str(next_page))
        assert [m["name"] for m in r.json()] == sorted(NAMES)[2:4]


@pytest.mark.asyncio
async def test_default_page_size_and_empty_collection(serve_app) -> None:
    async with serve_app(PagedMemberResource, default_page_size=3) as client:
        r = await client.get("/paged-member")
        assert r.json() == []
        assert set(parse_links(r.headers["link"])) == {"first", "last"}

        await _populate(client, "/paged-member")
        r = await client.get("/paged-member")
        assert len(r.json()) == 3

        r = await client.get("/paged-member", params={"page": 9})
        assert r.status_code == 200
        assert r.json() == []


@pytest.mark.asyncio
async def test_unpaged_resource_ignores_out_of_range_page_and_size(client) -> None:
    await _populate(client, "/member")
    for params in ({"page": -1}, {"size": 0}, {"size": 5000}):
        r = await client.get("/member", params=params)
        assert r.status_code == 200
        assert len(r.json()) == len(NAMES)


@pytest.mark.asyncio
async def test_paged_resource_rejects_out_of_range_page_and_size(serve_app) -> None:
    async with serve_app(PagedMemberResource) as client:
        for params in ({"page": -1}, {"size": 0}, {"size": 5000}):
            assert (await client.get("/paged-member", params=params)).status_code == 422
