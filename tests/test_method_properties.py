"""
tests.test_method_properties

Declarative switches: per-operation exposure, base path override, resource exposure.
"""

from __future__ import annotations

import pytest

from rest_data.db.models import Member
from rest_data.errors import MethodNotExposedError
from rest_data.rest import EntityResource, MethodProperties, ResourceProperties


class ReadOnlyMemberResource(EntityResource):
    entity = Member
    methods = {
        "add": MethodProperties(exposed=False),
        "update": MethodProperties(exposed=False),
        "delete": MethodProperties(exposed=False),
    }


class MemberController(EntityResource):
    entity = Member
    properties = ResourceProperties(path="/people/")


class HiddenMemberResource(EntityResource):
    entity = Member
    properties = ResourceProperties(exposed=False)


class NoReadMemberResource(EntityResource):
    entity = Member
    methods = {
        "list": MethodProperties(exposed=False),
        "get": MethodProperties(exposed=False),
    }


@pytest.mark.asyncio
async def test_disabled_operations_always_fail(serve_app) -> None:
    cases = [
        ("POST", "/read-only-member", {"name": "Ada"}, "add"),
        ("POST", "/read-only-member", {"name": ["bad"]}, "add"),
        ("PUT", "/read-only-member/1", {"name": "Ada"}, "update"),
        ("DELETE", "/read-only-member/1", None, "delete"),
        ("DELETE", "/read-only-member/not-a-number", None, "delete"),
    ]
    async with serve_app(ReadOnlyMemberResource) as client:
        for method, url, body, op in cases:
            r = await client.request(method, url, json=body)
            assert r.status_code == 405
            assert r.json()["detail"] == f"'{op}' method is not exposed"

        r = await client.get("/read-only-member")
        assert r.status_code == 200
        assert r.json() == []


@pytest.mark.asyncio
async def test_disabled_operation_fails_when_called_directly(make_app) -> None:
    app = make_app(ReadOnlyMemberResource)
    async with app.router.lifespan_context(app):
        async with app.state.sessionmaker() as session:
            resource = ReadOnlyMemberResource(session)
            with pytest.raises(MethodNotExposedError) as exc:
                await resource.delete(1)
            assert exc.value.operation == "delete"
            assert await resource.list() == []


@pytest.mark.asyncio
async def test_disabled_operations_are_left_out_of_openapi(serve_app) -> None:
    async with serve_app(ReadOnlyMemberResource) as client:
        paths = (await client.get("/openapi.json")).json()["paths"]
        assert set(paths["/read-only-member"]) == {"get"}
        assert set(paths["/read-only-member/{entity_id}"]) == {"get"}


@pytest.mark.asyncio
async def test_path_override(serve_app) -> None:
    async with serve_app(MemberController) as client:
        r = await client.post("/people", json={"name": "Ada"})
        assert r.status_code == 201
        assert r.headers["location"].startswith("http://test/people/")
        assert (await client.get("/member-controller")).status_code == 404
        assert (await client.get("/member")).status_code == 404


@pytest.mark.asyncio
async def test_unexposed_resource_mounts_nothing(serve_app) -> None:
    async with serve_app(HiddenMemberResource) as client:
        assert (await client.get("/hidden-member")).status_code == 404
        assert (await client.post("/hidden-member", json={})).status_code == 404


def test_unknown_operation_names_are_rejected() -> None:
    with pytest.raises(TypeError, match="unknown operations"):

        class _Broken(EntityResource):
            entity = Member
            methods = {"remove": MethodProperties(exposed=False)}


@pytest.mark.asyncio
async def test_disabled_reads_always_fail(serve_app) -> None:
    async with serve_app(NoReadMemberResource) as client:
        r = await client.post("/no-read-member", json={"name": "Ada"})
        assert r.status_code == 201
        member_id = r.json()["id"]

        cases = [
            ("/no-read-member", "list"),
            ("/no-read-member?sort=nickname&page=-1", "list"),
            (f"/no-read-member/{member_id}", "get"),
            ("/no-read-member/not-a-number", "get"),
        ]
        for url, op in cases:
            r = await client.get(url)
            assert r.status_code == 405
            assert r.json()["detail"] == f"'{op}' method is not exposed"

        assert (await client.delete(f"/no-read-member/{member_id}")).status_code == 204


def test_empty_path_override_is_rejected() -> None:
    for path in ("/", "", "//"):
        with pytest.raises(TypeError, match="must name a path segment"):

            class _Rootless(EntityResource):
                entity = Member
                properties = ResourceProperties(path=path)


def test_serialize_without_entity_is_rejected() -> None:
    with pytest.raises(TypeError, match="declares no entity"):
        EntityResource.serialize(Member(name="Ada"))
