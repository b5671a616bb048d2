"""
Integration tests for the /organization/{org}/tag routes.
"""

import uuid

import pytest


async def _create_org(client, name="Acme"):
    resp = await client.post("/organization", json={"name": name, "email": f"info@{name.lower()}.io"})
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]["uuid"]


async def _create_tag(client, org, **fields):
    payload = {"name": "math", "type": "subject", **fields}
    resp = await client.post(f"/organization/{org}/tag", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


@pytest.mark.asyncio
async def test_create_and_get_tag(client):
    org = await _create_org(client)

    tag = await _create_tag(client, org, description="Mathematics")
    resp = await client.get(f"/organization/{org}/tag/{tag['uuid']}")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data == tag
    assert data["org"] == org
    assert data["description"] == "Mathematics"


@pytest.mark.asyncio
async def test_create_tag_requires_type(client):
    org = await _create_org(client)

    resp = await client.post(f"/organization/{org}/tag", json={"name": "math"})

    assert resp.status_code == 500
    assert resp.json()["data"] is None


@pytest.mark.asyncio
async def test_list_tags_scoped_and_filtered(client):
    org = await _create_org(client)
    other = await _create_org(client, name="Globex")
    await _create_tag(client, org, name="math", type="subject")
    await _create_tag(client, org, name="blue", type="color")
    await _create_tag(client, other, name="art", type="subject")

    resp = await client.get(f"/organization/{org}/tag", params={"type": "subject"})

    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()["data"]] == ["math"]


@pytest.mark.asyncio
async def test_list_tags_bad_org_is_empty(client):
    resp = await client.get("/organization/not-a-uuid/tag")

    assert resp.status_code == 200
    assert resp.json()["data"] == []


@pytest.mark.asyncio
async def test_update_tag(client):
    org = await _create_org(client)
    tag = await _create_tag(client, org)

    resp = await client.patch(f"/organization/{org}/tag/{tag['uuid']}", json={"description": "Numbers"})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["description"] == "Numbers"
    assert data["name"] == "math"


@pytest.mark.asyncio
async def test_update_tag_invalid_json_is_400(client):
    org = await _create_org(client)
    tag = await _create_tag(client, org)

    resp = await client.patch(
        f"/organization/{org}/tag/{tag['uuid']}",
        content=b"{broken",
        headers={"content-type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json()["status"] == 400


@pytest.mark.asyncio
async def test_delete_tag_twice(client):
    org = await _create_org(client)
    tag = await _create_tag(client, org)

    first = await client.delete(f"/organization/{org}/tag/{tag['uuid']}")
    second = await client.delete(f"/organization/{org}/tag/{tag['uuid']}")

    assert first.status_code == 204
    assert second.status_code == 204


@pytest.mark.asyncio
async def test_delete_tag_unknown_id_is_204(client):
    org = await _create_org(client)

    resp = await client.delete(f"/organization/{org}/tag/{uuid.uuid4()}")

    assert resp.status_code == 204
