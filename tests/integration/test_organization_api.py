"""
Integration tests for the /organization routes.
"""

import uuid

import pytest


async def _create_org(client, **fields):
    payload = {"name": "Acme", "email": "a@acme.io", **fields}
    resp = await client.post("/organization", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


@pytest.mark.asyncio
async def test_create_organization(client):
    resp = await client.post("/organization", json={"name": "Acme", "email": "a@acme.io"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == 200
    assert body["errors"] is None
    data = body["data"]
    assert uuid.UUID(data["uuid"])
    assert data["name"] == "Acme"
    assert data["email"] == "a@acme.io"
    assert data["phone"] is None
    assert data["created_at"]


@pytest.mark.asyncio
async def test_create_organization_ignores_client_uuid(client):
    preset = str(uuid.uuid4())
    data = await _create_org(client, uuid=preset)

    assert data["uuid"] != preset


@pytest.mark.asyncio
async def test_create_organization_missing_name(client):
    resp = await client.post("/organization", json={"email": "a@acme.io"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] == 500
    assert body["data"] is None
    assert "name" in body["errors"][0]


@pytest.mark.asyncio
async def test_get_organization(client):
    created = await _create_org(client, phone="555")

    resp = await client.get(f"/organization/{created['uuid']}")

    assert resp.status_code == 200
    assert resp.json()["data"] == created


@pytest.mark.asyncio
async def test_get_organization_is_repeatable(client):
    created = await _create_org(client)

    first = await client.get(f"/organization/{created['uuid']}")
    second = await client.get(f"/organization/{created['uuid']}")

    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_get_organization_bad_uuid(client):
    resp = await client.get("/organization/not-a-uuid")

    assert resp.status_code == 404
    assert resp.json() == {"status": 404, "errors": ["record not found"], "data": None}


@pytest.mark.asyncio
async def test_get_organization_unknown(client):
    resp = await client.get(f"/organization/{uuid.uuid4()}")

    assert resp.status_code == 404
    assert resp.json()["errors"] == ["record not found"]


@pytest.mark.asyncio
async def test_list_organizations(client):
    await _create_org(client, name="Acme")
    await _create_org(client, name="Globex")

    resp = await client.get("/organization")
    assert resp.status_code == 200
    assert sorted(org["name"] for org in resp.json()["data"]) == ["Acme", "Globex"]

    resp = await client.get("/organization", params={"name": "Globex"})
    assert [org["name"] for org in resp.json()["data"]] == ["Globex"]


@pytest.mark.asyncio
async def test_list_organizations_empty(client):
    resp = await client.get("/organization")

    assert resp.status_code == 200
    assert resp.json() == {"status": 200, "errors": None, "data": []}


@pytest.mark.asyncio
async def test_update_organization_partial(client):
    created = await _create_org(client, phone="555")

    resp = await client.patch(f"/organization/{created['uuid']}", json={"name": "Acme Corp"})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Acme Corp"
    assert data["email"] == "a@acme.io"
    assert data["phone"] == "555"


@pytest.mark.asyncio
async def test_update_organization_clears_optional_field(client):
    created = await _create_org(client, phone="555")

    resp = await client.patch(f"/organization/{created['uuid']}", json={"phone": None})

    assert resp.status_code == 200
    assert resp.json()["data"]["phone"] is None


@pytest.mark.asyncio
async def test_update_organization_rejects_null_required_field(client):
    created = await _create_org(client)

    resp = await client.patch(f"/organization/{created['uuid']}", json={"name": None})

    assert resp.status_code == 400
    assert resp.json()["status"] == 400


@pytest.mark.asyncio
async def test_update_organization_bad_uuid_is_bind_error(client):
    resp = await client.patch("/organization/not-a-uuid", json={"name": "x"})

    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_update_organization_unknown(client):
    resp = await client.patch(f"/organization/{uuid.uuid4()}", json={"name": "x"})

    assert resp.status_code == 404
    assert resp.json()["data"] is None


@pytest.mark.asyncio
async def test_delete_organization(client):
    created = await _create_org(client)

    resp = await client.delete(f"/organization/{created['uuid']}")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = await client.get(f"/organization/{created['uuid']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_organization_unknown_is_204(client):
    resp = await client.delete(f"/organization/{uuid.uuid4()}")

    assert resp.status_code == 204
