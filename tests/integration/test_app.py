"""
Integration tests for application-level routes and the OpenAPI document.
"""

import pytest


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert resp.json()["docs"] == "/swagger"


@pytest.mark.asyncio
async def test_openapi_document(client):
    resp = await client.get("/openapi.json")

    assert resp.status_code == 200
    schema = resp.json()
    assert schema["info"]["license"]["name"] == "MIT"
    assert "/organization" in schema["paths"]
    assert "/organization/{org}/user/{user}" in schema["paths"]
    assert "/organization/{org}/tag/{tag}" in schema["paths"]
    assert "/user/types" in schema["paths"]


@pytest.mark.asyncio
async def test_swagger_ui(client):
    resp = await client.get("/swagger")

    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


@pytest.mark.asyncio
async def test_unknown_route(client):
    resp = await client.get("/nope")

    assert resp.status_code == 404
