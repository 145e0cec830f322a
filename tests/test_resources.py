import pytest

from tokengate.core.init_db import ADVANTAGES, CONTACTS, PROJECTS

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def auth_headers(client):
    response = await client.post("/api/v1/auth/register", json={
        "username": "reader",
        "password": "pass1234",
        "phone": "+1-555-0150",
    })
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.mark.parametrize("path,seed", [
    ("/api/v1/contacts/", CONTACTS),
    ("/api/v1/advantages/", ADVANTAGES),
    ("/api/v1/projects/", PROJECTS),
])
async def test_list_seeded_resources(client, auth_headers, path, seed):
    response = await client.get(path, headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == len(seed)
    assert data["page"] == 1
    assert len(data["items"]) == len(seed)


@pytest.mark.parametrize("path", ["/api/v1/contacts/", "/api/v1/advantages/", "/api/v1/projects/"])
async def test_resources_require_token(client, path):
    response = await client.get(path)
    assert response.status_code == 401


async def test_resources_reject_invalid_token(client):
    response = await client.get("/api/v1/projects/", headers={"Authorization": "Bearer broken"})
    assert response.status_code == 403


async def test_list_pagination(client, auth_headers):
    response = await client.get("/api/v1/contacts/", params={"page": 2, "size": 2}, headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["pages"] == 2
    assert len(data["items"]) == 1
    assert data["items"][0]["name"] == CONTACTS[2]["name"]


async def test_get_contact(client, auth_headers):
    response = await client.get("/api/v1/contacts/1", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == CONTACTS[0]["email"]


async def test_get_missing_project(client, auth_headers):
    response = await client.get("/api/v1/projects/999", headers=auth_headers)
    assert response.status_code == 404


async def test_create_advantage(client, auth_headers):
    response = await client.post("/api/v1/advantages/", headers=auth_headers, json={
        "title": "Readable errors",
        "description": "Every failure returns a detail message.",
    })
    assert response.status_code == 201
    created = response.json()
    assert created["title"] == "Readable errors"

    fetched = await client.get(f"/api/v1/advantages/{created['id']}", headers=auth_headers)
    assert fetched.status_code == 200


async def test_create_project_invalid(client, auth_headers):
    response = await client.post("/api/v1/projects/", headers=auth_headers, json={"description": "no title"})
    assert response.status_code == 400


async def test_create_requires_token(client):
    response = await client.post("/api/v1/contacts/", json={
        "name": "Anon", "email": "anon@acme-corp.com", "phone": "1",
    })
    assert response.status_code == 401
