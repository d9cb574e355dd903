"""
Integration tests for the FastAPI application and GraphQL endpoint
"""

import pytest
from httpx import ASGITransport, AsyncClient

from campus.api.app import create_app
from campus.store import EntityStore


@pytest.fixture
def app(store: EntityStore):
    return create_app(store)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_query_over_http(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={
                "query": "query GetFaculty { faculty(email: \"admin@example.com\") { id name } }",
                "operationName": "GetFaculty",
            },
        )

    assert response.status_code == 200
    assert response.json() == {"data": {"faculty": {"id": "2", "name": "prof"}}}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_mutations_share_the_app_store(app, store: EntityStore):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        created = await client.post(
            "/graphql",
            json={"query": 'mutation { createCourse(name: "HTTP", faculty_id: "2") { id } }'},
        )
        listing = await client.post("/graphql", json={"query": "{ courses { name } }"})

    assert created.status_code == 200
    assert store.courses.all()[-1].name == "HTTP"
    assert {"name": "HTTP"} in listing.json()["data"]["courses"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_errors_are_reported_in_response(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={"query": 'mutation { deleteAssignment(assignmentID: "404") { id } }'},
        )

    body = response.json()
    assert body["data"] is None
    assert "assignmentID 404" in body["errors"][0]["message"]


def test_separate_apps_have_separate_stores():
    first = create_app(EntityStore.seeded())
    second = create_app(EntityStore())

    assert first.state.store is not second.state.store
    assert len(second.state.store.users) == 0
