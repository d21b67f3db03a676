"""Integration tests for the FastAPI REST API."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from formshape.api.app import create_app
from formshape.settings import Settings
from tests.conftest import leaf


@pytest.fixture
def app():
    return create_app(settings=Settings(max_depth=8))


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


NESTED_TREE = {
    "user": {"profile": {"email": [leaf("email", "Invalid email")]}},
    "tags": {"$array": [], "$items": {"1": [leaf("isEmpty", "Cannot be empty")]}},
}


# ---------------------------------------------------------------------------
# Health & Binders
# ---------------------------------------------------------------------------


class TestHealthEndpoint:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data

    async def test_timing_header(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert "x-request-duration-ms" in response.headers


class TestBindersEndpoint:
    async def test_list_binders(self, client: AsyncClient) -> None:
        response = await client.get("/binders")
        assert response.status_code == 200
        binders = {b["name"]: b["transform"] for b in response.json()["binders"]}
        assert binders["rhf"] == "flatten"
        assert binders["formik"] == "mirror"
        assert binders["veevalidate"] == "flatten"
        assert len(binders) == 6


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


class TestFlattenEndpoint:
    async def test_flatten(self, client: AsyncClient) -> None:
        response = await client.post("/flatten", json={"errors": NESTED_TREE})
        assert response.status_code == 200
        assert response.json()["errors"] == {
            "user.profile.email": {"kind": "email", "message": "Invalid email"},
            "tags.1": {"kind": "isEmpty", "message": "Cannot be empty"},
        }

    async def test_flatten_messages(self, client: AsyncClient) -> None:
        response = await client.post("/flatten/messages", json={"errors": NESTED_TREE})
        assert response.status_code == 200
        assert response.json()["errors"] == {
            "user.profile.email": "Invalid email",
            "tags.1": "Cannot be empty",
        }

    async def test_null_tree(self, client: AsyncClient) -> None:
        response = await client.post("/flatten", json={"errors": None})
        assert response.status_code == 200
        assert response.json()["errors"] == {}

    async def test_missing_errors_field(self, client: AsyncClient) -> None:
        response = await client.post("/flatten/messages", json={})
        assert response.status_code == 200
        assert response.json()["errors"] == {}


class TestMirrorEndpoint:
    async def test_mirror(self, client: AsyncClient) -> None:
        response = await client.post("/mirror", json={"errors": NESTED_TREE})
        assert response.status_code == 200
        assert response.json()["errors"] == {
            "user": {"profile": {"email": "Invalid email"}},
            "tags": {"items": {"1": "Cannot be empty"}},
        }

    async def test_root_leaf_group(self, client: AsyncClient) -> None:
        response = await client.post(
            "/mirror", json={"errors": [leaf("required", "Required")]}
        )
        assert response.status_code == 200
        assert response.json()["errors"] == "Required"

    async def test_null_tree(self, client: AsyncClient) -> None:
        response = await client.post("/mirror", json={"errors": None})
        assert response.json()["errors"] == {}


class TestRejectedTrees:
    async def test_too_deep(self, client: AsyncClient) -> None:
        tree: dict = {"leaf": [leaf("required", "Required")]}
        for i in range(10):
            tree = {f"level{i}": tree}
        response = await client.post("/flatten", json={"errors": tree})
        assert response.status_code == 422
        assert "maximum depth" in response.json()["detail"]

    async def test_bad_array_marker(self, client: AsyncClient) -> None:
        response = await client.post("/mirror", json={"errors": {"tags": {"$array": 5}}})
        assert response.status_code == 422

    async def test_invalid_json_body(self, client: AsyncClient) -> None:
        response = await client.post(
            "/flatten", content=b"not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 422
