"""Regression tests for RequestBodyLimitMiddleware."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from formshape.api.app import create_app
from formshape.settings import Settings


@pytest.fixture
def app():
    return create_app(settings=Settings(max_body_bytes=256))


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def _big_tree(fields: int) -> dict:
    return {
        "errors": {
            f"field{i}": [{"kind": "required", "message": "This field is required"}]
            for i in range(fields)
        }
    }


class TestContentLength:
    async def test_over_limit(self, client: AsyncClient) -> None:
        response = await client.post("/flatten", json=_big_tree(20))
        assert response.status_code == 413
        assert "256 bytes" in response.json()["detail"]

    async def test_under_limit(self, client: AsyncClient) -> None:
        response = await client.post("/flatten", json=_big_tree(1))
        assert response.status_code == 200

    async def test_non_integer_content_length(self, client: AsyncClient) -> None:
        """Invalid Content-Length falls through to streaming, not 500."""
        response = await client.post(
            "/mirror",
            content=b"{}",
            headers={"content-length": "not-a-number", "content-type": "application/json"},
        )
        assert response.status_code != 500


class TestChunkedOverLimit:
    async def test_chunked_body_over_limit(self, client: AsyncClient) -> None:
        """Body exceeding the limit without a Content-Length header is still rejected."""

        async def body():
            for _ in range(10):
                yield b"x" * 64

        response = await client.post("/mirror", content=body())
        assert response.status_code == 413
