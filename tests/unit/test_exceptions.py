"""Tests for error body formatting."""

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from src.fundtrack.core.exceptions import _describe_validation_error, setup_exception_handlers

pytestmark = pytest.mark.unit


class _Body(BaseModel):
    count: int


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.post("/items/{item_id}")
    async def create_item(item_id: int, body: _Body) -> dict:
        return {"item_id": item_id, "count": body.count}

    return app


def test_describe_validation_error_names_fields():
    exc = RequestValidationError(
        [
            {"loc": ("body", "count"), "msg": "Input should be a valid integer"},
            {"loc": ("path", "item_id"), "msg": "Field required"},
        ]
    )

    assert _describe_validation_error(exc) == (
        "count: Input should be a valid integer; path.item_id: Field required"
    )


async def test_validation_error_is_400_with_message(app: FastAPI):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post("/items/1", json={"count": "many"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"].startswith("count:")
    # No CorrelationIdMiddleware on this bare app
    assert body["request_id"] is None


async def test_path_parameter_error_is_400(app: FastAPI):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post("/items/abc", json={"count": 1})

    assert response.status_code == 400
    assert "item_id" in response.json()["message"]
