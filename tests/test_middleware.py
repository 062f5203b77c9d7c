"""
Tests for request context, error mapping and sanitization.
"""
import json

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request
from starlette.responses import Response

from storefront.core.error_handler import (
    ErrorSanitizationMiddleware,
    sanitize_error_message,
    storefront_error_handler,
)
from storefront.core.exceptions import DataIntegrityError, InvalidRequestError, NotFoundError, StorefrontError
from storefront.middleware.request_context import RequestContextMiddleware


@pytest.mark.asyncio
async def test_request_context_middleware_adds_headers_and_state():
    middleware = RequestContextMiddleware(app=None)

    async def _call_next(request: Request) -> Response:
        assert hasattr(request.state, "request_id")
        assert hasattr(request.state, "started_at")
        return Response("ok")

    scope = {"type": "http", "method": "GET", "path": "/", "headers": []}
    request = Request(scope)

    response = await middleware.dispatch(request, _call_next)

    assert response.status_code == 200
    assert "x-storefront-request-id" in response.headers
    assert "x-storefront-request-duration" in response.headers


class TestErrorMapping:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc, status_code, code",
        [
            (NotFoundError("Product", 3), 404, "NOT_FOUND"),
            (InvalidRequestError("quantity must be at least 1", field="quantity"), 400, "INVALID_REQUEST"),
            (DataIntegrityError("dangling product", entity="Cart item", entity_id=1), 409, "DATA_INTEGRITY"),
        ],
    )
    async def test_status_codes(self, exc, status_code, code):
        request = Request({"type": "http", "method": "GET", "path": "/api/x", "headers": []})

        response = await storefront_error_handler(request, exc)
        body = json.loads(response.body)

        assert response.status_code == status_code
        assert body["error"] == code
        assert body["message"] == exc.message

    def test_not_found_details(self):
        exc = NotFoundError("Order", 12)
        assert exc.to_dict() == {
            "error": "NOT_FOUND",
            "message": "Order not found",
            "details": {"entity": "Order", "id": 12},
        }

    def test_sensitive_messages_are_masked(self):
        assert "sqlalchemy" not in sanitize_error_message("sqlalchemy.exc.OperationalError: boom").lower()
        assert sanitize_error_message("Product not found") == "Product not found"
        assert sanitize_error_message("x" * 300).endswith("...")

    @pytest.mark.asyncio
    async def test_domain_messages_are_not_masked(self):
        request = Request({"type": "http", "method": "POST", "path": "/api/collections", "headers": []})
        exc = InvalidRequestError("Collection slug already in use: secret-drop", field="slug")

        body = json.loads((await storefront_error_handler(request, exc)).body)

        assert body["message"] == "Collection slug already in use: secret-drop"

    @pytest.mark.asyncio
    async def test_server_side_storefront_errors_are_masked(self):
        request = Request({"type": "http", "method": "GET", "path": "/api/x", "headers": []})
        exc = StorefrontError("sqlite3.OperationalError: database is locked")

        response = await storefront_error_handler(request, exc)

        assert response.status_code == 500
        assert "sqlite" not in json.loads(response.body)["message"].lower()


@pytest.mark.asyncio
async def test_unhandled_exceptions_become_sanitized_500():
    app = FastAPI()
    app.add_middleware(ErrorSanitizationMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("password=hunter2 leaked")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "internal_error"
    assert "hunter2" not in body["message"]
    assert "error_id" in body
