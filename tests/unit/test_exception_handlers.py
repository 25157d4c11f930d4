"""
Unit tests for exception handlers.

Tests error response formatting and status code mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mockapi.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.method = "GET"
    request.url.path = "/posts/101"
    return request


# ===========================
# HTTP Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_http_exception_handler_404(request_mock):
    """Test HTTP exception handler with 404 not found."""
    exc = HTTPException(status_code=404, detail="Post 101 not found")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 404
    body = json.loads(response.body)
    assert body["title"] == "Not Found"
    assert body["detail"] == "Post 101 not found"
    assert body["instance"] == "/posts/101"


@pytest.mark.asyncio
async def test_http_exception_handler_405_becomes_404(request_mock):
    """Test router's method-not-allowed is folded into not found."""
    exc = StarletteHTTPException(status_code=405, headers={"Allow": "GET"})

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 404
    assert "allow" not in response.headers
    body = json.loads(response.body)
    assert body["status"] == 404
    assert body["detail"] == "Not Found"


@pytest.mark.asyncio
async def test_http_exception_handler_keeps_headers(request_mock):
    """Test exception headers are passed through."""
    exc = HTTPException(status_code=400, detail="Bad", headers={"X-Reason": "test"})

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 400
    assert response.headers["X-Reason"] == "test"


# ===========================
# General Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_general_exception_handler_hides_message(request_mock):
    """Test unexpected errors do not leak their message."""
    response = await general_exception_handler(
        request_mock, RuntimeError("secret internals")
    )

    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["title"] == "Internal Server Error"
    assert "secret" not in body["detail"]


# ===========================
# Validation Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_validation_exception_handler_empty(request_mock):
    """Test validation exception handler without errors is still a 422."""
    exc = RequestValidationError(errors=[])

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_validation_exception_handler_json_invalid(request_mock):
    """Test JSON decode errors become 400."""
    exc = RequestValidationError(
        errors=[
            {
                "type": "json_invalid",
                "loc": ("body", 8),
                "msg": "JSON decode error",
                "input": {},
                "ctx": {"error": "Unterminated string starting at"},
            }
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["title"] == "Bad Request"
    assert "errors" not in body


@pytest.mark.asyncio
async def test_validation_exception_handler_field_errors(request_mock):
    """Test field errors are listed in the response."""
    exc = RequestValidationError(
        errors=[
            {
                "type": "missing",
                "loc": ("body", "email"),
                "msg": "Field required",
                "input": {"id": 0},
            },
            {
                "type": "less_than_equal",
                "loc": ("body", "id"),
                "msg": "Input should be less than or equal to 2147483647",
                "input": 2147483648,
                "ctx": {"le": 2147483647},
            },
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 422
    body = json.loads(response.body)
    assert len(body["errors"]) == 2
    assert body["errors"][0]["loc"] == ["body", "email"]
    assert body["errors"][1]["ctx"] == {"le": "2147483647"}


@pytest.mark.asyncio
async def test_validation_exception_handler_bytes_input(request_mock):
    """Test raw byte inputs are rendered as text."""
    exc = RequestValidationError(
        errors=[
            {
                "type": "model_attributes_type",
                "loc": ("body",),
                "msg": "Input should be a valid dictionary or object",
                "input": b"plain text",
            }
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    body = json.loads(response.body)
    assert body["errors"][0]["input"] == "plain text"


@pytest.mark.asyncio
async def test_validation_exception_handler_empty_body(request_mock):
    """Test a missing body (empty request) becomes 400."""
    exc = RequestValidationError(
        errors=[
            {"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_validation_exception_handler_missing_field_stays_422(request_mock):
    """Test a missing field inside the body is still a validation error."""
    exc = RequestValidationError(
        errors=[
            {"type": "missing", "loc": ("body", "title"), "msg": "Field required", "input": {}}
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 422
