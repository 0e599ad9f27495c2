"""Tests for exception handlers."""

import json

import pytest
from unittest.mock import Mock
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from folder_store.errors.handlers import (
    problem_detail_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler,
    register_exception_handlers
)
from folder_store.errors.problem_details import (
    ProblemDetailException,
    PaginationError
)


class TestExceptionHandlers:
    """Test exception handlers."""

    @pytest.fixture
    def mock_request(self):
        """Create mock request."""
        request = Mock(spec=Request)
        request.url.path = "/test/path"
        request.method = "GET"
        return request

    @pytest.mark.asyncio
    async def test_problem_detail_exception_handler(self, mock_request):
        """Test ProblemDetailException handler."""
        exc = PaginationError("Pagination error: Invalid page token")

        response = await problem_detail_exception_handler(mock_request, exc)

        assert response.status_code == 400
        assert response.headers["Content-Type"] == "application/problem+json"
        assert json.loads(response.body)["instance"] == "/test/path"

    @pytest.mark.asyncio
    async def test_http_exception_handler_fastapi(self, mock_request):
        """Test FastAPI HTTPException handler."""
        exc = HTTPException(status_code=404, detail="Not found", headers={"X-Test": "1"})

        response = await http_exception_handler(mock_request, exc)

        assert response.status_code == 404
        assert response.headers["X-Test"] == "1"
        assert json.loads(response.body)["title"] == "Not Found"

    @pytest.mark.asyncio
    async def test_http_exception_handler_unknown_status(self, mock_request):
        """Test an unmapped status gets a generic title."""
        exc = StarletteHTTPException(status_code=418, detail="Teapot")

        response = await http_exception_handler(mock_request, exc)

        assert response.status_code == 418
        assert json.loads(response.body)["title"] == "HTTP Error"

    @pytest.mark.asyncio
    async def test_validation_exception_handler(self, mock_request):
        """Test request validation handler."""
        exc = RequestValidationError([
            {"loc": ("path", "org_id"), "msg": "Input should be a valid UUID", "type": "uuid_parsing"}
        ])

        response = await validation_exception_handler(mock_request, exc)

        body = json.loads(response.body)
        assert response.status_code == 422
        assert body["detail"] == "Validation failed: path -> org_id: Input should be a valid UUID"

    @pytest.mark.asyncio
    async def test_general_exception_handler(self, mock_request):
        """Test unexpected exceptions are hidden."""
        response = await general_exception_handler(mock_request, RuntimeError("secret"))

        body = json.loads(response.body)
        assert response.status_code == 500
        assert "secret" not in body["detail"]

    def test_register_exception_handlers(self):
        """Test handlers are registered on the app."""
        app = FastAPI()

        register_exception_handlers(app)

        assert app.exception_handlers[ProblemDetailException] is problem_detail_exception_handler
        assert app.exception_handlers[RequestValidationError] is validation_exception_handler
        assert app.exception_handlers[Exception] is general_exception_handler
