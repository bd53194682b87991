"""
Unit tests for exception handlers.

Tests:
- AppException subclasses map to their status codes and error envelope
- Request validation errors map to 422 VALIDATION_ERROR
- Unexpected exceptions map to a generic 500
- Log level follows the status code
"""

import json
import uuid
from unittest.mock import MagicMock

import pytest
from fastapi.exceptions import RequestValidationError

from src.core import handlers
from src.core.handlers import (
    app_exception_handler,
    general_exception_handler,
    validation_exception_handler,
)
from src.exceptions import (
    AccountBlockedError,
    InvalidInputError,
    NotFoundError,
    PersistenceError,
)


@pytest.fixture
def mock_request():
    request = MagicMock()
    request.state.request_id = "req-123"
    return request


@pytest.mark.asyncio
class TestExceptionHandlers:
    """Test suite for exception handlers."""

    async def test_not_found(self, mock_request):
        response = await app_exception_handler(mock_request, NotFoundError("Account"))

        body = json.loads(response.body)
        assert response.status_code == 404
        assert body["error"]["code"] == "NOT_FOUND"
        assert body["error"]["message"] == "Account not found"
        assert body["meta"]["request_id"] == "req-123"

    async def test_account_blocked(self, mock_request):
        account_id = uuid.uuid4()

        response = await app_exception_handler(
            mock_request, AccountBlockedError(account_id)
        )

        body = json.loads(response.body)
        assert response.status_code == 409
        assert body["error"]["code"] == "ACCOUNT_BLOCKED"
        assert body["error"]["details"] == {"account_id": str(account_id)}

    async def test_invalid_input(self, mock_request):
        response = await app_exception_handler(
            mock_request,
            InvalidInputError(field="amount", message="Amount must not be negative"),
        )

        body = json.loads(response.body)
        assert response.status_code == 422
        assert body["error"]["code"] == "INVALID_INPUT"

    async def test_persistence_error(self, mock_request):
        response = await app_exception_handler(mock_request, PersistenceError())

        body = json.loads(response.body)
        assert response.status_code == 500
        assert body["error"]["code"] == "PERSISTENCE_ERROR"

    async def test_client_errors_logged_at_info(self, mock_request, monkeypatch):
        mock_logger = MagicMock()
        monkeypatch.setattr(handlers, "logger", mock_logger)

        await app_exception_handler(mock_request, NotFoundError("Account"))

        mock_logger.info.assert_called_once()
        mock_logger.error.assert_not_called()

    async def test_server_errors_logged_at_error(self, mock_request, monkeypatch):
        mock_logger = MagicMock()
        monkeypatch.setattr(handlers, "logger", mock_logger)

        await app_exception_handler(mock_request, PersistenceError())

        mock_logger.error.assert_called_once()
        mock_logger.info.assert_not_called()

    async def test_validation_error(self, mock_request):
        exc = RequestValidationError(
            [
                {
                    "loc": ("body", "amount"),
                    "msg": "Input should be a valid decimal",
                    "type": "decimal_parsing",
                }
            ]
        )

        response = await validation_exception_handler(mock_request, exc)

        body = json.loads(response.body)
        assert response.status_code == 422
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"] == [
            {
                "field": "body.amount",
                "message": "Input should be a valid decimal",
                "type": "decimal_parsing",
            }
        ]

    async def test_general_exception_hides_details(self, mock_request, monkeypatch):
        from src.core.config import settings

        monkeypatch.setattr(settings, "debug", False)

        response = await general_exception_handler(
            mock_request, RuntimeError("connection string leaked")
        )

        body = json.loads(response.body)
        assert response.status_code == 500
        assert body["error"]["code"] == "INTERNAL_ERROR"
        assert "leaked" not in body["error"]["message"]
