"""
Unit tests for users_api.api.errors (application error -> HTTP mapping).
"""
import json
import logging

import pytest
from starlette.requests import Request

from users_api.api.errors import (
    DATABASE_ERROR_MESSAGE,
    ERROR_STATUS,
    NOT_FOUND_MESSAGE,
    app_error_handler,
    to_http_error,
)
from users_api.application.errors import AppError, AppErrorKind
from users_api.domain.exceptions import InvalidEmailError, RepositoryError


def _request() -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/api/users",
        "query_string": b"",
        "headers": [],
    })


class TestToHttpError:
    """Tests for to_http_error"""

    def test_every_kind_has_one_distinct_mapping(self):
        assert set(ERROR_STATUS) == set(AppErrorKind)
        statuses = [status_code for status_code, _ in ERROR_STATUS.values()]
        codes = [code for _, code in ERROR_STATUS.values()]
        assert len(set(statuses)) == 3
        assert len(set(codes)) == 3

    def test_domain_error_keeps_specific_message(self):
        error = AppError.domain(InvalidEmailError())
        assert to_http_error(error) == (400, "VALIDATION_ERROR", "Invalid email format")

    def test_database_error_hides_engine_detail(self):
        error = AppError.database(RepositoryError("connection to 10.0.0.5 refused"))
        status_code, code, message = to_http_error(error)
        assert status_code == 500
        assert code == "DATABASE_ERROR"
        assert message == DATABASE_ERROR_MESSAGE
        assert "10.0.0.5" not in message

    def test_not_found(self):
        assert to_http_error(AppError.not_found()) == (404, "NOT_FOUND", NOT_FOUND_MESSAGE)


class TestAppErrorHandler:
    """Tests for app_error_handler envelope rendering"""

    @pytest.mark.asyncio
    async def test_envelope_shape(self):
        response = await app_error_handler(_request(), AppError.not_found())
        assert response.status_code == 404
        assert json.loads(response.body) == {
            "error": {"code": "NOT_FOUND", "message": NOT_FOUND_MESSAGE}
        }

    @pytest.mark.asyncio
    async def test_database_envelope(self):
        error = AppError.database(RepositoryError("User save failed"))
        response = await app_error_handler(_request(), error)
        body = json.loads(response.body)
        assert response.status_code == 500
        assert body["error"]["code"] == "DATABASE_ERROR"
        assert body["error"]["message"] == DATABASE_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_handler_does_not_log_again(self, caplog):
        error = AppError.database(RepositoryError("User save failed"))
        with caplog.at_level(logging.DEBUG, logger="users_api.api.errors"):
            await app_error_handler(_request(), error)
        assert [r for r in caplog.records if r.name == "users_api.api.errors"] == []
