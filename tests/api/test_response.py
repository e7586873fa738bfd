"""Tests for the response envelope (api/response.py)."""

from datetime import timedelta

import pytest

from api.errors import ApiError, InvalidJson, MigrateToChatId, RequestError, RetryAfter
from api.response import ApiResponse, parse_response


class TestIntoResult:
    """Tests for ApiResponse.into_result."""

    def test_ok(self):
        assert parse_response(b'{"ok": true, "result": 42}').into_result() == 42

    def test_ok_without_result(self):
        assert ApiResponse(ok=True).into_result() is None

    def test_api_error(self):
        response = parse_response(
            '{"ok": false, "error_code": 400, "description": "Bad Request: chat not found"}'
        )
        with pytest.raises(ApiError) as exc_info:
            response.into_result()
        assert exc_info.value.error_code == 400
        assert exc_info.value.description == "Bad Request: chat not found"
        assert str(exc_info.value) == "[400] Bad Request: chat not found"

    def test_retry_after(self):
        response = parse_response(
            '{"ok": false, "error_code": 429, "description": "Too Many Requests",'
            ' "parameters": {"retry_after": 17}}'
        )
        with pytest.raises(RetryAfter) as exc_info:
            response.into_result()
        assert exc_info.value.seconds == timedelta(seconds=17)

    def test_migrate_to_chat_id(self):
        response = parse_response(
            '{"ok": false, "error_code": 400, "description": "Bad Request: group chat was upgraded",'
            ' "parameters": {"migrate_to_chat_id": -1001555296434}}'
        )
        with pytest.raises(MigrateToChatId) as exc_info:
            response.into_result()
        assert exc_info.value.chat_id == -1001555296434

    def test_all_errors_are_request_errors(self):
        for cls in (ApiError, RetryAfter, MigrateToChatId, InvalidJson):
            assert issubclass(cls, RequestError)


class TestParseResponse:
    """Tests for parse_response."""

    def test_invalid_json(self):
        with pytest.raises(InvalidJson) as exc_info:
            parse_response(b"<html>502 Bad Gateway</html>")
        assert exc_info.value.raw == b"<html>502 Bad Gateway</html>"

    def test_missing_ok(self):
        with pytest.raises(InvalidJson):
            parse_response(b'{"result": 1}')
