"""
Tests for translating FastAPI/Starlette exceptions into framework conditions.
"""

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from app.shared.errors.conditions import (
    AccessDenied,
    FieldError,
    InvalidFields,
    MethodNotAllowed,
    NotAuthenticated,
    ParameterTypeMismatch,
    RouteNotFound,
    UnmetParameterConditions,
    UnreadableBody,
    UnsupportedMediaType,
)
from app.shared.errors.translation import translate_framework_error


def _request(method: str = "GET", path: str = "/test", content_type: str | None = None) -> Request:
    headers = []
    if content_type:
        headers.append((b"content-type", content_type.encode()))
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": headers,
            "scheme": "http",
            "server": ("localhost", 80),
        }
    )


class TestHttpExceptionTranslation:
    """Tests for router-level HTTP exceptions."""

    def test_method_not_allowed(self) -> None:
        exc = StarletteHTTPException(405, headers={"Allow": "GET, POST"})
        condition = translate_framework_error(_request("PUT"), exc)
        assert isinstance(condition, MethodNotAllowed)
        assert condition.message == "Request method 'PUT' not supported"
        assert condition.allowed == ("GET", "POST")

    def test_not_found(self) -> None:
        condition = translate_framework_error(
            _request("DELETE", "/nowhere"), StarletteHTTPException(404)
        )
        assert isinstance(condition, RouteNotFound)
        assert (condition.method, condition.path) == ("DELETE", "/nowhere")

    def test_unsupported_media_type(self) -> None:
        exc = StarletteHTTPException(415, detail="Content type 'text/plain' not supported")
        condition = translate_framework_error(_request(content_type="text/plain"), exc)
        assert isinstance(condition, UnsupportedMediaType)
        assert condition.message == "Content type 'text/plain' not supported"
        assert condition.content_type == "text/plain"

    def test_body_parse_failure(self) -> None:
        exc = StarletteHTTPException(400, detail="There was an error parsing the body")
        condition = translate_framework_error(_request("POST"), exc)
        assert isinstance(condition, UnreadableBody)
        assert condition.detail == "There was an error parsing the body"

    def test_not_authenticated_keeps_challenge(self) -> None:
        exc = StarletteHTTPException(
            401, detail="Not authenticated", headers={"WWW-Authenticate": "Bearer"}
        )
        condition = translate_framework_error(_request(), exc)
        assert isinstance(condition, NotAuthenticated)
        assert condition.message == "Not authenticated"
        assert condition.challenge == "Bearer"

    def test_access_denied(self) -> None:
        exc = StarletteHTTPException(403, detail="Invalid authentication credentials")
        condition = translate_framework_error(_request(), exc)
        assert isinstance(condition, AccessDenied)
        assert condition.message == "Invalid authentication credentials"

    def test_other_status_passes_through(self) -> None:
        exc = StarletteHTTPException(409, detail="conflict")
        assert translate_framework_error(_request(), exc) is exc


class TestValidationErrorTranslation:
    """Tests for RequestValidationError classification."""

    def test_json_invalid(self) -> None:
        exc = RequestValidationError(
            [{"type": "json_invalid", "loc": ("body", 0), "msg": "JSON decode error", "input": {}}]
        )
        assert isinstance(translate_framework_error(_request(), exc), UnreadableBody)

    def test_missing_body(self) -> None:
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
        )
        assert isinstance(translate_framework_error(_request(), exc), UnreadableBody)

    def test_missing_parameters(self) -> None:
        exc = RequestValidationError(
            [
                {"type": "missing", "loc": ("query", "param"), "msg": "Field required"},
                {"type": "missing", "loc": ("header", "x-token"), "msg": "Field required"},
            ]
        )
        condition = translate_framework_error(_request(), exc)
        assert isinstance(condition, UnmetParameterConditions)
        assert condition.conditions == ("param", "x-token")

    def test_parameter_type_mismatch(self) -> None:
        exc = RequestValidationError(
            [
                {"type": "int_parsing", "loc": ("query", "limit"), "msg": "bad", "input": "ten"},
                {"type": "int_parsing", "loc": ("query", "offset"), "msg": "bad", "input": "x"},
            ]
        )
        condition = translate_framework_error(_request(), exc)
        assert isinstance(condition, ParameterTypeMismatch)
        assert (condition.name, condition.value) == ("limit", "ten")

    def test_body_fields(self) -> None:
        exc = RequestValidationError(
            [
                {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
                {
                    "type": "string_too_short",
                    "loc": ("body", "address", "city"),
                    "msg": "String should have at least 1 character",
                },
            ]
        )
        condition = translate_framework_error(_request(), exc)
        assert isinstance(condition, InvalidFields)
        assert condition.errors == (
            FieldError("name", "Field required"),
            FieldError("address.city", "String should have at least 1 character"),
        )


class TestPassThrough:
    def test_unrelated_exception_unchanged(self) -> None:
        exc = ValueError("boom")
        assert translate_framework_error(_request(), exc) is exc
