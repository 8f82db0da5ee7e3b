"""
Translate Starlette/FastAPI exceptions into framework conditions.

The router and request validation raise their own exception types. These
are converted here into FrameworkCondition variants so the dispatcher only
deals with one vocabulary. Anything not recognized passes through unchanged.
"""

from typing import Any, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

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

PARAMETER_LOCATIONS = frozenset({"query", "path", "header", "cookie"})


def translate_framework_error(request: Request, exc: BaseException) -> BaseException:
    """Return the framework condition equivalent to ``exc``, or ``exc`` itself."""
    if isinstance(exc, StarletteHTTPException):
        return _translate_http_exception(request, exc)
    if isinstance(exc, RequestValidationError):
        return _translate_validation_error(exc.errors())
    return exc


def _translate_http_exception(
    request: Request, exc: StarletteHTTPException
) -> BaseException:
    if exc.status_code == 400:
        return UnreadableBody(detail=str(exc.detail))
    if exc.status_code == 401:
        return NotAuthenticated(
            str(exc.detail),
            challenge=(exc.headers or {}).get("WWW-Authenticate"),
        )
    if exc.status_code == 403:
        return AccessDenied(str(exc.detail))
    if exc.status_code == 405:
        allowed = (exc.headers or {}).get("Allow", "")
        return MethodNotAllowed(
            f"Request method '{request.method}' not supported",
            allowed=[method.strip() for method in allowed.split(",") if method.strip()],
        )
    if exc.status_code == 404:
        return RouteNotFound(request.method, request.url.path)
    if exc.status_code == 415:
        return UnsupportedMediaType(
            str(exc.detail), content_type=request.headers.get("content-type")
        )
    return exc


def _translate_validation_error(errors: Sequence[dict[str, Any]]) -> BaseException:
    unreadable = [error for error in errors if _is_unreadable(error)]
    if unreadable:
        return UnreadableBody(detail=str(unreadable[0].get("msg", "")))

    parameter_errors = [
        error for error in errors if _location(error) in PARAMETER_LOCATIONS
    ]
    missing = [
        _parameter_name(error)
        for error in parameter_errors
        if error.get("type") == "missing"
    ]
    if missing:
        return UnmetParameterConditions(missing)
    if parameter_errors:
        first = parameter_errors[0]
        return ParameterTypeMismatch(_parameter_name(first), first.get("input"))

    return InvalidFields(
        [
            FieldError(field=_field_path(error), message=str(error.get("msg", "")))
            for error in errors
        ]
    )


def _location(error: dict[str, Any]) -> str | None:
    loc = error.get("loc") or ()
    return str(loc[0]) if loc else None


def _is_unreadable(error: dict[str, Any]) -> bool:
    if error.get("type") == "json_invalid":
        return True
    return tuple(error.get("loc") or ()) == ("body",)


def _parameter_name(error: dict[str, Any]) -> str:
    loc = error.get("loc") or ()
    return str(loc[1]) if len(loc) > 1 else str(loc[0])


def _field_path(error: dict[str, Any]) -> str:
    # Extract field path (e.g., ["body", "address", "city"] -> "address.city")
    parts = [str(part) for part in error.get("loc") or () if part != "body"]
    return ".".join(parts) if parts else "body"
