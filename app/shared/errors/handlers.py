"""
Centralized error handlers for FastAPI.

Every failure reaching the application boundary is routed through one
handler: framework exceptions are first translated into conditions, then
the dispatcher picks the single matching rule.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import ApplicationError
from app.shared.errors.conditions import FrameworkCondition
from app.shared.errors.dispatcher import ErrorDispatcher
from app.shared.errors.translation import translate_framework_error

HANDLED_EXCEPTIONS: tuple[type[Exception], ...] = (
    ApplicationError,
    FrameworkCondition,
    StarletteHTTPException,
    RequestValidationError,
    httpx.HTTPError,
    Exception,
)


def request_url(request: Request) -> str:
    """Return the request URL without its query string."""
    return str(request.url.replace(query=""))


def register_error_handlers(
    app: FastAPI, dispatcher: ErrorDispatcher | None = None
) -> ErrorDispatcher:
    """Register the error translation handler on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        dispatcher: Dispatcher to use. A default one logging to
            ``app.shared.errors`` is created when omitted.

    Returns:
        The dispatcher in use, also stored on ``app.state.error_dispatcher``.
    """
    if dispatcher is None:
        dispatcher = ErrorDispatcher(logger=logging.getLogger("app.shared.errors"))
    app.state.error_dispatcher = dispatcher

    async def handle_error(request: Request, exc: Exception) -> JSONResponse:
        """Translate any failure into a single JSON error response."""
        failure = translate_framework_error(request, exc)
        result = dispatcher.dispatch(failure, request_url(request))
        return JSONResponse(
            status_code=result.status_code,
            content=result.content(),
            headers=result.headers or None,
        )

    for exc_class in HANDLED_EXCEPTIONS:
        app.add_exception_handler(exc_class, handle_error)

    return dispatcher
