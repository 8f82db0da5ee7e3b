"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that application errors, framework
conditions and downstream failures are consistently translated into
API responses.
"""

from app.shared.errors.dispatcher import DispatchResult, ErrorDispatcher
from app.shared.errors.handlers import register_error_handlers
from app.shared.errors.response import (
    GENERIC_DESCRIPTION,
    ErrorResponse,
    build_error_response,
)

__all__ = [
    "GENERIC_DESCRIPTION",
    "DispatchResult",
    "ErrorDispatcher",
    "ErrorResponse",
    "build_error_response",
    "register_error_handlers",
]
