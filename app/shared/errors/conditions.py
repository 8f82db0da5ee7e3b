"""
Framework conditions.

Failures detected by the request-handling layer before or independent of
application logic: wrong method, unsupported media type, unreadable body,
invalid fields and unusable parameters. Each carries the diagnostic data
produced by the layer that detected it.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence


class FrameworkCondition(Exception):
    """Base class for request-handling layer conditions."""


class MethodNotAllowed(FrameworkCondition):
    """The route exists but does not accept the request method."""

    def __init__(self, message: str, allowed: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.allowed = tuple(allowed)


class UnsupportedMediaType(FrameworkCondition):
    """The request body declares a content type the route cannot consume."""

    def __init__(self, message: str, content_type: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.content_type = content_type


class UnreadableBody(FrameworkCondition):
    """The request body could not be parsed at all."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "Unreadable request body")
        self.detail = detail


@dataclass(frozen=True)
class FieldError:
    """A single invalid body field and the validator's message."""

    field: str
    message: str


class InvalidFields(FrameworkCondition):
    """One or more body fields failed validation, in evaluation order."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors = tuple(errors)
        super().__init__(f"{len(self.errors)} invalid field(s)")


class ParameterTypeMismatch(FrameworkCondition):
    """A request parameter value could not be converted to its declared type."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(f"Invalid value for parameter {name}")
        self.name = name
        self.value = value


class UnmetParameterConditions(FrameworkCondition):
    """Parameters the route requires were not supplied."""

    def __init__(self, conditions: Iterable[str]) -> None:
        self.conditions = tuple(conditions)
        super().__init__(", ".join(self.conditions))


class RouteNotFound(FrameworkCondition):
    """No route matches the request path."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"{method} {path}")
        self.method = method
        self.path = path


class NotAuthenticated(FrameworkCondition):
    """A security dependency found no usable credentials."""

    def __init__(self, message: str, challenge: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.challenge = challenge


class AccessDenied(FrameworkCondition):
    """A security dependency rejected the supplied credentials."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
