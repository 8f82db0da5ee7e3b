"""
Application errors raised deliberately by business logic.

A single exception type tagged with an ErrorKind. The kind fixes the
HTTP status; code and description are attached by the raiser.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of application error kinds, valued by HTTP status."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    INTERNAL_SERVER_ERROR = 500

    @property
    def status_code(self) -> int:
        return self.value


class ApplicationError(Exception):
    """Error raised by business logic with an explicit kind.

    Attributes:
        kind: The error kind, which determines the HTTP status.
        code: Optional machine-readable identifier (e.g. "INVALID_QUERY").
        description: Optional human-readable explanation.

    Example:
        >>> raise ApplicationError.bad_request().with_code(
        ...     "INVALID_QUERY"
        ... ).with_description("Query param was invalid")
    """

    def __init__(
        self,
        kind: ErrorKind,
        description: str | None = None,
        code: str | None = None,
    ) -> None:
        self.kind = kind
        self.code = code
        self.description = description
        super().__init__(description or kind.name)

    @classmethod
    def bad_request(cls, description: str | None = None) -> "ApplicationError":
        return cls(ErrorKind.BAD_REQUEST, description)

    @classmethod
    def unauthorized(cls, description: str | None = None) -> "ApplicationError":
        return cls(ErrorKind.UNAUTHORIZED, description)

    @classmethod
    def forbidden(cls, description: str | None = None) -> "ApplicationError":
        return cls(ErrorKind.FORBIDDEN, description)

    @classmethod
    def internal_server_error(
        cls, description: str | None = None
    ) -> "ApplicationError":
        return cls(ErrorKind.INTERNAL_SERVER_ERROR, description)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def with_code(self, code: str) -> "ApplicationError":
        """Attach a machine-readable code. Last call wins."""
        self.code = code
        return self

    def with_description(self, description: str) -> "ApplicationError":
        """Attach a human-readable description. Last call wins."""
        self.description = description
        self.args = (description,)
        return self

    def __repr__(self) -> str:
        return (
            f"ApplicationError(kind={self.kind.name}, code={self.code!r}, "
            f"description={self.description!r})"
        )
