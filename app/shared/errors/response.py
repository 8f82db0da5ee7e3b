"""
Error response schema and builder.

Every handled failure produces exactly one ErrorResponse. The builder only
assembles the logical fields; JSON encoding is left to the response class.
"""

from pydantic import BaseModel, ConfigDict, Field

GENERIC_DESCRIPTION = "Sorry, something failed."


class ErrorResponse(BaseModel):
    """Client-facing error payload.

    Attributes:
        url: Full request URL as seen by the server.
        code: Optional machine-readable error code. Omitted when absent.
        description: Human-readable explanation. Never empty.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    code: str | None = None
    description: str = Field(..., min_length=1)

    def content(self) -> dict[str, str]:
        """Return the JSON-ready body with absent fields dropped."""
        return self.model_dump(exclude_none=True)


def build_error_response(
    url: str, description: str | None, code: str | None = None
) -> ErrorResponse:
    """Assemble an ErrorResponse, falling back to the generic description."""
    return ErrorResponse(
        url=url,
        code=code or None,
        description=description or GENERIC_DESCRIPTION,
    )
