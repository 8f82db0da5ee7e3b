"""
Pydantic schemas for the service's own endpoints.

Error payloads live in app.shared.errors.response.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint.

    Attributes:
        status: Liveness marker, always "ok" when the app answers.
        service: Configured project name.
        version: Current API version string.
    """

    status: str
    service: str
    version: str
