"""
Request preconditions expressed as FastAPI dependencies.

These raise framework conditions before the endpoint body runs, so the
centralized handlers report them like any other request-layer failure.
"""

from typing import Callable

from fastapi import Request

from app.shared.errors.conditions import UnsupportedMediaType


def require_content_type(*media_types: str) -> Callable[[Request], None]:
    """Build a dependency rejecting request bodies of other content types.

    Args:
        media_types: Accepted media types, e.g. ``"application/json"``.

    Returns:
        A dependency to use with ``Depends`` or a route's ``dependencies``.
    """
    accepted = {media_type.lower() for media_type in media_types}

    def check_content_type(request: Request) -> None:
        content_type = request.headers.get("content-type")
        if not content_type:
            return
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type not in accepted:
            raise UnsupportedMediaType(
                f"Content type '{media_type}' not supported",
                content_type=content_type,
            )

    return check_content_type
