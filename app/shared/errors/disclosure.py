"""
Disclosure policy for handled failures.

Decides which failure detail may reach the client and which is recorded
only in the service log. Application errors and framework conditions come
from trusted code and are disclosed as-is. Downstream and unclassified
failures are logged in full and replaced by the generic description.
"""

import logging

import httpx

from app.domain.errors import ApplicationError
from app.shared.errors.response import GENERIC_DESCRIPTION


class DisclosurePolicy:
    """Route failure detail to the client or to the log.

    Args:
        logger: Diagnostic logger receiving withheld detail.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def disclose(self, description: str | None) -> str:
        """Return trusted detail unchanged, or the fallback when empty."""
        return description or GENERIC_DESCRIPTION

    def disclose_observed(self, error: ApplicationError) -> str:
        """Disclose an internal server error while recording it at ERROR."""
        self._logger.error(
            "Handled internal server error: %s",
            error.description,
            exc_info=error,
        )
        return self.disclose(error.description)

    def withhold_downstream(self, exc: httpx.HTTPError) -> str:
        """Log the downstream status and body, return the generic description."""
        if isinstance(exc, httpx.HTTPStatusError):
            self._logger.error(
                "Downstream call failed with status: %s and response: %s",
                exc.response.status_code,
                exc.response.text,
                exc_info=exc,
            )
        else:
            self._logger.error(
                "Downstream call failed: %s: %s",
                type(exc).__name__,
                exc,
                exc_info=exc,
            )
        return GENERIC_DESCRIPTION

    def withhold(self, exc: BaseException) -> str:
        """Log an unclassified failure, return the generic description."""
        self._logger.error(
            "Unexpected error handled: %s: %s",
            type(exc).__name__,
            exc,
            exc_info=exc,
        )
        return GENERIC_DESCRIPTION

    def note_client_fault(self, rule: str, exc: BaseException) -> None:
        """Record a client-fault condition at DEBUG. Never disclosed."""
        self._logger.debug("Client fault (%s): %s", rule, exc)
