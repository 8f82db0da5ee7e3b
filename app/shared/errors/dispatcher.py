"""
Error dispatcher.

Selects exactly one handling rule for a failure and turns it into a
status code plus ErrorResponse. Rules are an explicit ordered list of
(predicate, handler) pairs evaluated most specific first; the last rule
matches everything, so every failure gets exactly one response.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, cast

import httpx

from app.domain.errors import ApplicationError, ErrorKind
from app.shared.errors.conditions import (
    AccessDenied,
    InvalidFields,
    MethodNotAllowed,
    NotAuthenticated,
    ParameterTypeMismatch,
    RouteNotFound,
    UnmetParameterConditions,
    UnreadableBody,
    UnsupportedMediaType,
)
from app.shared.errors.disclosure import DisclosurePolicy
from app.shared.errors.response import ErrorResponse, build_error_response

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_405 = 405
HTTP_415 = 415
HTTP_500 = 500

UNREADABLE_BODY_DESCRIPTION = "Http message was not readable"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching one failure.

    ``headers`` carries protocol headers the status requires
    (``Allow`` for 405, ``WWW-Authenticate`` for 401).
    """

    status_code: int
    body: ErrorResponse
    rule: str
    headers: dict[str, str] = field(default_factory=dict)

    def content(self) -> dict[str, str]:
        return self.body.content()


@dataclass(frozen=True)
class HandlingRule:
    """A named (predicate, handler) pair."""

    name: str
    matches: Callable[[BaseException], bool]
    handle: Callable[[BaseException, str], DispatchResult]


def _is_kind(kind: ErrorKind) -> Callable[[BaseException], bool]:
    def matches(failure: BaseException) -> bool:
        return isinstance(failure, ApplicationError) and failure.kind is kind

    return matches


def _is_instance(*types: type) -> Callable[[BaseException], bool]:
    def matches(failure: BaseException) -> bool:
        return isinstance(failure, types)

    return matches


def _always(_failure: BaseException) -> bool:
    return True


class ErrorDispatcher:
    """Map any failure to a single client-safe response.

    Args:
        logger: Diagnostic logger. Defaults to this module's logger.

    Example:
        >>> dispatcher = ErrorDispatcher()
        >>> result = dispatcher.dispatch(
        ...     ApplicationError.forbidden("Forbidden request"),
        ...     "http://localhost/test",
        ... )
        >>> result.status_code
        403
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._policy = DisclosurePolicy(logger or logging.getLogger(__name__))
        self._rules = self._build_rules()

    @property
    def rules(self) -> tuple[HandlingRule, ...]:
        return self._rules

    def rule_for(self, failure: BaseException) -> HandlingRule:
        """Return the first rule matching the failure."""
        return next(rule for rule in self._rules if rule.matches(failure))

    def dispatch(self, failure: BaseException, url: str) -> DispatchResult:
        """Translate a failure raised while serving ``url`` into a response."""
        return self.rule_for(failure).handle(failure, url)

    def _build_rules(self) -> tuple[HandlingRule, ...]:
        application_rules = tuple(
            HandlingRule(
                name=f"application.{kind.name.lower()}",
                matches=_is_kind(kind),
                handle=self._handle_application_error,
            )
            for kind in ErrorKind
        )
        condition_rules = (
            HandlingRule(
                "condition.method_not_allowed",
                _is_instance(MethodNotAllowed),
                self._handle_method_not_allowed,
            ),
            HandlingRule(
                "condition.unsupported_media_type",
                _is_instance(UnsupportedMediaType),
                self._handle_unsupported_media_type,
            ),
            HandlingRule(
                "condition.unreadable_body",
                _is_instance(UnreadableBody),
                self._handle_unreadable_body,
            ),
            HandlingRule(
                "condition.invalid_fields",
                _is_instance(InvalidFields),
                self._handle_invalid_fields,
            ),
            HandlingRule(
                "condition.parameter_type_mismatch",
                _is_instance(ParameterTypeMismatch),
                self._handle_parameter_type_mismatch,
            ),
            HandlingRule(
                "condition.unmet_parameter_conditions",
                _is_instance(UnmetParameterConditions),
                self._handle_unmet_parameter_conditions,
            ),
            HandlingRule(
                "condition.route_not_found",
                _is_instance(RouteNotFound),
                self._handle_route_not_found,
            ),
            HandlingRule(
                "condition.not_authenticated",
                _is_instance(NotAuthenticated),
                self._handle_not_authenticated,
            ),
            HandlingRule(
                "condition.access_denied",
                _is_instance(AccessDenied),
                self._handle_access_denied,
            ),
        )
        return (
            *application_rules,
            *condition_rules,
            HandlingRule(
                "downstream", _is_instance(httpx.HTTPError), self._handle_downstream
            ),
            HandlingRule("unexpected", _always, self._handle_unexpected),
        )

    # ── Application errors ────────────────────────────────────────────

    def _handle_application_error(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        error = cast(ApplicationError, failure)
        if error.kind is ErrorKind.INTERNAL_SERVER_ERROR:
            description = self._policy.disclose_observed(error)
        else:
            description = self._policy.disclose(error.description)
        return self._result(
            f"application.{error.kind.name.lower()}",
            error.status_code,
            url,
            description,
            code=error.code,
        )

    # ── Framework conditions ──────────────────────────────────────────

    def _handle_method_not_allowed(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(MethodNotAllowed, failure)
        headers = {"Allow": ", ".join(condition.allowed)} if condition.allowed else {}
        return self._client_fault(
            "condition.method_not_allowed",
            condition,
            HTTP_405,
            url,
            condition.message,
            headers=headers,
        )

    def _handle_unsupported_media_type(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(UnsupportedMediaType, failure)
        return self._client_fault(
            "condition.unsupported_media_type",
            condition,
            HTTP_415,
            url,
            condition.message,
        )

    def _handle_unreadable_body(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        return self._client_fault(
            "condition.unreadable_body",
            failure,
            HTTP_400,
            url,
            UNREADABLE_BODY_DESCRIPTION,
        )

    def _handle_invalid_fields(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(InvalidFields, failure)
        description = ", ".join(
            f"{error.field} {error.message}" for error in condition.errors
        )
        return self._client_fault(
            "condition.invalid_fields", condition, HTTP_400, url, description
        )

    def _handle_parameter_type_mismatch(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(ParameterTypeMismatch, failure)
        description = (
            f"Parameter value '{condition.value}' is not valid "
            f"for request parameter '{condition.name}'"
        )
        return self._client_fault(
            "condition.parameter_type_mismatch", condition, HTTP_400, url, description
        )

    def _handle_unmet_parameter_conditions(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(UnmetParameterConditions, failure)
        description = "Parameter conditions not met for request: " + ",".join(
            condition.conditions
        )
        return self._client_fault(
            "condition.unmet_parameter_conditions",
            condition,
            HTTP_400,
            url,
            description,
        )

    def _handle_route_not_found(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(RouteNotFound, failure)
        description = f"No handler found for {condition.method} {condition.path}"
        return self._client_fault(
            "condition.route_not_found", condition, HTTP_404, url, description
        )

    def _handle_not_authenticated(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(NotAuthenticated, failure)
        headers = (
            {"WWW-Authenticate": condition.challenge} if condition.challenge else {}
        )
        return self._client_fault(
            "condition.not_authenticated",
            condition,
            HTTP_401,
            url,
            condition.message,
            headers=headers,
        )

    def _handle_access_denied(
        self, failure: BaseException, url: str
    ) -> DispatchResult:
        condition = cast(AccessDenied, failure)
        return self._client_fault(
            "condition.access_denied", condition, HTTP_403, url, condition.message
        )

    # ── Server faults ─────────────────────────────────────────────────

    def _handle_downstream(self, failure: BaseException, url: str) -> DispatchResult:
        description = self._policy.withhold_downstream(cast(httpx.HTTPError, failure))
        return self._result("downstream", HTTP_500, url, description)

    def _handle_unexpected(self, failure: BaseException, url: str) -> DispatchResult:
        description = self._policy.withhold(failure)
        return self._result("unexpected", HTTP_500, url, description)

    # ── Helpers ───────────────────────────────────────────────────────

    def _client_fault(
        self,
        rule: str,
        failure: BaseException,
        status_code: int,
        url: str,
        description: str,
        headers: dict[str, str] | None = None,
    ) -> DispatchResult:
        self._policy.note_client_fault(rule, failure)
        return self._result(
            rule,
            status_code,
            url,
            self._policy.disclose(description),
            headers=headers,
        )

    @staticmethod
    def _result(
        rule: str,
        status_code: int,
        url: str,
        description: str,
        code: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> DispatchResult:
        return DispatchResult(
            status_code=status_code,
            body=build_error_response(url, description, code=code),
            rule=rule,
            headers=dict(headers or {}),
        )
