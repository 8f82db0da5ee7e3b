"""
Shared fixtures for error translation tests.

Builds a small FastAPI application whose routes raise every kind of
failure the error handlers must translate. The operation invoked by
``POST /test`` is a mock, so each test decides what it raises.
"""

from enum import Enum
from unittest.mock import MagicMock

import pytest
from fastapi import APIRouter, Depends, FastAPI, Form, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from app.interfaces.preconditions import require_content_type
from app.shared.errors import ErrorDispatcher, register_error_handlers


class Choice(str, Enum):
    VALUE = "VALUE"


class Payload(BaseModel):
    value: str = Field(..., min_length=1)


def build_test_app(
    operation: MagicMock, dispatcher: ErrorDispatcher | None = None
) -> FastAPI:
    """Build an app exposing routes that exercise the error handlers."""
    app = FastAPI()
    register_error_handlers(app, dispatcher)

    router = APIRouter()

    @router.post(
        "/test",
        dependencies=[Depends(require_content_type("application/json"))],
    )
    def post_payload(payload: Payload) -> dict[str, str]:
        operation.action()
        return {"value": payload.value}

    @router.get("/test")
    def get_with_param(param: str) -> dict[str, str]:
        return {"param": param}

    @router.get("/test/enum")
    def get_with_enum(choice: Choice = Query(..., alias="enum")) -> dict[str, str]:
        return {"enum": choice.value}

    @router.post("/form")
    def post_form(name: str = Form(...)) -> dict[str, str]:
        return {"name": name}

    @router.get("/secure")
    def get_secure(
        credentials: HTTPAuthorizationCredentials = Depends(HTTPBearer()),
    ) -> dict[str, str]:
        return {"scheme": credentials.scheme}

    app.include_router(router)
    return app


@pytest.fixture
def operation() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(operation: MagicMock) -> TestClient:
    return TestClient(build_test_app(operation), raise_server_exceptions=False)
