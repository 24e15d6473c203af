"""
tests.conftest

Shared pytest fixtures.
"""

from __future__ import annotations

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from specdoc.libs.specification_document import api_groups


@pytest.fixture()
def client():
    """
    TestClient on the service application, lifespan included.
    """
    from specdoc.api import app

    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client


@pytest.fixture()
def grouped_app() -> FastAPI:
    """
    Bare application with one route in the default group and two routes
    in the Admin group, one of which is also in the Audit group.
    """
    app = FastAPI(openapi_url=None, docs_url=None, redoc_url=None)
    router = APIRouter(tags=["Users"])

    @router.get("/users")
    def list_users():
        """List users."""
        return []

    @router.delete("/users/{user_id}", openapi_extra=api_groups("Admin"))
    def delete_user(user_id: int):
        return {"deleted": user_id}

    @router.get("/audit", openapi_extra=api_groups("Admin", "Audit"))
    def audit_trail():
        return []

    app.include_router(router)
    return app
