"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from fileshare.application.services.access_guard import AccessGuard
from fileshare.infrastructure.permission.permission_evaluator import StorePermissionEvaluator
from fileshare.interfaces.api.app import create_app
from fileshare.interfaces.api.middleware.access_guard import AccessGuardMiddleware
from fileshare.interfaces.api.middleware.auth import AuthMiddleware
from fileshare.main import build_api


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app over in-memory stores, trusting bearer tokens as principal ids."""
    evaluator = StorePermissionEvaluator(uow_factory)
    guard = AccessGuard(evaluator)
    api = build_api(uow_factory, guard, evaluator)
    return create_app(
        api,
        middleware=[
            AuthMiddleware(trust_bearer_subject=True),
            AccessGuardMiddleware(guard),
        ],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
