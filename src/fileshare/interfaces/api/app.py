"""Falcon ASGI application."""

import logging
from dataclasses import dataclass

import falcon
import falcon.asgi
from falcon.asgi import App

from fileshare.interfaces.api.resources.access import AccessCheckResource
from fileshare.interfaces.api.resources.health import HealthResource
from fileshare.interfaces.api.resources.permissions import (
    PermissionRevokeResource,
    PermissionsResource,
)
from fileshare.interfaces.api.resources.resources import ResourceItemResource, ResourcesResource

logger = logging.getLogger(__name__)


@dataclass
class ApiResources:
    """Routed API resources."""

    resources: ResourcesResource
    resource_item: ResourceItemResource
    permissions: PermissionsResource
    permission_revoke: PermissionRevokeResource
    access_check: AccessCheckResource
    health: HealthResource


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled errors and answer 500 without leaking internals."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal Server Error"}


def create_app(api: ApiResources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes.

    middleware must place AuthMiddleware before AccessGuardMiddleware.
    """
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)

    app.add_route("/v1/health", api.health)
    app.add_route("/v1/health/ready", api.health, suffix="ready")
    app.add_route("/v1/resources", api.resources)
    app.add_route("/v1/resources/{resource_id}", api.resource_item)
    app.add_route("/v1/resources/{resource_id}/permissions", api.permissions)
    app.add_route(
        "/v1/resources/{resource_id}/permissions/{principal_id}",
        api.permission_revoke,
    )
    app.add_route("/v1/access/check", api.access_check)
    return app
