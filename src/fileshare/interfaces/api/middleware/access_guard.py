"""Access guard middleware - enforces declared permission levels before responders run."""

from collections.abc import Callable
from typing import Any

import falcon
import falcon.asgi

from fileshare.application.services.access_guard import AccessGuard, resolve_resource_reference
from fileshare.domain.exceptions import EvaluationUnavailable, Forbidden, Unauthenticated
from fileshare.domain.value_objects import PermissionLevel

REQUIRED_LEVEL_ATTR = "__required_level__"
RESOURCE_ID_FIELD = "resource_id"


def requires(level: PermissionLevel) -> Callable:
    """Declare the permission level a responder needs on the target resource.

    Responders without the decorator declare no requirement and are only
    subject to authentication where they check it themselves.
    """

    def decorator(responder: Callable) -> Callable:
        setattr(responder, REQUIRED_LEVEL_ATTR, level)
        return responder

    return decorator


def required_level_for(resource: object, method: str) -> PermissionLevel | None:
    """Return the level declared on resource's responder for HTTP method, if any."""
    responder = getattr(resource, f"on_{method.lower()}", None)
    if responder is None:
        return None
    return getattr(responder, REQUIRED_LEVEL_ATTR, None)


class AccessGuardMiddleware:
    """Runs AccessGuard for every routed request whose responder declares a level.

    On success req.context.principal_id holds the resolved principal. On
    failure the response is completed here and the responder never runs.
    """

    def __init__(self, access_guard: AccessGuard, resource_id_field: str = RESOURCE_ID_FIELD) -> None:
        self._guard = access_guard
        self._field = resource_id_field

    async def process_resource(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource: Any,
        params: dict[str, Any],
    ) -> None:
        req.context.principal_id = None
        if resource is None:
            return

        level = required_level_for(resource, req.method)
        if level is None:
            return

        user = getattr(req.context, "user", None)
        principal_id = user.user_id if user else None
        resource_ref = None
        if principal_id:
            resource_ref = resolve_resource_reference(
                self._field,
                path_params=params,
                query_params=req.params,
                body=await self._json_body(req, params),
            )

        try:
            req.context.principal_id = await self._guard.enforce(principal_id, resource_ref, level)
        except Unauthenticated:
            _reject(resp, falcon.HTTP_401, "Unauthorized")
        except Forbidden:
            _reject(resp, falcon.HTTP_403, "Permission denied")
        except EvaluationUnavailable:
            _reject(resp, falcon.HTTP_503, "Authorization unavailable")

    async def _json_body(self, req: falcon.asgi.Request, params: dict[str, Any]) -> Any:
        """Read the JSON body only when path and query carry no reference."""
        if params.get(self._field) or req.get_param(self._field):
            return None
        if not req.content_length or "json" not in (req.content_type or ""):
            return None
        try:
            return await req.get_media()
        except falcon.MediaMalformedError:
            return None


def _reject(resp: falcon.asgi.Response, status: str, message: str) -> None:
    resp.status = status
    resp.media = {"error": message}
    resp.complete = True
