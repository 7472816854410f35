"""Access check API resource."""

from uuid import UUID

import falcon.asgi

from fileshare.application.use_cases.access.check_access import CheckAccessUseCase
from fileshare.domain.exceptions import EvaluationUnavailable
from fileshare.domain.value_objects import PermissionLevel


class AccessCheckResource:
    """POST /v1/access/check - report the caller's own access to a resource.

    The denial reason is not returned, so the endpoint cannot be used to
    probe which resources exist.
    """

    def __init__(self, check_access: CheckAccessUseCase) -> None:
        self._check = check_access

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            resource_id = UUID(str(body["resource_id"]))
            level = PermissionLevel(body.get("level", PermissionLevel.READ.value))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid request body: {e}"}
            return

        try:
            decision = await self._check.execute(user.user_id, resource_id, level)
        except EvaluationUnavailable:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Authorization unavailable"}
            return

        resp.media = {
            "resource_id": str(resource_id),
            "level": level.value,
            "allowed": decision.allowed,
            "held_level": decision.held_level.value if decision.allowed else None,
        }
        resp.status = falcon.HTTP_200
