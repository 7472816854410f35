"""Permission grant API resources."""

from uuid import UUID

import falcon.asgi

from fileshare.application.use_cases.grant.list_grants import ListGrantsUseCase
from fileshare.application.use_cases.grant.revoke_grant import RevokeGrantUseCase
from fileshare.application.use_cases.grant.set_grant import SetGrantUseCase
from fileshare.domain.exceptions import (
    EvaluationUnavailable,
    Forbidden,
    NotFound,
    StoreUnavailable,
    Unauthenticated,
    ValidationError,
)
from fileshare.domain.value_objects import PermissionLevel
from fileshare.interfaces.api.middleware.access_guard import requires
from fileshare.interfaces.api.resources.serializers import grant_to_dict


def _error_response(resp: falcon.asgi.Response, exc: Exception) -> None:
    if isinstance(exc, Unauthenticated):
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    elif isinstance(exc, EvaluationUnavailable):
        resp.status = falcon.HTTP_503
        resp.media = {"error": "Authorization unavailable"}
    elif isinstance(exc, StoreUnavailable):
        resp.status = falcon.HTTP_503
        resp.media = {"error": "Storage unavailable"}
    else:
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}


class PermissionsResource:
    """GET/POST /v1/resources/{resource_id}/permissions - list and set grants."""

    def __init__(self, list_grants: ListGrantsUseCase, set_grant: SetGrantUseCase) -> None:
        self._list = list_grants
        self._set = set_grant

    @requires(PermissionLevel.OWNER)
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """List grants on resource."""
        try:
            grants = await self._list.execute(req.context.principal_id, UUID(resource_id))
        except (Unauthenticated, Forbidden, EvaluationUnavailable, StoreUnavailable) as e:
            _error_response(resp, e)
            return

        resp.media = {"items": [grant_to_dict(g) for g in grants]}
        resp.status = falcon.HTTP_200

    @requires(PermissionLevel.OWNER)
    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Set one grant ({principal_id, level}) or several ({permissions: [...]}).

        level "none" removes the grant.
        """
        try:
            body = await req.get_media()
            if "permissions" in body:
                entries = [(p["principal_id"], p["level"]) for p in body["permissions"]]
            else:
                entries = [(body["principal_id"], body["level"])]
        except (KeyError, TypeError, AttributeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            results = await self._set.execute_many(
                req.context.principal_id, UUID(resource_id), entries
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return
        except (Unauthenticated, Forbidden, EvaluationUnavailable, StoreUnavailable) as e:
            _error_response(resp, e)
            return

        resp.media = {
            "items": [
                {
                    "principal_id": principal_id,
                    "level": grant.level.value if grant else "none",
                }
                for (principal_id, _), grant in zip(entries, results)
            ]
        }
        resp.status = falcon.HTTP_200


class PermissionRevokeResource:
    """DELETE /v1/resources/{resource_id}/permissions/{principal_id} - revoke grant."""

    def __init__(self, revoke_grant: RevokeGrantUseCase) -> None:
        self._revoke = revoke_grant

    @requires(PermissionLevel.OWNER)
    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        principal_id: str,
    ) -> None:
        """Revoke grant for principal on resource."""
        try:
            await self._revoke.execute(req.context.principal_id, UUID(resource_id), principal_id)
        except (Unauthenticated, Forbidden, EvaluationUnavailable, StoreUnavailable) as e:
            _error_response(resp, e)
            return

        resp.status = falcon.HTTP_204
