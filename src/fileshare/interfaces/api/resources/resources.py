"""Resource API resources."""

from uuid import UUID

import falcon.asgi

from fileshare.application.dto.resource_dto import ResourceCreateInput, ResourceUpdateInput
from fileshare.application.use_cases.resource.create_resource import CreateResourceUseCase
from fileshare.application.use_cases.resource.delete_resource import DeleteResourceUseCase
from fileshare.application.use_cases.resource.get_resource import GetResourceUseCase
from fileshare.application.use_cases.resource.list_resources import ListResourcesUseCase
from fileshare.application.use_cases.resource.update_resource import UpdateResourceUseCase
from fileshare.domain.exceptions import NotFound, StoreUnavailable, ValidationError
from fileshare.domain.value_objects import PermissionLevel
from fileshare.interfaces.api.middleware.access_guard import requires
from fileshare.interfaces.api.resources.serializers import resource_to_dict


def _store_unavailable(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Storage unavailable"}


class ResourcesResource:
    """GET/POST /v1/resources - list visible resources and register new ones."""

    def __init__(
        self,
        list_resources: ListResourcesUseCase,
        create_resource: CreateResourceUseCase,
    ) -> None:
        self._list = list_resources
        self._create = create_resource

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List resources the user owns or was granted."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        cursor = req.get_param("cursor")
        limit = req.get_param_as_int("limit") or 20
        try:
            items, next_cursor = await self._list.execute(
                user.user_id, cursor=cursor, limit=limit
            )
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid cursor"}
            return
        except StoreUnavailable:
            _store_unavailable(resp)
            return

        resp.media = {
            "items": [resource_to_dict(r) for r in items],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Register resource; the caller becomes its owner."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            input_data = ResourceCreateInput(
                name=body["name"],
                mimetype=body.get("mimetype"),
                size=int(body.get("size", 0)),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid request body: {e}"}
            return

        try:
            result = await self._create.execute(user.user_id, input_data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except StoreUnavailable:
            _store_unavailable(resp)
            return

        resp.media = resource_to_dict(result)
        resp.status = falcon.HTTP_201


class ResourceItemResource:
    """GET/PATCH/DELETE /v1/resources/{resource_id}."""

    def __init__(
        self,
        get_resource: GetResourceUseCase,
        update_resource: UpdateResourceUseCase,
        delete_resource: DeleteResourceUseCase,
    ) -> None:
        self._get = get_resource
        self._update = update_resource
        self._delete = delete_resource

    @requires(PermissionLevel.READ)
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Get resource metadata."""
        try:
            resource = await self._get.execute(UUID(resource_id))
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return
        except StoreUnavailable:
            _store_unavailable(resp)
            return

        resp.media = resource_to_dict(resource)
        resp.status = falcon.HTTP_200

    @requires(PermissionLevel.WRITE)
    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Update resource metadata."""
        try:
            body = await req.get_media()
            size = body.get("size")
            input_data = ResourceUpdateInput(
                name=body.get("name"),
                mimetype=body.get("mimetype"),
                size=int(size) if size is not None else None,
            )
        except (ValueError, TypeError, AttributeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid request body: {e}"}
            return

        try:
            resource = await self._update.execute(UUID(resource_id), input_data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return
        except StoreUnavailable:
            _store_unavailable(resp)
            return

        resp.media = resource_to_dict(resource)
        resp.status = falcon.HTTP_200

    @requires(PermissionLevel.OWNER)
    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Delete resource and all grants on it."""
        try:
            await self._delete.execute(UUID(resource_id))
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return
        except StoreUnavailable:
            _store_unavailable(resp)
            return

        resp.status = falcon.HTTP_204
