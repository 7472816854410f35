"""List grants use case."""

from uuid import UUID

from fileshare.application.services.access_guard import AccessGuard
from fileshare.domain.entities import PermissionGrant
from fileshare.domain.value_objects import PermissionLevel


class ListGrantsUseCase:
    """List all grants on a resource. Owner only, so grants are not enumerable by others."""

    def __init__(self, unit_of_work_factory: type, access_guard: AccessGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = access_guard

    async def execute(self, actor_id: str, resource_id: UUID) -> list[PermissionGrant]:
        await self._guard.enforce(actor_id, resource_id, PermissionLevel.OWNER)
        async with self._uow_factory() as uow:
            return await uow.grants.list_by_resource(resource_id)
