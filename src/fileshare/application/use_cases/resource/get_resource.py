"""Get resource use case."""

from uuid import UUID

from fileshare.domain.entities import Resource
from fileshare.domain.exceptions import NotFound


class GetResourceUseCase:
    """Get resource metadata. Read access is enforced at the request boundary."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, resource_id: UUID) -> Resource:
        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id)
        if not resource:
            raise NotFound("Resource", str(resource_id))
        return resource
