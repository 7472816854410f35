"""Update resource use case."""

from datetime import UTC, datetime
from uuid import UUID

from fileshare.application.dto.resource_dto import ResourceUpdateInput
from fileshare.domain.entities import Resource
from fileshare.domain.exceptions import NotFound, ValidationError


class UpdateResourceUseCase:
    """Update resource metadata. Write access is enforced at the request boundary."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, resource_id: UUID, input_data: ResourceUpdateInput) -> Resource:
        """Apply the non-None fields of input_data. Owner cannot be changed."""
        if input_data.name is not None and (
            not isinstance(input_data.name, str) or not input_data.name.strip()
        ):
            raise ValidationError("Resource name must be a non-empty string")
        if input_data.mimetype is not None and not isinstance(input_data.mimetype, str):
            raise ValidationError("Resource mimetype must be a string")
        if input_data.size is not None and input_data.size < 0:
            raise ValidationError("Resource size must not be negative")

        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id)
            if not resource:
                raise NotFound("Resource", str(resource_id))

            if input_data.name is not None:
                resource.name = input_data.name.strip()
            if input_data.mimetype is not None:
                resource.mimetype = input_data.mimetype
            if input_data.size is not None:
                resource.size = input_data.size
            resource.updated_at = datetime.now(UTC)
            await uow.resources.update(resource)
            return resource
