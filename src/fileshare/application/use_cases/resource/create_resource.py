"""Create resource use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from fileshare.application.dto.resource_dto import ResourceCreateInput
from fileshare.domain.entities import Resource
from fileshare.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class CreateResourceUseCase:
    """Register a resource owned by the creating principal."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, owner_id: str, input_data: ResourceCreateInput) -> Resource:
        """Create resource. Ownership is implicit; no grant row is written for the owner."""
        if not isinstance(input_data.name, str) or not input_data.name.strip():
            raise ValidationError("Resource name is required")
        if input_data.mimetype is not None and not isinstance(input_data.mimetype, str):
            raise ValidationError("Resource mimetype must be a string")
        name = input_data.name.strip()
        if input_data.size < 0:
            raise ValidationError("Resource size must not be negative")

        now = datetime.now(UTC)
        resource = Resource(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            mimetype=input_data.mimetype,
            size=input_data.size,
            created_at=now,
            updated_at=now,
        )
        async with self._uow_factory() as uow:
            await uow.resources.create(resource)

        logger.info("Created resource %s owned by %s", resource.id, owner_id)
        return resource
