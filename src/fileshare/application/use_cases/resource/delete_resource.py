"""Delete resource use case."""

import logging
from uuid import UUID

from fileshare.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class DeleteResourceUseCase:
    """Remove a resource together with every grant on it.

    Ownership is enforced at the request boundary.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, resource_id: UUID) -> None:
        """Delete grants and resource in one transaction."""
        async with self._uow_factory() as uow:
            if await uow.resources.find_owner(resource_id) is None:
                raise NotFound("Resource", str(resource_id))
            removed = await uow.grants.delete_all_grants(resource_id)
            await uow.resources.delete(resource_id)

        logger.info("Deleted resource %s and %d grant(s)", resource_id, removed)
