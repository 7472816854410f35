"""Revoke grant use case."""

import logging
from uuid import UUID

from fileshare.application.services.access_guard import AccessGuard
from fileshare.domain.value_objects import PermissionLevel

logger = logging.getLogger(__name__)


class RevokeGrantUseCase:
    """Remove a principal's grant on a resource. Owner only."""

    def __init__(self, unit_of_work_factory: type, access_guard: AccessGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = access_guard

    async def execute(self, actor_id: str, resource_id: UUID, principal_id: str) -> None:
        """Revoke grant for principal on resource. Revoking an absent grant is a no-op."""
        await self._guard.enforce(actor_id, resource_id, PermissionLevel.OWNER)

        async with self._uow_factory() as uow:
            removed = await uow.grants.delete_grant(resource_id, principal_id)

        if removed:
            logger.info("Revoked grant for %s on resource %s", principal_id, resource_id)
