"""Set grant use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from fileshare.application.services.access_guard import AccessGuard
from fileshare.domain.entities import PermissionGrant
from fileshare.domain.exceptions import NotFound, ValidationError
from fileshare.domain.value_objects import PermissionLevel, parse_grant_level

logger = logging.getLogger(__name__)

GrantLevelInput = PermissionLevel | str | None


class SetGrantUseCase:
    """Create, replace or clear a principal's grant on a resource. Owner only."""

    def __init__(self, unit_of_work_factory: type, access_guard: AccessGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = access_guard

    async def execute(
        self,
        actor_id: str,
        resource_id: UUID,
        principal_id: str,
        level: GrantLevelInput,
    ) -> PermissionGrant | None:
        """Set principal's level on resource. None or "none" removes the grant.

        Returns the stored grant, or None when no row remains (cleared, or the
        target is the owner, who needs no grant).
        """
        _check_principal(principal_id)
        target_level = _normalize_level(level)
        await self._guard.enforce(actor_id, resource_id, PermissionLevel.OWNER)
        return await self._apply(actor_id, resource_id, principal_id, target_level)

    async def execute_many(
        self,
        actor_id: str,
        resource_id: UUID,
        entries: list[tuple[str, GrantLevelInput]],
    ) -> list[PermissionGrant | None]:
        """Set several grants on one resource.

        Every pair is validated before the owner check and before any write.
        Each pair is then written in its own transaction; a store failure part
        way leaves earlier pairs applied.
        """
        normalized = [
            (_check_principal(principal_id), _normalize_level(level))
            for principal_id, level in entries
        ]
        await self._guard.enforce(actor_id, resource_id, PermissionLevel.OWNER)
        results = []
        for principal_id, target_level in normalized:
            results.append(await self._apply(actor_id, resource_id, principal_id, target_level))
        return results

    async def _apply(
        self,
        actor_id: str,
        resource_id: UUID,
        principal_id: str,
        level: PermissionLevel | None,
    ) -> PermissionGrant | None:
        async with self._uow_factory() as uow:
            owner_id = await uow.resources.find_owner(resource_id)
            if owner_id is None:
                raise NotFound("Resource", str(resource_id))
            if principal_id == owner_id:
                logger.info(
                    "Ignoring grant for owner %s on resource %s", principal_id, resource_id
                )
                return None

            if level is None:
                removed = await uow.grants.delete_grant(resource_id, principal_id)
                if removed:
                    logger.info("Cleared grant for %s on resource %s", principal_id, resource_id)
                return None

            now = datetime.now(UTC)
            grant = await uow.grants.upsert_grant(
                PermissionGrant(
                    resource_id=resource_id,
                    principal_id=principal_id,
                    level=level,
                    created_at=now,
                    updated_at=now,
                    created_by=actor_id,
                )
            )
            logger.info(
                "Granted %s to %s on resource %s", grant.level, principal_id, resource_id
            )
            return grant


def _check_principal(principal_id: object) -> str:
    if not isinstance(principal_id, str) or not principal_id.strip():
        raise ValidationError("Principal id must be a non-empty string")
    return principal_id


def _normalize_level(level: GrantLevelInput) -> PermissionLevel | None:
    if isinstance(level, PermissionLevel):
        if not level.is_grantable:
            raise ValidationError("Ownership cannot be granted")
        return level
    if level is None:
        return None
    return parse_grant_level(level)
