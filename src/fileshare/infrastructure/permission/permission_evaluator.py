"""Permission evaluator implementation - ownership first, then the grant table."""

import logging
from uuid import UUID

from fileshare.domain.exceptions import EvaluationUnavailable, StoreUnavailable
from fileshare.domain.value_objects import AccessDecision, DenialReason, PermissionLevel

logger = logging.getLogger(__name__)


class StorePermissionEvaluator:
    """Decides access from resource ownership and the stored grant for the pair.

    Read-only: every call opens its own unit of work and reads the latest
    committed state. Nothing is cached between calls.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def evaluate(
        self, principal_id: str, resource_id: UUID, required_level: PermissionLevel
    ) -> AccessDecision:
        """Evaluate principal's access to resource at required_level.

        Denials are returned, not raised. Raises EvaluationUnavailable if the
        stores cannot be read.
        """
        try:
            async with self._uow_factory() as uow:
                owner_id = await uow.resources.find_owner(resource_id)
                if owner_id is None:
                    return AccessDecision.deny(required_level, DenialReason.RESOURCE_NOT_FOUND)

                if owner_id == principal_id:
                    return AccessDecision.allow(required_level, PermissionLevel.OWNER)

                if required_level is PermissionLevel.OWNER:
                    return AccessDecision.deny(required_level, DenialReason.NOT_OWNER)

                held = await uow.grants.find_grant(resource_id, principal_id)
        except StoreUnavailable as exc:
            logger.error(
                "Permission evaluation failed for resource %s: %s", resource_id, exc
            )
            raise EvaluationUnavailable("Permission store unavailable") from exc

        if held is None:
            return AccessDecision.deny(required_level, DenialReason.NO_GRANT)
        if held.satisfies(required_level):
            return AccessDecision.allow(required_level, held)
        return AccessDecision.deny(
            required_level, DenialReason.INSUFFICIENT_LEVEL, held_level=held
        )
