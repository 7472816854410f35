"""Check access use case."""

from uuid import UUID

from fileshare.application.ports import PermissionEvaluator
from fileshare.domain.exceptions import Unauthenticated
from fileshare.domain.value_objects import AccessDecision, PermissionLevel


class CheckAccessUseCase:
    """Report the caller's own access decision for a resource without enforcing it."""

    def __init__(self, permission_evaluator: PermissionEvaluator) -> None:
        self._evaluator = permission_evaluator

    async def execute(
        self, principal_id: str, resource_id: UUID, level: PermissionLevel
    ) -> AccessDecision:
        if not principal_id:
            raise Unauthenticated("User not authenticated")
        return await self._evaluator.evaluate(principal_id, resource_id, level)
