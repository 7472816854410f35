"""Permission evaluator port - single source of access decisions."""

from typing import Protocol
from uuid import UUID

from fileshare.domain.value_objects import AccessDecision, PermissionLevel


class PermissionEvaluator(Protocol):
    """Port for deciding whether a principal holds a level on a resource."""

    async def evaluate(
        self, principal_id: str, resource_id: UUID, required_level: PermissionLevel
    ) -> AccessDecision: ...
